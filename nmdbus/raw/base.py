"""
Building blocks for the declarations of remote D-Bus interfaces.


Copyright (c) 2023 Proton AG

This file is part of nmdbus.

nmdbus is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

nmdbus is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with nmdbus.  If not, see <https://www.gnu.org/licenses/>.
"""
from typing import Callable, Optional

from nmdbus.exceptions import UnsupportedMethodError
from nmdbus.marshal import wrap_variant


class RemoteMethod:
    """
    Declares a method of a remote interface.

    Accessing it on a bound :class:`RemoteInterface` returns a callable
    issuing the call, ie:

    .. code-block::

        DeviceProxy(accessor).Reapply(settings, version_id, 0)
    """
    def __init__(self, in_signature: str = "", out_signature: str = ""):
        self.in_signature = in_signature
        self.out_signature = out_signature
        self.name = None

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner):
        if instance is None:
            return self

        def call(*args, transform: Optional[Callable] = None):
            return instance.accessor.call_method(
                owner, self.name, args, self.in_signature or None, transform
            )

        return call


class RemoteProperty:
    """
    Declares a property of a remote interface.

    Accessing it on a bound :class:`RemoteInterface` returns a
    :class:`BoundProperty`.
    """
    def __init__(self, signature: str, writable: bool = False):
        self.signature = signature
        self.writable = writable
        self.name = None

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner):
        if instance is None:
            return self

        return BoundProperty(instance, owner, self)


class BoundProperty:
    """A property declaration bound to a remote object."""
    def __init__(self, remote_interface: "RemoteInterface", owner, declaration: RemoteProperty):
        self.__remote_interface = remote_interface
        self.__owner = owner
        self.__declaration = declaration

    def get(self, transform: Optional[Callable] = None):
        """Reads the property value."""
        return self.__remote_interface.accessor.get_property(
            self.__owner, self.__declaration.name, transform
        )

    def set(self, value, transform: Optional[Callable] = None):
        """
        Writes the property value.

            :raises UnsupportedMethodError: if the property is read-only
        """
        accessor = self.__remote_interface.accessor
        if not self.__declaration.writable:
            return accessor.fail(UnsupportedMethodError(
                f"{self.__owner.interface_name}.{self.__declaration.name} is read-only"
            ))

        return accessor.set_property(
            self.__owner, self.__declaration.name,
            wrap_variant(value, self.__declaration.signature), transform
        )


class RemoteInterface:
    """
    Base class of the remote interface declarations.

    Sub-classes declare the interface name, the bus name hosting it by
    default, and its methods and properties. Binding a declaration to a
    :class:`nmdbus.dbus.DBusAccessor` gives a proxy for the object the
    accessor points to.
    """
    interface_name = None
    default_destination = None

    def __init__(self, accessor: "nmdbus.dbus.DBusAccessor"):
        self.accessor = accessor

    def __repr__(self) -> str:
        return "{} <\"{}\">".format(str(self.__class__.__name__), self.accessor.object_path)
