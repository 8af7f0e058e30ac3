"""
Base class of the facades over NetworkManager remote objects.


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
from nmdbus.dbus import DBusAccessor


class RemoteObject:
    """
    Local handle to a remote object.

    A handle only holds a :class:`nmdbus.dbus.DBusAccessor`: it doesn't
    cache any remote state, so every method is a round trip to
    NetworkManager. Depending on the accessor the handle was created with,
    methods either return the result or an awaitable resolving to it.

    Sub-classes bind the handle to the declaration of the remote interface
    they wrap by setting ``proxy_class``, which is then available through
    :attr:`raw`.

    Two handles are equal when they point to the same object path.
    """
    proxy_class = None

    def __init__(self, accessor: DBusAccessor):
        self._accessor = accessor

    def __repr__(self) -> str:
        return "{} <\"{}\">".format(str(self.__class__.__name__), self.object_path)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RemoteObject):
            return NotImplemented

        return self.object_path == other.object_path

    def __hash__(self) -> int:
        return hash(self.object_path)

    @property
    def object_path(self) -> str:
        """
            :return: dbus object path
            :rtype: str
        """
        return self._accessor.object_path

    @property
    def name(self) -> str:
        """
            :return: name of the object
            :rtype: str

        Usually the name of an object path is preceded by the last `/`
        within an object path string.
        """
        return str(self.object_path.split("/")[-1])

    @property
    def accessor(self) -> DBusAccessor:
        return self._accessor

    @property
    def raw(self) -> "nmdbus.raw.RemoteInterface":
        """
            :return: the remote interface declaration bound to this object
            :rtype: nmdbus.raw.RemoteInterface

        Use it to call the remote methods or read the remote properties
        that the facade does not wrap.
        """
        return self.proxy_class(self._accessor)
