"""
Exceptions raised by the NetworkManager facades.


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


class NetworkManagerError(Exception):
    """Base class for all the errors raised by this library."""
    def __init__(self, message, additional_context=None):
        self.message = message
        self.additional_context = additional_context
        super().__init__(self.message)


class TransportError(NetworkManagerError):
    """
    The remote call could not be completed: the bus connection was lost,
    the call timed out, the reply was malformed or the remote method failed.
    """
    def __init__(self, message, dbus_name=None, additional_context=None):
        self.dbus_name = dbus_name
        super().__init__(message, additional_context)

    @classmethod
    def from_dbus_exception(cls, exc: "dbus.exceptions.DBusException") -> "TransportError":
        """Wraps an exception raised by dbus-python."""
        return cls(
            exc.get_dbus_message() or str(exc),
            dbus_name=exc.get_dbus_name(),
            additional_context=exc
        )


class UnsupportedTypeError(NetworkManagerError):
    """
    NetworkManager returned a numeric code that is not part of the
    enumeration known by this library. This usually means that the daemon
    is newer than the library.
    """
    def __init__(self, enum, value):
        self.enum = enum
        self.value = value
        super().__init__(f"Unsupported {enum.__name__} value: {value}")


class MissingDestinationError(NetworkManagerError):
    """
    The remote object can't be resolved because no bus name was given
    and the interface does not declare a default one.
    """


class UnsupportedMethodError(NetworkManagerError):
    """The requested operation is intentionally not implemented."""
