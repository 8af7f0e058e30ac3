"""
Facade over the NetworkManager settings service.


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
from typing import Iterator

from nmdbus.connection import Connection
from nmdbus.dbus import DBusAccessor
from nmdbus.marshal import SettingsMap, from_settings
from nmdbus.raw import SettingsProxy
from nmdbus.remote_object import RemoteObject

SETTINGS_BUS = "org.freedesktop.NetworkManager"
SETTINGS_PATH = "/org/freedesktop/NetworkManager/Settings"


class Settings(RemoteObject):
    """
    Provides an easy way to talk to the `/org/freedesktop/NetworkManager/Settings` dbus object,
    which stores the connection profiles.

    .. code-block::

        from nmdbus import NetworkManager

        settings = NetworkManager.new().settings()
        for connection in settings.list_connections():
            print(connection.settings()["connection"]["id"])
    """
    proxy_class = SettingsProxy

    @classmethod
    def from_accessor(cls, accessor: DBusAccessor) -> "Settings":
        """Creates the facade sharing the bus connection of the given accessor."""
        return cls(accessor.with_bus_and_path(SETTINGS_BUS, SETTINGS_PATH))

    def _path_to_connection(self, path) -> Connection:
        return Connection(self._accessor.with_path(path))

    def _paths_to_connections(self, paths) -> Iterator[Connection]:
        return (self._path_to_connection(path) for path in paths)

    def list_connections(self) -> Iterator[Connection]:
        """
            :return: all the connection profiles known to NetworkManager
            :rtype: Iterator[Connection]
        """
        return self.raw.ListConnections(transform=self._paths_to_connections)

    def get_connection_by_uuid(self, uuid: str) -> Connection:
        """
            :param uuid: UUID of the connection profile
            :type uuid: str
            :return: the connection profile
            :rtype: Connection
            :raises TransportError: if there is no such connection
        """
        return self.raw.GetConnectionByUuid(uuid, transform=self._path_to_connection)

    def add_connection(self, settings: SettingsMap) -> Connection:
        """
        Adds a new connection profile and saves it to disk.

            :param settings: connection settings and properties
            :type settings: dict
            :return: the new connection profile
            :rtype: Connection
        """
        return self.raw.AddConnection(
            from_settings(settings), transform=self._path_to_connection
        )

    def add_connection_unsaved(self, settings: SettingsMap) -> Connection:
        """
        Adds a new connection profile without saving it to disk. Use
        :meth:`Connection.save` to persist it.
        """
        return self.raw.AddConnectionUnsaved(
            from_settings(settings), transform=self._path_to_connection
        )

    def reload_connections(self) -> bool:
        """
        Tells NetworkManager to reload all connection files from disk.

            :return: always true
            :rtype: bool
        """
        return self.raw.ReloadConnections(transform=bool)

    def can_modify(self) -> bool:
        """Whether adding and modifying connections is supported."""
        return self.raw.CanModify.get(transform=bool)

    def hostname(self) -> str:
        return self.raw.Hostname.get(transform=str)
