"""
Facade over a NetworkManager connection profile.


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
from nmdbus.enum import ConnectionFlags, decode_flags
from nmdbus.marshal import SettingsMap, from_settings, optional_string, to_settings
from nmdbus.raw import SettingsConnectionProxy
from nmdbus.remote_object import RemoteObject


class Connection(RemoteObject):
    """
    A connection profile, exposed at `/org/freedesktop/NetworkManager/Settings/*`.

    See :meth:`nmdbus.device.Device.reapply` for the difference between a
    connection profile and an :class:`nmdbus.device.AppliedConnection`.
    """
    proxy_class = SettingsConnectionProxy

    def update(self, settings: SettingsMap):
        """
        Updates the connection with new settings and properties, replacing
        all previous ones, and saves the connection to disk.

        Secrets may be part of the update request, and will be either stored
        in persistent storage or sent to a Secret Agent for storage,
        depending on the flags associated with each secret.
        """
        return self.raw.Update(from_settings(settings))

    def update_in_memory(self, settings: SettingsMap):
        """
        Updates the connection with new settings and properties, replacing
        all previous ones, without saving the connection to disk.

        Use :meth:`save` to save these changes to disk. Unsaved changes are
        lost if the connection is reloaded from disk.
        """
        return self.raw.UpdateUnsaved(from_settings(settings))

    def delete(self):
        """Deletes the connection profile."""
        return self.raw.Delete()

    def settings(self) -> SettingsMap:
        """
            :return: the settings maps describing this network configuration
            :rtype: dict

        This never includes any secrets, which have to be requested
        separately with :meth:`secrets`.
        """
        return self.raw.GetSettings(transform=to_settings)

    def secrets(self) -> SettingsMap:
        """
            :return: the secrets of every setting of this connection
            :rtype: dict

        Only secrets from persistent storage or a Secret Agent running in
        the requestor's session are returned. The user is never prompted.
        """
        return self.secrets_for_setting("")

    def secrets_for_setting(self, setting_name: str) -> SettingsMap:
        """
            :param setting_name: name of the setting to return secrets for,
                ie `802-11-wireless-security`. An empty name means all settings.
            :type setting_name: str
            :return: the secrets of the given setting
            :rtype: dict
        """
        return self.raw.GetSecrets(setting_name, transform=to_settings)

    def clear_secrets(self):
        """Clears the secrets belonging to this connection profile."""
        return self.raw.ClearSecrets()

    def save(self):
        """Saves a connection previously updated with :meth:`update_in_memory` to disk."""
        return self.raw.Save()

    def is_saved(self) -> bool:
        """
            :return: whether the in-memory state of the connection matches
                the on-disk state
            :rtype: bool
        """
        return self.raw.Unsaved.get(transform=lambda unsaved: not unsaved)

    def flags(self) -> ConnectionFlags:
        return self.raw.Flags.get(transform=lambda value: decode_flags(ConnectionFlags, value))

    def filename(self):
        """
            :return: the file storing the connection, if it's file-backed
            :rtype: Optional[str]
        """
        return self.raw.Filename.get(transform=optional_string)
