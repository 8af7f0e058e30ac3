"""
Facades over the DHCP configurations of a device.


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
from typing import Dict

from nmdbus.raw import DHCP4ConfigProxy, DHCP6ConfigProxy
from nmdbus.remote_object import RemoteObject


def _to_options(value) -> Dict[str, object]:
    return {str(key): option for key, option in value.items()}


class Dhcp4Config(RemoteObject):
    """Options and configuration returned by the IPv4 DHCP server."""
    proxy_class = DHCP4ConfigProxy

    def options(self) -> Dict[str, object]:
        """
            :return: the configuration options returned by the DHCP server
            :rtype: Dict[str, object]
        """
        return self.raw.Options.get(transform=_to_options)


class Dhcp6Config(RemoteObject):
    """Options and configuration returned by the IPv6 DHCP server."""
    proxy_class = DHCP6ConfigProxy

    def options(self) -> Dict[str, object]:
        return self.raw.Options.get(transform=_to_options)
