"""
Facade over the IPv4 configuration of a device.


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
from typing import Dict, List

from nmdbus.marshal import to_dict_list, to_int_list, to_packed_tuples, to_str_list
from nmdbus.raw import IP4ConfigProxy
from nmdbus.remote_object import RemoteObject


class Ip4Config(RemoteObject):
    """
    IPv4 configuration of a device, exposed at
    `/org/freedesktop/NetworkManager/IP4Config/*`.

    The object is only valid while the device it belongs to is activated.
    All properties are read-only.
    """
    proxy_class = IP4ConfigProxy

    def address_data(self) -> List[Dict[str, object]]:
        """
            :return: the IPv4 addresses, each one containing at least the
                keys `address` and `prefix`
            :rtype: List[Dict[str, object]]
        """
        return self.raw.AddressData.get(transform=to_dict_list)

    def addresses(self) -> List[List[int]]:
        """
        Deprecated in favor of :meth:`address_data`.

            :return: tuples of IPv4 address, prefix, gateway, packed as
                32-bit integers in network byte order
            :rtype: List[List[int]]
        """
        return self.raw.Addresses.get(transform=to_packed_tuples)

    def route_data(self) -> List[Dict[str, object]]:
        return self.raw.RouteData.get(transform=to_dict_list)

    def routes(self) -> List[List[int]]:
        """Deprecated in favor of :meth:`route_data`."""
        return self.raw.Routes.get(transform=to_packed_tuples)

    def nameserver_data(self) -> List[Dict[str, object]]:
        return self.raw.NameserverData.get(transform=to_dict_list)

    def nameservers(self) -> List[int]:
        """Deprecated in favor of :meth:`nameserver_data`."""
        return self.raw.Nameservers.get(transform=to_int_list)

    def domains(self) -> List[str]:
        return self.raw.Domains.get(transform=to_str_list)

    def searches(self) -> List[str]:
        return self.raw.Searches.get(transform=to_str_list)

    def dns_options(self) -> List[str]:
        return self.raw.DnsOptions.get(transform=to_str_list)

    def dns_priority(self) -> int:
        """The relative priority of DNS servers. A lower value is a higher priority."""
        return self.raw.DnsPriority.get(transform=int)

    def gateway(self) -> str:
        return self.raw.Gateway.get(transform=str)

    def wins_server_data(self) -> List[str]:
        return self.raw.WinsServerData.get(transform=to_str_list)

    def wins_servers(self) -> List[int]:
        """Deprecated in favor of :meth:`wins_server_data`."""
        return self.raw.WinsServers.get(transform=to_int_list)
