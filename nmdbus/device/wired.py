"""
Facade over Ethernet devices.


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
from typing import List

from nmdbus.device.device import SpecializedDevice
from nmdbus.enum import DeviceType
from nmdbus.marshal import to_str_list
from nmdbus.raw import DeviceWiredProxy


class EthernetDevice(SpecializedDevice):
    """A wired Ethernet device."""
    proxy_class = DeviceWiredProxy
    device_type = DeviceType.ETHERNET

    def hardware_address(self) -> str:
        """
            :return: the active hardware address of the device
            :rtype: str
        """
        return self.raw.HwAddress.get(transform=str)

    def permanent_hardware_address(self) -> str:
        return self.raw.PermHwAddress.get(transform=str)

    def speed(self) -> int:
        """Design speed of the device, in megabits/second (Mb/s)."""
        return self.raw.Speed.get(transform=int)

    def s390_subchannels(self) -> List[str]:
        """
            :return: the IBM s390 subchannels of the device, if any
            :rtype: List[str]
        """
        return self.raw.S390Subchannels.get(transform=to_str_list)

    def carrier(self) -> bool:
        """Indicates whether the physical carrier is found (e.g. whether a cable is plugged in or not)."""
        return self.raw.Carrier.get(transform=bool)
