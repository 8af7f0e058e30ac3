"""
Facade over bridge devices.


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

from nmdbus.device.device import Device, SpecializedDevice
from nmdbus.enum import DeviceType
from nmdbus.raw import DeviceBridgeProxy


class BridgeDevice(SpecializedDevice):
    """A bridge device."""
    proxy_class = DeviceBridgeProxy
    device_type = DeviceType.BRIDGE

    def hardware_address(self) -> str:
        return self.raw.HwAddress.get(transform=str)

    def carrier(self) -> bool:
        return self.raw.Carrier.get(transform=bool)

    def slaves(self) -> Iterator[Device]:
        """
            :return: the devices enslaved to the bridge
            :rtype: Iterator[Device]
        """
        def to_devices(paths):
            return (Device(self._accessor.with_path(path)) for path in paths)

        return self.raw.Slaves.get(transform=to_devices)
