"""
Facade over generic devices.


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
from nmdbus.device.device import SpecializedDevice
from nmdbus.enum import DeviceType
from nmdbus.raw import DeviceGenericProxy


class GenericDevice(SpecializedDevice):
    """A device NetworkManager manages without knowing much about it (e.g. a tun device)."""
    proxy_class = DeviceGenericProxy
    device_type = DeviceType.GENERIC

    def hardware_address(self) -> str:
        return self.raw.HwAddress.get(transform=str)

    def type_description(self) -> str:
        """A (non-localized) description of the interface type, if known."""
        return self.raw.TypeDescription.get(transform=str)
