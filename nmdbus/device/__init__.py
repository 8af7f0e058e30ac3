"""
Network devices managed by NetworkManager.


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
from nmdbus.device.device import AppliedConnection, Device, SpecializedDevice, UnsupportedDevice
from nmdbus.device.access_point import AccessPoint
from nmdbus.device.wireless import WirelessDevice
from nmdbus.device.wired import EthernetDevice
from nmdbus.device.generic import GenericDevice
from nmdbus.device.bridge import BridgeDevice
from nmdbus.device.veth import VethDevice

__all__ = [
    "AppliedConnection", "Device", "SpecializedDevice", "UnsupportedDevice",
    "AccessPoint", "WirelessDevice", "EthernetDevice", "GenericDevice",
    "BridgeDevice", "VethDevice",
]
