"""
Python facade over the NetworkManager D-Bus API.


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
from nmdbus.exceptions import (
    NetworkManagerError, TransportError, UnsupportedTypeError,
    MissingDestinationError, UnsupportedMethodError
)
from nmdbus.networkmanager import NetworkManager
from nmdbus.settings import Settings
from nmdbus.connection import Connection
from nmdbus.device import (
    AccessPoint, AppliedConnection, BridgeDevice, Device, EthernetDevice,
    GenericDevice, SpecializedDevice, UnsupportedDevice, VethDevice, WirelessDevice
)
from nmdbus.ip4config import Ip4Config
from nmdbus.dhcp import Dhcp4Config, Dhcp6Config

__all__ = [
    "NetworkManagerError", "TransportError", "UnsupportedTypeError",
    "MissingDestinationError", "UnsupportedMethodError",
    "NetworkManager", "Settings", "Connection",
    "AccessPoint", "AppliedConnection", "BridgeDevice", "Device", "EthernetDevice",
    "GenericDevice", "SpecializedDevice", "UnsupportedDevice", "VethDevice", "WirelessDevice",
    "Ip4Config", "Dhcp4Config", "Dhcp6Config",
]
