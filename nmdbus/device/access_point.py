"""
Facade over Wi-Fi access points.


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
from typing import Optional

from nmdbus.enum import (
    AccessPointCapabilityFlags, AccessPointSecurityFlags, WirelessMode,
    decode_enum, decode_flags
)
from nmdbus.marshal import optional_timestamp, to_bytes
from nmdbus.raw import AccessPointProxy
from nmdbus.remote_object import RemoteObject


class AccessPoint(RemoteObject):
    """
    A Wi-Fi access point, exposed at `/org/freedesktop/NetworkManager/AccessPoint/*`.

    Access points are obtained from :class:`nmdbus.device.WirelessDevice`.
    """
    proxy_class = AccessPointProxy

    def capability_flags(self) -> AccessPointCapabilityFlags:
        return self.raw.Flags.get(
            transform=lambda value: decode_flags(AccessPointCapabilityFlags, value)
        )

    def wpa_security_flags(self) -> AccessPointSecurityFlags:
        """Capabilities of the access point according to WPA (Wi-Fi Protected Access)."""
        return self.raw.WpaFlags.get(
            transform=lambda value: decode_flags(AccessPointSecurityFlags, value)
        )

    def rsn_security_flags(self) -> AccessPointSecurityFlags:
        """Capabilities of the access point according to RSN (Robust Secure Network)."""
        return self.raw.RsnFlags.get(
            transform=lambda value: decode_flags(AccessPointSecurityFlags, value)
        )

    def ssid(self) -> bytes:
        """
            :return: the SSID of the access point
            :rtype: bytes

        These are raw octets, which are often but not always valid UTF-8.
        The SSID is empty for hidden networks, and up to 32 bytes long.
        """
        return self.raw.Ssid.get(transform=to_bytes)

    def frequency(self) -> int:
        """The radio channel frequency in use by the access point, in MHz."""
        return self.raw.Frequency.get(transform=int)

    def bssid(self) -> str:
        """The hardware address (BSSID) of the access point."""
        return self.raw.HwAddress.get(transform=str)

    def mode(self) -> WirelessMode:
        return self.raw.Mode.get(transform=lambda value: decode_enum(WirelessMode, value))

    def max_bitrate(self) -> int:
        """The maximum bitrate this access point is capable of, in kilobits/second."""
        return self.raw.MaxBitrate.get(transform=int)

    def strength(self) -> int:
        """The current signal quality of the access point, in percent."""
        return self.raw.Strength.get(transform=int)

    def last_seen(self) -> Optional[int]:
        """
            :return: the last time the access point was found in scan results,
                in CLOCK_BOOTTIME seconds, or None if it was never found
            :rtype: Optional[int]
        """
        return self.raw.LastSeen.get(transform=lambda value: optional_timestamp(value, 32))
