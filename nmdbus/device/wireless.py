"""
Facade over Wi-Fi devices.


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
from typing import Iterable, Iterator, Optional

import dbus

from nmdbus.device.access_point import AccessPoint
from nmdbus.device.device import SpecializedDevice
from nmdbus.enum import DeviceType, WirelessCapabilityFlags, WirelessMode, decode_enum, decode_flags
from nmdbus.marshal import optional_path, optional_timestamp
from nmdbus.raw import DeviceWirelessProxy


class WirelessDevice(SpecializedDevice):
    """
    A Wi-Fi device.

    .. code-block::

        wireless = device.to_wireless()
        if wireless:
            wireless.request_scan()
            for access_point in wireless.get_all_access_points():
                print(access_point.ssid().decode("utf-8", errors="replace"))
    """
    proxy_class = DeviceWirelessProxy
    device_type = DeviceType.WIFI

    def _paths_to_access_points(self, paths) -> Iterator[AccessPoint]:
        return (AccessPoint(self._accessor.with_path(path)) for path in paths)

    def get_all_access_points(self) -> Iterator[AccessPoint]:
        """
            :return: all the access points visible to this device, including
                hidden ones, for which the SSID is not known
            :rtype: Iterator[AccessPoint]
        """
        return self.raw.GetAllAccessPoints(transform=self._paths_to_access_points)

    def access_points(self) -> Iterator[AccessPoint]:
        """
            :return: the access points visible to this device
            :rtype: Iterator[AccessPoint]
        """
        return self.raw.AccessPoints.get(transform=self._paths_to_access_points)

    def request_scan(self):
        """Requests a new scan for access points."""
        return self.raw.RequestScan(dbus.Dictionary({}, signature="sv"))

    def request_scan_with_ssids(self, ssids: Iterable[bytes]):
        """
        Requests a new scan for access points with the given SSIDs.

            :param ssids: SSIDs to scan for, as raw octets
            :type ssids: Iterable[bytes]
        """
        options = dbus.Dictionary({
            "ssids": dbus.Array(
                [dbus.ByteArray(bytes(ssid)) for ssid in ssids], signature="ay"
            )
        }, signature="sv")
        return self.raw.RequestScan(options)

    def permanent_hardware_address(self) -> str:
        return self.raw.PermHwAddress.get(transform=str)

    def mode(self) -> WirelessMode:
        """
            :return: the operating mode of the wireless device
            :rtype: WirelessMode
        """
        return self.raw.Mode.get(transform=lambda value: decode_enum(WirelessMode, value))

    def bitrate(self) -> int:
        """The current bit rate used by the device, in kilobits/second."""
        return self.raw.Bitrate.get(transform=int)

    def active_access_point(self) -> Optional[AccessPoint]:
        """
            :return: the access point currently used by the device, or None
                if the device is not associated
            :rtype: Optional[AccessPoint]
        """
        def to_access_point(path):
            path = optional_path(path)
            if path is None:
                return None
            return AccessPoint(self._accessor.with_path(path))

        return self.raw.ActiveAccessPoint.get(transform=to_access_point)

    def capabilities(self) -> WirelessCapabilityFlags:
        return self.raw.WirelessCapabilities.get(
            transform=lambda value: decode_flags(WirelessCapabilityFlags, value)
        )

    def last_scan(self) -> Optional[int]:
        """
            :return: the time of the last finished network scan in
                CLOCK_BOOTTIME seconds, or None if the device never scanned
            :rtype: Optional[int]
        """
        return self.raw.LastScan.get(transform=lambda value: optional_timestamp(value, 64))
