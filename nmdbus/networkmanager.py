"""
Facade over the NetworkManager root object.


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
import logging
from typing import Iterator

import dbus
import dbus.exceptions
from packaging.version import Version

from nmdbus.dbus import DBUS_TIMEOUT, AsyncDBusAccessor, BlockingDBusAccessor
from nmdbus.device import Device
from nmdbus.enum import ConnectivityState, NMState, ReloadFlag, decode_enum
from nmdbus.exceptions import TransportError, UnsupportedTypeError
from nmdbus.raw import NetworkManagerProxy
from nmdbus.remote_object import RemoteObject
from nmdbus.settings import Settings

logger = logging.getLogger(__name__)

NETWORK_MANAGER_BUS = "org.freedesktop.NetworkManager"
NETWORK_MANAGER_PATH = "/org/freedesktop/NetworkManager"


class NetworkManager(RemoteObject):
    """
    Provides an easy way to talk to the `/org/freedesktop/NetworkManager` dbus object.

    .. code-block::

        from nmdbus import NetworkManager

        nm = NetworkManager.new()
        for device in nm.get_devices():
            wireless = device.to_wireless()
            if wireless:
                print(wireless.bitrate())

    The same facade can be used from asyncio code, in which case every
    method returns an awaitable:

    .. code-block::

        nm = NetworkManager.new_async()
        for device in await nm.get_devices():
            print(await device.interface())
    """
    proxy_class = NetworkManagerProxy

    @classmethod
    def new(cls, timeout: float = DBUS_TIMEOUT) -> "NetworkManager":
        """
        Connects to the system bus. Every call blocks until the reply
        arrives or until `timeout` seconds elapsed.

            :raises TransportError: if the system bus is not reachable
        """
        try:
            connection = dbus.SystemBus()
        except dbus.exceptions.DBusException as exc:
            raise TransportError.from_dbus_exception(exc) from exc

        return cls.new_with_dbus(connection, timeout=timeout)

    @classmethod
    def new_async(cls) -> "NetworkManager":
        """
        Connects to the system bus, attaching the connection to the GLib
        main loop that delivers the replies. Every call returns an
        awaitable, so methods must be called from a running asyncio loop.

            :raises TransportError: if the system bus is not reachable
        """
        # pylint: disable=import-outside-toplevel
        from nmdbus.dbus.mainloop import MainLoopThread
        main_loop = MainLoopThread.ensure_running()
        try:
            # The shared system bus ignores the main loop when another
            # caller created it first, so the connection must be private.
            connection = dbus.SystemBus(mainloop=main_loop, private=True)
        except dbus.exceptions.DBusException as exc:
            raise TransportError.from_dbus_exception(exc) from exc

        return cls.new_with_dbus(connection, asynchronous=True)

    @classmethod
    def new_with_dbus(
            cls, connection: "dbus.bus.BusConnection",
            asynchronous: bool = False, timeout: float = DBUS_TIMEOUT
    ) -> "NetworkManager":
        """
        Uses an existing bus connection. To use it asynchronously, the
        connection must have been created with a main loop.
        """
        logger.debug("Creating NetworkManager facade (asynchronous=%s).", asynchronous)
        if asynchronous:
            accessor = AsyncDBusAccessor(
                connection, NETWORK_MANAGER_BUS, NETWORK_MANAGER_PATH
            )
        else:
            accessor = BlockingDBusAccessor(
                connection, NETWORK_MANAGER_BUS, NETWORK_MANAGER_PATH, timeout=timeout
            )

        return cls(accessor)

    def _paths_to_devices(self, paths) -> Iterator[Device]:
        return (Device(self._accessor.with_path(path)) for path in paths)

    def _path_to_device(self, path) -> Device:
        return Device(self._accessor.with_path(path))

    def reload(self, flags: ReloadFlag = ReloadFlag.ALL):
        """
        Reloads NetworkManager by the given scope.

            :param flags: what to reload
            :type flags: ReloadFlag
            :raises UnsupportedTypeError: if flags does not fit in 32 bits
        """
        value = int(flags)
        if not 0 <= value < 2 ** 32:
            return self._accessor.fail(UnsupportedTypeError(ReloadFlag, value))

        return self.raw.Reload(value)

    def get_devices(self) -> Iterator[Device]:
        """
            :return: the realized network devices
            :rtype: Iterator[Device]
        """
        return self.raw.GetDevices(transform=self._paths_to_devices)

    def get_all_devices(self) -> Iterator[Device]:
        """
            :return: all the network devices, including placeholders
                for software devices that do not exist yet
            :rtype: Iterator[Device]
        """
        return self.raw.GetAllDevices(transform=self._paths_to_devices)

    def get_device_by_ip_iface(self, iface: str) -> Device:
        """
            :param iface: the IP interface name of the device, ie `eth0`
            :type iface: str
            :return: the device
            :rtype: Device
            :raises TransportError: if no device uses that interface
        """
        return self.raw.GetDeviceByIpIface(iface, transform=self._path_to_device)

    def networking_enabled(self) -> bool:
        return self.raw.NetworkingEnabled.get(transform=bool)

    def set_networking_enabled(self, enabled: bool):
        """
        Controls whether networking is enabled or disabled. When disabled,
        all interfaces that NM manages are deactivated.
        """
        return self.raw.Enable(bool(enabled))

    def wireless_enabled(self) -> bool:
        return self.raw.WirelessEnabled.get(transform=bool)

    def set_wireless_enabled(self, enabled: bool):
        return self.raw.WirelessEnabled.set(bool(enabled))

    def wireless_hardware_enabled(self) -> bool:
        """Whether the Wi-Fi rfkill switch is on."""
        return self.raw.WirelessHardwareEnabled.get(transform=bool)

    def wwan_enabled(self) -> bool:
        return self.raw.WwanEnabled.get(transform=bool)

    def set_wwan_enabled(self, enabled: bool):
        return self.raw.WwanEnabled.set(bool(enabled))

    def wwan_hardware_enabled(self) -> bool:
        """Whether the mobile broadband rfkill switch is on."""
        return self.raw.WwanHardwareEnabled.get(transform=bool)

    def startup(self) -> bool:
        """
            :return: whether NetworkManager is still starting up
            :rtype: bool
        """
        return self.raw.Startup.get(transform=bool)

    def state(self) -> NMState:
        """
            :return: the overall networking state
            :rtype: NMState
            :raises UnsupportedTypeError: on unknown states
        """
        return self.raw.State.get(transform=lambda value: decode_enum(NMState, value))

    def connectivity(self) -> ConnectivityState:
        """
            :return: the result of the last connectivity check
            :rtype: ConnectivityState
        """
        return self.raw.Connectivity.get(
            transform=lambda value: decode_enum(ConnectivityState, value)
        )

    def check_connectivity(self) -> ConnectivityState:
        """
        Re-checks the network connectivity state.

            :return: the connectivity state once the check finished
            :rtype: ConnectivityState
        """
        return self.raw.CheckConnectivity(
            transform=lambda value: decode_enum(ConnectivityState, value)
        )

    def version(self) -> Version:
        """
            :return: the version of the running NetworkManager daemon
            :rtype: packaging.version.Version
        """
        return self.raw.Version.get(transform=lambda value: Version(str(value)))

    def settings(self) -> Settings:
        """
            :return: the settings service object
            :rtype: Settings

        Note that no remote call is made, so this method never returns
        an awaitable.
        """
        return Settings.from_accessor(self._accessor)
