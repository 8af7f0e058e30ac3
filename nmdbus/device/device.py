"""
Facade over NetworkManager devices.


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
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from nmdbus.connection import Connection
from nmdbus.dhcp import Dhcp4Config, Dhcp6Config
from nmdbus.enum import (
    CapabilityFlags, ConnectivityState, DeviceInterfaceFlags, DeviceState,
    DeviceStateReason, DeviceType, MeteredStatus, decode_enum, decode_flags
)
from nmdbus.ip4config import Ip4Config
from nmdbus.marshal import (
    SettingsMap, from_settings, optional_path, optional_string, to_dict_list, to_settings
)
from nmdbus.raw import DeviceProxy
from nmdbus.remote_object import RemoteObject


@dataclass
class AppliedConnection:
    """
    The connection currently applied on a device.

    Obtained from :meth:`Device.get_applied_connection`.
    """
    # The effective connection settings that the connection has currently applied.
    settings: SettingsMap
    # Incremented every time the applied connection changes. Passing it to
    # Device.reapply() makes the call fail if the applied connection was
    # modified in the meantime.
    version: int


class Device(RemoteObject):
    """
    A network device, exposed at `/org/freedesktop/NetworkManager/Devices/*`.

    This provides the interface common to all network devices. The actual
    device type is returned by :meth:`device_type`, and the device can be
    casted to the matching facade with the `to_*` methods or with
    :meth:`specialize`.
    """
    proxy_class = DeviceProxy

    def device_type(self) -> DeviceType:
        """
            :return: the general type of the network device; ie Ethernet, Wi-Fi, etc.
            :rtype: DeviceType
            :raises UnsupportedTypeError: if the type is unknown to this library
        """
        return self.raw.DeviceType.get(transform=lambda value: decode_enum(DeviceType, value))

    def specialize(self) -> "SpecializedDevice":
        """
            :return: the facade matching the device type, or an
                :class:`UnsupportedDevice` when this library does not wrap
                that type of device
            :rtype: SpecializedDevice
            :raises UnsupportedTypeError: if the type is unknown to this library
        """
        return self.raw.DeviceType.get(transform=self._specialize)

    def _specialize(self, value) -> "SpecializedDevice":
        device_type = decode_enum(DeviceType, value)
        for kind in _device_kinds():
            if kind.device_type is device_type:
                return kind(self)

        return UnsupportedDevice(self, device_type)

    def _cast(self, kind):
        def cast(value):
            if int(value) == kind.device_type:
                return kind(self)
            return None

        return self.raw.DeviceType.get(transform=cast)

    def to_wireless(self) -> Optional["WirelessDevice"]:
        """
            :return: the Wi-Fi facade of this device, or None if this is
                not a Wi-Fi device
            :rtype: Optional[WirelessDevice]
        """
        from nmdbus.device.wireless import WirelessDevice  # pylint: disable=import-outside-toplevel
        return self._cast(WirelessDevice)

    def to_ethernet(self) -> Optional["EthernetDevice"]:
        from nmdbus.device.wired import EthernetDevice  # pylint: disable=import-outside-toplevel
        return self._cast(EthernetDevice)

    def to_generic(self) -> Optional["GenericDevice"]:
        from nmdbus.device.generic import GenericDevice  # pylint: disable=import-outside-toplevel
        return self._cast(GenericDevice)

    def to_bridge(self) -> Optional["BridgeDevice"]:
        from nmdbus.device.bridge import BridgeDevice  # pylint: disable=import-outside-toplevel
        return self._cast(BridgeDevice)

    def to_veth(self) -> Optional["VethDevice"]:
        from nmdbus.device.veth import VethDevice  # pylint: disable=import-outside-toplevel
        return self._cast(VethDevice)

    def reapply(self, connection: SettingsMap, version_id: int = 0, flags: int = 0):
        """
        Attempts to update the configuration of a device without deactivating it.

        When a connection profile is activated on a device, the profile is
        duplicated and becomes the applied connection of the device (see
        :meth:`get_applied_connection`). Later modifications of the profile
        don't propagate to the applied connection: to have them applied,
        either re-activate the profile or reapply it with this method.

            :param connection: the settings to apply. An empty map reapplies
                the current connection profile.
            :type connection: dict
            :param version_id: version of the applied connection the caller
                last read. If the applied connection changed since then, the
                call fails. 0 disables the check.
            :type version_id: int
            :param flags: always 0
            :type flags: int
        """
        return self.raw.Reapply(from_settings(connection), version_id, flags)

    def get_applied_connection(self, flags: int = 0) -> AppliedConnection:
        """
            :return: the connection currently applied on the device,
                together with its version, read in a single call
            :rtype: AppliedConnection

        Usually this is the same as :meth:`nmdbus.connection.Connection.settings`
        of the activated profile. It differs when the profile was modified
        afterwards, or when the device was reconfigured with :meth:`reapply`.
        """
        return self.raw.GetAppliedConnection(flags, transform=_to_applied_connection)

    def disconnect(self):
        """
        Disconnects the device and prevents it from automatically activating
        further connections without user intervention.
        """
        return self.raw.Disconnect()

    def delete(self):
        """
        Deletes a software device from NetworkManager and removes the
        interface from the system. Fails for hardware devices.
        """
        return self.raw.Delete()

    def udi(self) -> str:
        """
            :return: OS-specific transient device hardware identifier
            :rtype: str

        The Udi is not guaranteed to be consistent across reboots or hotplugs
        of the hardware. Use the object path to track a device within the
        lifetime of the daemon.
        """
        return self.raw.Udi.get(transform=str)

    def path(self) -> str:
        """The path of the device as exposed by the udev property `ID_PATH`."""
        return self.raw.Path.get(transform=str)

    def interface(self) -> str:
        """The name of the device's control (and often data) interface."""
        return self.raw.Interface.get(transform=str)

    def ip_interface(self) -> str:
        """
        The name of the device's data interface. It may not refer to the
        actual data interface until the device is activated.
        """
        return self.raw.IpInterface.get(transform=str)

    def driver(self) -> str:
        return self.raw.Driver.get(transform=str)

    def driver_version(self) -> str:
        return self.raw.DriverVersion.get(transform=str)

    def firmware_version(self) -> str:
        return self.raw.FirmwareVersion.get(transform=str)

    def capabilities(self) -> CapabilityFlags:
        return self.raw.Capabilities.get(
            transform=lambda value: decode_flags(CapabilityFlags, value)
        )

    def state(self) -> DeviceState:
        """
            :return: the current state of the device
            :rtype: DeviceState
        """
        return self.raw.State.get(transform=lambda value: decode_enum(DeviceState, value))

    def state_with_reason(self) -> Tuple[DeviceState, DeviceStateReason]:
        """
            :return: the current state of the device and the reason for it,
                read at once
            :rtype: Tuple[DeviceState, DeviceStateReason]
        """
        return self.raw.StateReason.get(transform=_to_state_with_reason)

    def ip4_config(self) -> Optional[Ip4Config]:
        """
            :return: the IPv4 configuration of the device, only valid while
                the device is activated
            :rtype: Optional[Ip4Config]
        """
        return self.raw.Ip4Config.get(transform=self._optional_child(Ip4Config))

    def dhcp4_config(self) -> Optional[Dhcp4Config]:
        return self.raw.Dhcp4Config.get(transform=self._optional_child(Dhcp4Config))

    def dhcp6_config(self) -> Optional[Dhcp6Config]:
        return self.raw.Dhcp6Config.get(transform=self._optional_child(Dhcp6Config))

    def _optional_child(self, facade_class):
        def to_child(path):
            path = optional_path(path)
            if path is None:
                return None
            return facade_class(self._accessor.with_path(path))

        return to_child

    def is_managed(self) -> bool:
        """Whether or not this device is managed by NetworkManager."""
        return self.raw.Managed.get(transform=bool)

    def set_managed(self, managed: bool):
        """
        Sets whether or not this device is managed by NetworkManager.
        The change is lost when NetworkManager restarts.
        """
        return self.raw.Managed.set(bool(managed))

    def can_autoconnect(self) -> bool:
        return self.raw.Autoconnect.get(transform=bool)

    def set_autoconnect(self, autoconnect: bool):
        """
        Sets whether or not this device is allowed to autoconnect. This can't
        be set to true for default-unmanaged devices.
        """
        return self.raw.Autoconnect.set(bool(autoconnect))

    def is_firmware_missing(self) -> bool:
        return self.raw.FirmwareMissing.get(transform=bool)

    def is_plugin_missing(self) -> bool:
        """Whether the NetworkManager plugin for the device is missing or misconfigured."""
        return self.raw.NmPluginMissing.get(transform=bool)

    def physical_port_id(self) -> Optional[str]:
        """
            :return: an opaque indicator of the physical network port
                associated with the device, if any
            :rtype: Optional[str]
        """
        return self.raw.PhysicalPortId.get(transform=optional_string)

    def mtu(self) -> int:
        return self.raw.Mtu.get(transform=int)

    def metered(self) -> MeteredStatus:
        """
            :return: the metered state, determined by the active profile or
                guessed by NetworkManager
            :rtype: MeteredStatus
        """
        return self.raw.Metered.get(transform=lambda value: decode_enum(MeteredStatus, value))

    def lldp_neighbors(self) -> List[dict]:
        return self.raw.LldpNeighbors.get(transform=to_dict_list)

    def is_real(self) -> bool:
        """
        Whether the device is real or a placeholder. Placeholder devices do
        not exist yet but could be created automatically by NetworkManager if
        one of their available connections was activated.
        """
        return self.raw.Real.get(transform=bool)

    def ipv4_connectivity(self) -> ConnectivityState:
        return self.raw.Ip4Connectivity.get(
            transform=lambda value: decode_enum(ConnectivityState, value)
        )

    def ipv6_connectivity(self) -> ConnectivityState:
        return self.raw.Ip6Connectivity.get(
            transform=lambda value: decode_enum(ConnectivityState, value)
        )

    def interface_flags(self) -> DeviceInterfaceFlags:
        return self.raw.InterfaceFlags.get(
            transform=lambda value: decode_flags(DeviceInterfaceFlags, value)
        )

    def hardware_address(self) -> str:
        """The hardware address of the device. Requires NetworkManager >= 1.24."""
        return self.raw.HwAddress.get(transform=str)

    def available_connections(self) -> Iterator[Connection]:
        """
            :return: the connection profiles that can be activated on this device
            :rtype: Iterator[Connection]
        """
        def to_connections(paths):
            return (Connection(self._accessor.with_path(path)) for path in paths)

        return self.raw.AvailableConnections.get(transform=to_connections)


class SpecializedDevice(RemoteObject):
    """
    Base class of the facades for a specific type of device.

    It points to the same object path as the generic :class:`Device` it was
    obtained from.
    """
    device_type = None

    def __init__(self, device: Device):
        super().__init__(device.accessor)
        self.__device = device

    @property
    def device(self) -> Device:
        """
            :return: the generic device
            :rtype: Device
        """
        return self.__device


class UnsupportedDevice(SpecializedDevice):
    """A device of a known type that this library has no specific facade for."""
    proxy_class = DeviceProxy

    def __init__(self, device: Device, device_type: DeviceType):
        super().__init__(device)
        self.device_type = device_type


def _to_applied_connection(reply) -> AppliedConnection:
    settings, version = reply
    return AppliedConnection(settings=to_settings(settings), version=int(version))


def _to_state_with_reason(reply) -> Tuple[DeviceState, DeviceStateReason]:
    state, reason = reply
    return decode_enum(DeviceState, state), decode_enum(DeviceStateReason, reason)


def _device_kinds():
    # pylint: disable=import-outside-toplevel
    from nmdbus.device.bridge import BridgeDevice
    from nmdbus.device.generic import GenericDevice
    from nmdbus.device.veth import VethDevice
    from nmdbus.device.wired import EthernetDevice
    from nmdbus.device.wireless import WirelessDevice

    return WirelessDevice, EthernetDevice, GenericDevice, BridgeDevice, VethDevice
