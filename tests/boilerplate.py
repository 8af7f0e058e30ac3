"""
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
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import dbus
from dbus.exceptions import DBusException

NM_BUS = "org.freedesktop.NetworkManager"
NM_PATH = "/org/freedesktop/NetworkManager"
SETTINGS_PATH = "/org/freedesktop/NetworkManager/Settings"
PROPERTIES_IFACE = "org.freedesktop.DBus.Properties"

NM_IFACE = "org.freedesktop.NetworkManager"
SETTINGS_IFACE = "org.freedesktop.NetworkManager.Settings"
CONNECTION_IFACE = "org.freedesktop.NetworkManager.Settings.Connection"
DEVICE_IFACE = "org.freedesktop.NetworkManager.Device"
WIRELESS_IFACE = "org.freedesktop.NetworkManager.Device.Wireless"
WIRED_IFACE = "org.freedesktop.NetworkManager.Device.Wired"
GENERIC_IFACE = "org.freedesktop.NetworkManager.Device.Generic"
BRIDGE_IFACE = "org.freedesktop.NetworkManager.Device.Bridge"
VETH_IFACE = "org.freedesktop.NetworkManager.Device.Veth"
AP_IFACE = "org.freedesktop.NetworkManager.AccessPoint"
IP4_IFACE = "org.freedesktop.NetworkManager.IP4Config"
DHCP4_IFACE = "org.freedesktop.NetworkManager.DHCP4Config"
DHCP6_IFACE = "org.freedesktop.NetworkManager.DHCP6Config"

WIFI_PATH = "/org/freedesktop/NetworkManager/Devices/1"
ETHERNET_PATH = "/org/freedesktop/NetworkManager/Devices/2"
BRIDGE_PATH = "/org/freedesktop/NetworkManager/Devices/3"
VETH_PATH = "/org/freedesktop/NetworkManager/Devices/4"
VETH_PEER_PATH = "/org/freedesktop/NetworkManager/Devices/5"
TUN_PATH = "/org/freedesktop/NetworkManager/Devices/6"
LOOPBACK_PATH = "/org/freedesktop/NetworkManager/Devices/7"
AP_PATH = "/org/freedesktop/NetworkManager/AccessPoint/1"
HIDDEN_AP_PATH = "/org/freedesktop/NetworkManager/AccessPoint/2"
IP4_CONFIG_PATH = "/org/freedesktop/NetworkManager/IP4Config/1"
DHCP4_CONFIG_PATH = "/org/freedesktop/NetworkManager/DHCP4Config/1"
CONNECTION_PATH = "/org/freedesktop/NetworkManager/Settings/1"
WIFI_CONNECTION_UUID = "4d2e6e3b-5b4e-4d02-9b5f-9f4c2f3f1b55"


def unknown_object(path):
    return DBusException(
        f"No such object path '{path}'", name="org.freedesktop.DBus.Error.UnknownObject"
    )


@dataclass
class RecordedCall:
    object_path: str
    interface: str
    member: str
    args: tuple
    signature: Optional[str]
    timeout: Optional[float]


@dataclass
class FakeObject:
    """A remote object: its properties and its method implementations."""
    path: str
    properties: Dict[Tuple[str, str], object] = field(default_factory=dict)
    methods: Dict[Tuple[str, str], Callable] = field(default_factory=dict)

    def set_properties(self, interface: str, **properties):
        for name, value in properties.items():
            self.properties[(interface, name)] = value

    def on(self, interface: str, member: str, implementation: Callable):
        self.methods[(interface, member)] = implementation


class FakeBus:
    """
    In-memory replacement of a `dbus.bus.BusConnection`.

    It behaves like dbus-python: blocking calls return the reply (None,
    a single value or a tuple) or raise a DBusException, while calls
    made with reply/error handlers deliver the outcome to them. When
    `defer_replies` is set, handlers only run on :meth:`flush`.
    """
    def __init__(self):
        self.objects: Dict[str, FakeObject] = {}
        self.calls: List[RecordedCall] = []
        self.resolved: List[Tuple[str, str]] = []
        self.defer_replies = False
        self._pending: List[Callable] = []

    def add_object(self, path: str) -> FakeObject:
        fake_object = FakeObject(path)
        self.objects[path] = fake_object
        return fake_object

    def get_object(self, bus_name, object_path, introspect=True):
        self.resolved.append((bus_name, object_path))
        return FakeProxy(self, str(object_path))

    def flush(self):
        pending, self._pending = self._pending, []
        for deliver in pending:
            deliver()

    def calls_to(self, member: str) -> List[RecordedCall]:
        return [call for call in self.calls if call.member == member]

    def dispatch(self, object_path, interface, member, args):
        fake_object = self.objects.get(object_path)
        if fake_object is None:
            raise unknown_object(object_path)

        if interface == PROPERTIES_IFACE and member == "Get":
            key = (str(args[0]), str(args[1]))
            if key not in fake_object.properties:
                raise DBusException(
                    f"No such property '{args[1]}'", name="org.freedesktop.DBus.Error.InvalidArgs"
                )
            return fake_object.properties[key]

        if interface == PROPERTIES_IFACE and member == "Set":
            fake_object.properties[(str(args[0]), str(args[1]))] = args[2]
            return None

        implementation = fake_object.methods.get((interface, member))
        if implementation is None:
            raise DBusException(
                f"No such method '{member}'", name="org.freedesktop.DBus.Error.UnknownMethod"
            )

        return implementation(*args)


class FakeProxy:
    def __init__(self, bus: FakeBus, object_path: str):
        self._bus = bus
        self._object_path = object_path

    def get_dbus_method(self, member, dbus_interface=None):
        return FakeMethod(self._bus, self._object_path, dbus_interface, member)


class FakeMethod:
    def __init__(self, bus: FakeBus, object_path: str, interface: str, member: str):
        self._bus = bus
        self._object_path = object_path
        self._interface = interface
        self._member = member

    def __call__(
            self, *args, signature=None, timeout=None,
            reply_handler=None, error_handler=None
    ):
        self._bus.calls.append(RecordedCall(
            self._object_path, self._interface, self._member, args, signature, timeout
        ))

        if reply_handler is None:
            return self._bus.dispatch(self._object_path, self._interface, self._member, args)

        def deliver():
            try:
                reply = self._bus.dispatch(
                    self._object_path, self._interface, self._member, args
                )
            except DBusException as exc:
                error_handler(exc)
                return

            if reply is None:
                reply_handler()
            elif isinstance(reply, tuple) and not isinstance(reply, dbus.Struct):
                reply_handler(*reply)
            else:
                reply_handler(reply)

        if self._bus.defer_replies:
            self._bus._pending.append(deliver)  # pylint: disable=protected-access
        else:
            deliver()

        return None


def wifi_connection_settings(ssid: bytes = b"home") -> dbus.Dictionary:
    return dbus.Dictionary({
        "connection": dbus.Dictionary({
            "id": dbus.String("home"),
            "uuid": dbus.String(WIFI_CONNECTION_UUID),
            "type": dbus.String("802-11-wireless"),
            "autoconnect": dbus.Boolean(True),
        }, signature="sv"),
        "802-11-wireless": dbus.Dictionary({
            "ssid": dbus.ByteArray(ssid),
            "mode": dbus.String("infrastructure"),
        }, signature="sv"),
        "ipv4": dbus.Dictionary({
            "method": dbus.String("auto"),
        }, signature="sv"),
    }, signature="sa{sv}")


class AppliedConnectionState:
    """Applied connection of a device, versioned the way NetworkManager does."""
    def __init__(self, settings):
        self.settings = settings
        self.version = 1

    def get_applied_connection(self, flags):
        return self.settings, dbus.UInt64(self.version)

    def reapply(self, connection, version_id, flags):
        if version_id and int(version_id) != self.version:
            raise DBusException(
                "The applied connection changed in the meantime",
                name="org.freedesktop.NetworkManager.Device.VersionIdMismatch"
            )
        if connection:
            self.settings = connection
        self.version += 1


def _add_device(bus: FakeBus, path: str, device_type: int, interface: str, **properties):
    device = bus.add_object(path)
    device.set_properties(
        DEVICE_IFACE,
        DeviceType=dbus.UInt32(device_type),
        Interface=dbus.String(interface),
        IpInterface=dbus.String(interface),
        Udi=dbus.String(f"/sys/devices/virtual/net/{interface}"),
        Path=dbus.String(""),
        Driver=dbus.String("fake"),
        DriverVersion=dbus.String("1.0"),
        FirmwareVersion=dbus.String(""),
        Capabilities=dbus.UInt32(0x7),
        State=dbus.UInt32(30),
        StateReason=dbus.Struct((dbus.UInt32(30), dbus.UInt32(0)), signature="uu"),
        Ip4Config=dbus.ObjectPath("/"),
        Dhcp4Config=dbus.ObjectPath("/"),
        Dhcp6Config=dbus.ObjectPath("/"),
        Managed=dbus.Boolean(True),
        Autoconnect=dbus.Boolean(True),
        FirmwareMissing=dbus.Boolean(False),
        NmPluginMissing=dbus.Boolean(False),
        PhysicalPortId=dbus.String(""),
        Mtu=dbus.UInt32(1500),
        Metered=dbus.UInt32(0),
        LldpNeighbors=dbus.Array([], signature="a{sv}"),
        Real=dbus.Boolean(True),
        Ip4Connectivity=dbus.UInt32(1),
        Ip6Connectivity=dbus.UInt32(1),
        InterfaceFlags=dbus.UInt32(0),
        HwAddress=dbus.String("00:00:00:00:00:00"),
        AvailableConnections=dbus.Array([], signature="o"),
    )
    device.set_properties(DEVICE_IFACE, **properties)
    device.on(DEVICE_IFACE, "Disconnect", lambda: None)
    return device


def build_network_manager_bus() -> FakeBus:
    """
    Builds a bus hosting a NetworkManager daemon with:
     - an activated Wi-Fi device, associated to an access point and with
       an IPv4 configuration obtained through DHCP,
     - an Ethernet device enslaved to a bridge,
     - a bridge placeholder (not realized yet),
     - a veth pair,
     - a tun device (generic) and the loopback device.
    """
    bus = FakeBus()
    device_paths = [WIFI_PATH, ETHERNET_PATH, VETH_PATH, VETH_PEER_PATH, TUN_PATH, LOOPBACK_PATH]
    all_device_paths = device_paths + [BRIDGE_PATH]
    interfaces = {
        "wlan0": WIFI_PATH, "eth0": ETHERNET_PATH, "veth0": VETH_PATH,
        "veth1": VETH_PEER_PATH, "tun0": TUN_PATH, "lo": LOOPBACK_PATH,
    }

    manager = bus.add_object(NM_PATH)
    manager.set_properties(
        NM_IFACE,
        NetworkingEnabled=dbus.Boolean(True),
        WirelessEnabled=dbus.Boolean(True),
        WirelessHardwareEnabled=dbus.Boolean(True),
        WwanEnabled=dbus.Boolean(False),
        WwanHardwareEnabled=dbus.Boolean(False),
        Startup=dbus.Boolean(False),
        State=dbus.UInt32(70),
        Connectivity=dbus.UInt32(4),
        Version=dbus.String("1.42.4"),
    )
    manager.on(NM_IFACE, "GetDevices", lambda: dbus.Array(
        [dbus.ObjectPath(path) for path in device_paths], signature="o"
    ))
    manager.on(NM_IFACE, "GetAllDevices", lambda: dbus.Array(
        [dbus.ObjectPath(path) for path in all_device_paths], signature="o"
    ))

    def get_device_by_ip_iface(iface):
        if iface not in interfaces:
            raise DBusException(
                "No device found for the requested iface.",
                name="org.freedesktop.NetworkManager.UnknownDevice"
            )
        return dbus.ObjectPath(interfaces[iface])

    def enable(enabled):
        manager.properties[(NM_IFACE, "NetworkingEnabled")] = dbus.Boolean(enabled)

    manager.on(NM_IFACE, "GetDeviceByIpIface", get_device_by_ip_iface)
    manager.on(NM_IFACE, "Enable", enable)
    manager.on(NM_IFACE, "Reload", lambda flags: None)
    manager.on(NM_IFACE, "CheckConnectivity", lambda: dbus.UInt32(4))

    applied = AppliedConnectionState(wifi_connection_settings())
    wifi = _add_device(
        bus, WIFI_PATH, 2, "wlan0",
        State=dbus.UInt32(100),
        StateReason=dbus.Struct((dbus.UInt32(100), dbus.UInt32(0)), signature="uu"),
        Ip4Config=dbus.ObjectPath(IP4_CONFIG_PATH),
        Dhcp4Config=dbus.ObjectPath(DHCP4_CONFIG_PATH),
        Ip4Connectivity=dbus.UInt32(4),
        Metered=dbus.UInt32(4),
        HwAddress=dbus.String("3C:A9:F4:00:11:22"),
        AvailableConnections=dbus.Array([dbus.ObjectPath(CONNECTION_PATH)], signature="o"),
    )
    wifi.on(DEVICE_IFACE, "GetAppliedConnection", applied.get_applied_connection)
    wifi.on(DEVICE_IFACE, "Reapply", applied.reapply)
    wifi.set_properties(
        WIRELESS_IFACE,
        HwAddress=dbus.String("3C:A9:F4:00:11:22"),
        PermHwAddress=dbus.String("3C:A9:F4:00:11:22"),
        Mode=dbus.UInt32(2),
        Bitrate=dbus.UInt32(866700),
        AccessPoints=dbus.Array([dbus.ObjectPath(AP_PATH)], signature="o"),
        ActiveAccessPoint=dbus.ObjectPath(AP_PATH),
        WirelessCapabilities=dbus.UInt32(0x7ff),
        LastScan=dbus.Int64(123456),
    )
    wifi.on(WIRELESS_IFACE, "GetAllAccessPoints", lambda: dbus.Array(
        [dbus.ObjectPath(AP_PATH), dbus.ObjectPath(HIDDEN_AP_PATH)], signature="o"
    ))
    wifi.on(WIRELESS_IFACE, "RequestScan", lambda options: None)

    ethernet = _add_device(bus, ETHERNET_PATH, 1, "eth0", HwAddress=dbus.String("52:54:00:AB:CD:EF"))
    ethernet.set_properties(
        WIRED_IFACE,
        HwAddress=dbus.String("52:54:00:AB:CD:EF"),
        PermHwAddress=dbus.String("52:54:00:12:34:56"),
        Speed=dbus.UInt32(1000),
        S390Subchannels=dbus.Array([], signature="s"),
        Carrier=dbus.Boolean(True),
    )

    bridge = _add_device(bus, BRIDGE_PATH, 13, "br0", Real=dbus.Boolean(False))
    bridge.set_properties(
        BRIDGE_IFACE,
        HwAddress=dbus.String("52:54:00:AB:CD:EF"),
        Carrier=dbus.Boolean(False),
        Slaves=dbus.Array([dbus.ObjectPath(ETHERNET_PATH)], signature="o"),
    )

    veth = _add_device(bus, VETH_PATH, 20, "veth0")
    veth.set_properties(VETH_IFACE, Peer=dbus.ObjectPath(VETH_PEER_PATH))
    veth_peer = _add_device(bus, VETH_PEER_PATH, 20, "veth1")
    veth_peer.set_properties(VETH_IFACE, Peer=dbus.ObjectPath(VETH_PATH))

    tun = _add_device(bus, TUN_PATH, 14, "tun0")
    tun.set_properties(
        GENERIC_IFACE, HwAddress=dbus.String(""), TypeDescription=dbus.String("tun")
    )

    _add_device(bus, LOOPBACK_PATH, 32, "lo", Managed=dbus.Boolean(False))

    access_point = bus.add_object(AP_PATH)
    access_point.set_properties(
        AP_IFACE,
        Flags=dbus.UInt32(1),
        WpaFlags=dbus.UInt32(0),
        RsnFlags=dbus.UInt32(0x188),
        Ssid=dbus.Array([dbus.Byte(octet) for octet in b"home"], signature="y"),
        Frequency=dbus.UInt32(5180),
        HwAddress=dbus.String("F0:9F:C2:00:00:01"),
        Mode=dbus.UInt32(2),
        MaxBitrate=dbus.UInt32(866700),
        Strength=dbus.Byte(72),
        LastSeen=dbus.Int32(123450),
    )
    hidden_access_point = bus.add_object(HIDDEN_AP_PATH)
    hidden_access_point.set_properties(
        AP_IFACE,
        Flags=dbus.UInt32(1),
        WpaFlags=dbus.UInt32(0),
        RsnFlags=dbus.UInt32(0x188),
        Ssid=dbus.Array([], signature="y"),
        Frequency=dbus.UInt32(2412),
        HwAddress=dbus.String("F0:9F:C2:00:00:02"),
        Mode=dbus.UInt32(2),
        MaxBitrate=dbus.UInt32(144400),
        Strength=dbus.Byte(30),
        LastSeen=dbus.Int32(-1),
    )

    ip4_config = bus.add_object(IP4_CONFIG_PATH)
    ip4_config.set_properties(
        IP4_IFACE,
        AddressData=dbus.Array([dbus.Dictionary({
            "address": dbus.String("192.168.1.23"), "prefix": dbus.UInt32(24)
        }, signature="sv")], signature="a{sv}"),
        Addresses=dbus.Array([dbus.Array(
            [dbus.UInt32(0x1701a8c0), dbus.UInt32(24), dbus.UInt32(0x0101a8c0)], signature="u"
        )], signature="au"),
        RouteData=dbus.Array([dbus.Dictionary({
            "dest": dbus.String("192.168.1.0"), "prefix": dbus.UInt32(24),
            "metric": dbus.UInt32(600),
        }, signature="sv")], signature="a{sv}"),
        Routes=dbus.Array([], signature="au"),
        NameserverData=dbus.Array([dbus.Dictionary({
            "address": dbus.String("192.168.1.1")
        }, signature="sv")], signature="a{sv}"),
        Nameservers=dbus.Array([dbus.UInt32(0x0101a8c0)], signature="u"),
        Domains=dbus.Array([dbus.String("lan")], signature="s"),
        Searches=dbus.Array([], signature="s"),
        DnsOptions=dbus.Array([], signature="s"),
        DnsPriority=dbus.Int32(600),
        Gateway=dbus.String("192.168.1.1"),
        WinsServerData=dbus.Array([], signature="s"),
        WinsServers=dbus.Array([], signature="u"),
    )

    dhcp4_config = bus.add_object(DHCP4_CONFIG_PATH)
    dhcp4_config.set_properties(DHCP4_IFACE, Options=dbus.Dictionary({
        "ip_address": dbus.String("192.168.1.23"),
        "dhcp_lease_time": dbus.String("86400"),
    }, signature="sv"))

    settings = bus.add_object(SETTINGS_PATH)
    settings.set_properties(
        SETTINGS_IFACE,
        CanModify=dbus.Boolean(True),
        Hostname=dbus.String("laptop"),
    )
    settings.on(SETTINGS_IFACE, "ListConnections", lambda: dbus.Array(
        [dbus.ObjectPath(CONNECTION_PATH)], signature="o"
    ))

    def get_connection_by_uuid(uuid):
        if uuid != WIFI_CONNECTION_UUID:
            raise DBusException(
                "No connection with the UUID was found.",
                name="org.freedesktop.NetworkManager.Settings.InvalidConnection"
            )
        return dbus.ObjectPath(CONNECTION_PATH)

    settings.on(SETTINGS_IFACE, "GetConnectionByUuid", get_connection_by_uuid)
    settings.on(SETTINGS_IFACE, "ReloadConnections", lambda: dbus.Boolean(True))

    connection = bus.add_object(CONNECTION_PATH)
    connection.set_properties(
        CONNECTION_IFACE,
        Unsaved=dbus.Boolean(False),
        Flags=dbus.UInt32(0),
        Filename=dbus.String("/etc/NetworkManager/system-connections/home.nmconnection"),
    )
    stored = {"settings": wifi_connection_settings()}

    def add_connection(new_settings, unsaved):
        path = f"{SETTINGS_PATH}/{len(bus.objects)}"
        added = bus.add_object(path)
        added.set_properties(
            CONNECTION_IFACE, Unsaved=dbus.Boolean(unsaved),
            Flags=dbus.UInt32(1 if unsaved else 0), Filename=dbus.String("")
        )
        added.on(CONNECTION_IFACE, "GetSettings", lambda: new_settings)
        return dbus.ObjectPath(path)

    def update(new_settings, unsaved):
        stored["settings"] = new_settings
        connection.properties[(CONNECTION_IFACE, "Unsaved")] = dbus.Boolean(unsaved)

    def get_secrets(setting_name):
        secrets = dbus.Dictionary({
            "802-11-wireless-security": dbus.Dictionary({
                "psk": dbus.String("correct horse battery staple")
            }, signature="sv")
        }, signature="sa{sv}")
        if setting_name and setting_name not in secrets:
            return dbus.Dictionary({}, signature="sa{sv}")
        return secrets

    settings.on(SETTINGS_IFACE, "AddConnection", lambda new: add_connection(new, False))
    settings.on(SETTINGS_IFACE, "AddConnectionUnsaved", lambda new: add_connection(new, True))
    connection.on(CONNECTION_IFACE, "GetSettings", lambda: stored["settings"])
    connection.on(CONNECTION_IFACE, "GetSecrets", get_secrets)
    connection.on(CONNECTION_IFACE, "Update", lambda new: update(new, False))
    connection.on(CONNECTION_IFACE, "UpdateUnsaved", lambda new: update(new, True))
    connection.on(CONNECTION_IFACE, "Save", lambda: update(stored["settings"], False))
    connection.on(CONNECTION_IFACE, "ClearSecrets", lambda: None)

    def delete():
        del bus.objects[CONNECTION_PATH]

    connection.on(CONNECTION_IFACE, "Delete", delete)

    return bus
