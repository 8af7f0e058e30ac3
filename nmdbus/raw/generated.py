"""
Declarations of the NetworkManager D-Bus interfaces.

This file was generated by scripts/generate_proxies.py from the
NetworkManager introspection data. Do not edit manually.
"""
from nmdbus.raw.base import RemoteInterface, RemoteMethod, RemoteProperty

DESTINATION = "org.freedesktop.NetworkManager"


class NetworkManagerProxy(RemoteInterface):
    """org.freedesktop.NetworkManager"""
    interface_name = "org.freedesktop.NetworkManager"
    default_destination = DESTINATION

    ActivateConnection = RemoteMethod("ooo", "o")
    AddAndActivateConnection = RemoteMethod("a{sa{sv}}oo", "oo")
    CheckConnectivity = RemoteMethod("", "u")
    DeactivateConnection = RemoteMethod("o", "")
    Enable = RemoteMethod("b", "")
    GetAllDevices = RemoteMethod("", "ao")
    GetDeviceByIpIface = RemoteMethod("s", "o")
    GetDevices = RemoteMethod("", "ao")
    GetLogging = RemoteMethod("", "ss")
    GetPermissions = RemoteMethod("", "a{ss}")
    Reload = RemoteMethod("u", "")
    SetLogging = RemoteMethod("ss", "")
    Sleep = RemoteMethod("b", "")
    state = RemoteMethod("", "u")

    ActivatingConnection = RemoteProperty("o")
    ActiveConnections = RemoteProperty("ao")
    AllDevices = RemoteProperty("ao")
    Capabilities = RemoteProperty("au")
    Checkpoints = RemoteProperty("ao")
    Connectivity = RemoteProperty("u")
    ConnectivityCheckAvailable = RemoteProperty("b")
    ConnectivityCheckEnabled = RemoteProperty("b", writable=True)
    ConnectivityCheckUri = RemoteProperty("s")
    Devices = RemoteProperty("ao")
    GlobalDnsConfiguration = RemoteProperty("a{sv}", writable=True)
    Metered = RemoteProperty("u")
    NetworkingEnabled = RemoteProperty("b")
    PrimaryConnection = RemoteProperty("o")
    PrimaryConnectionType = RemoteProperty("s")
    Startup = RemoteProperty("b")
    State = RemoteProperty("u")
    Version = RemoteProperty("s")
    WirelessEnabled = RemoteProperty("b", writable=True)
    WirelessHardwareEnabled = RemoteProperty("b")
    WwanEnabled = RemoteProperty("b", writable=True)
    WwanHardwareEnabled = RemoteProperty("b")


class SettingsProxy(RemoteInterface):
    """org.freedesktop.NetworkManager.Settings"""
    interface_name = "org.freedesktop.NetworkManager.Settings"
    default_destination = DESTINATION

    AddConnection = RemoteMethod("a{sa{sv}}", "o")
    AddConnection2 = RemoteMethod("a{sa{sv}}ua{sv}", "oa{sv}")
    AddConnectionUnsaved = RemoteMethod("a{sa{sv}}", "o")
    GetConnectionByUuid = RemoteMethod("s", "o")
    ListConnections = RemoteMethod("", "ao")
    LoadConnections = RemoteMethod("as", "bas")
    ReloadConnections = RemoteMethod("", "b")
    SaveHostname = RemoteMethod("s", "")

    CanModify = RemoteProperty("b")
    Connections = RemoteProperty("ao")
    Hostname = RemoteProperty("s")


class SettingsConnectionProxy(RemoteInterface):
    """org.freedesktop.NetworkManager.Settings.Connection"""
    interface_name = "org.freedesktop.NetworkManager.Settings.Connection"
    default_destination = DESTINATION

    ClearSecrets = RemoteMethod("", "")
    Delete = RemoteMethod("", "")
    GetSecrets = RemoteMethod("s", "a{sa{sv}}")
    GetSettings = RemoteMethod("", "a{sa{sv}}")
    Save = RemoteMethod("", "")
    Update = RemoteMethod("a{sa{sv}}", "")
    Update2 = RemoteMethod("a{sa{sv}}ua{sv}", "a{sv}")
    UpdateUnsaved = RemoteMethod("a{sa{sv}}", "")

    Filename = RemoteProperty("s")
    Flags = RemoteProperty("u")
    Unsaved = RemoteProperty("b")


class DeviceProxy(RemoteInterface):
    """org.freedesktop.NetworkManager.Device"""
    interface_name = "org.freedesktop.NetworkManager.Device"
    default_destination = DESTINATION

    Delete = RemoteMethod("", "")
    Disconnect = RemoteMethod("", "")
    GetAppliedConnection = RemoteMethod("u", "a{sa{sv}}t")
    Reapply = RemoteMethod("a{sa{sv}}tu", "")

    ActiveConnection = RemoteProperty("o")
    Autoconnect = RemoteProperty("b", writable=True)
    AvailableConnections = RemoteProperty("ao")
    Capabilities = RemoteProperty("u")
    DeviceType = RemoteProperty("u")
    Dhcp4Config = RemoteProperty("o")
    Dhcp6Config = RemoteProperty("o")
    Driver = RemoteProperty("s")
    DriverVersion = RemoteProperty("s")
    FirmwareMissing = RemoteProperty("b")
    FirmwareVersion = RemoteProperty("s")
    HwAddress = RemoteProperty("s")
    Interface = RemoteProperty("s")
    InterfaceFlags = RemoteProperty("u")
    Ip4Address = RemoteProperty("u")
    Ip4Config = RemoteProperty("o")
    Ip4Connectivity = RemoteProperty("u")
    Ip6Config = RemoteProperty("o")
    Ip6Connectivity = RemoteProperty("u")
    IpInterface = RemoteProperty("s")
    LldpNeighbors = RemoteProperty("aa{sv}")
    Managed = RemoteProperty("b", writable=True)
    Metered = RemoteProperty("u")
    Mtu = RemoteProperty("u")
    NmPluginMissing = RemoteProperty("b")
    Path = RemoteProperty("s")
    PhysicalPortId = RemoteProperty("s")
    Ports = RemoteProperty("ao")
    Real = RemoteProperty("b")
    State = RemoteProperty("u")
    StateReason = RemoteProperty("(uu)")
    Udi = RemoteProperty("s")


class DeviceWirelessProxy(RemoteInterface):
    """org.freedesktop.NetworkManager.Device.Wireless"""
    interface_name = "org.freedesktop.NetworkManager.Device.Wireless"
    default_destination = DESTINATION

    GetAccessPoints = RemoteMethod("", "ao")
    GetAllAccessPoints = RemoteMethod("", "ao")
    RequestScan = RemoteMethod("a{sv}", "")

    AccessPoints = RemoteProperty("ao")
    ActiveAccessPoint = RemoteProperty("o")
    Bitrate = RemoteProperty("u")
    HwAddress = RemoteProperty("s")
    LastScan = RemoteProperty("x")
    Mode = RemoteProperty("u")
    PermHwAddress = RemoteProperty("s")
    WirelessCapabilities = RemoteProperty("u")


class DeviceWiredProxy(RemoteInterface):
    """org.freedesktop.NetworkManager.Device.Wired"""
    interface_name = "org.freedesktop.NetworkManager.Device.Wired"
    default_destination = DESTINATION

    Carrier = RemoteProperty("b")
    HwAddress = RemoteProperty("s")
    PermHwAddress = RemoteProperty("s")
    S390Subchannels = RemoteProperty("as")
    Speed = RemoteProperty("u")


class DeviceGenericProxy(RemoteInterface):
    """org.freedesktop.NetworkManager.Device.Generic"""
    interface_name = "org.freedesktop.NetworkManager.Device.Generic"
    default_destination = DESTINATION

    HwAddress = RemoteProperty("s")
    TypeDescription = RemoteProperty("s")


class DeviceBridgeProxy(RemoteInterface):
    """org.freedesktop.NetworkManager.Device.Bridge"""
    interface_name = "org.freedesktop.NetworkManager.Device.Bridge"
    default_destination = DESTINATION

    Carrier = RemoteProperty("b")
    HwAddress = RemoteProperty("s")
    Slaves = RemoteProperty("ao")


class DeviceVethProxy(RemoteInterface):
    """org.freedesktop.NetworkManager.Device.Veth"""
    interface_name = "org.freedesktop.NetworkManager.Device.Veth"
    default_destination = DESTINATION

    Peer = RemoteProperty("o")


class AccessPointProxy(RemoteInterface):
    """org.freedesktop.NetworkManager.AccessPoint"""
    interface_name = "org.freedesktop.NetworkManager.AccessPoint"
    default_destination = DESTINATION

    Flags = RemoteProperty("u")
    Frequency = RemoteProperty("u")
    HwAddress = RemoteProperty("s")
    LastSeen = RemoteProperty("i")
    MaxBitrate = RemoteProperty("u")
    Mode = RemoteProperty("u")
    RsnFlags = RemoteProperty("u")
    Ssid = RemoteProperty("ay")
    Strength = RemoteProperty("y")
    WpaFlags = RemoteProperty("u")


class IP4ConfigProxy(RemoteInterface):
    """org.freedesktop.NetworkManager.IP4Config"""
    interface_name = "org.freedesktop.NetworkManager.IP4Config"
    default_destination = DESTINATION

    AddressData = RemoteProperty("aa{sv}")
    Addresses = RemoteProperty("aau")
    DnsOptions = RemoteProperty("as")
    DnsPriority = RemoteProperty("i")
    Domains = RemoteProperty("as")
    Gateway = RemoteProperty("s")
    NameserverData = RemoteProperty("aa{sv}")
    Nameservers = RemoteProperty("au")
    RouteData = RemoteProperty("aa{sv}")
    Routes = RemoteProperty("aau")
    Searches = RemoteProperty("as")
    WinsServerData = RemoteProperty("as")
    WinsServers = RemoteProperty("au")


class DHCP4ConfigProxy(RemoteInterface):
    """org.freedesktop.NetworkManager.DHCP4Config"""
    interface_name = "org.freedesktop.NetworkManager.DHCP4Config"
    default_destination = DESTINATION

    Options = RemoteProperty("a{sv}")


class DHCP6ConfigProxy(RemoteInterface):
    """org.freedesktop.NetworkManager.DHCP6Config"""
    interface_name = "org.freedesktop.NetworkManager.DHCP6Config"
    default_destination = DESTINATION

    Options = RemoteProperty("a{sv}")
