"""
NetworkManager D-Bus types.

https://networkmanager.dev/docs/api/latest/nm-dbus-types.html


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
from enum import IntEnum, IntFlag

from nmdbus.exceptions import UnsupportedTypeError

logger = logging.getLogger(__name__)


def decode_enum(enum_cls, value):
    """
    Maps a wire code to a member of a closed enumeration.

        :param enum_cls: the enumeration to map the value to
        :type enum_cls: IntEnum
        :param value: the numeric value received from NetworkManager
        :type value: int
        :return: the matching enum member
        :raises UnsupportedTypeError: if the value is not part of the enumeration
    """
    try:
        return enum_cls(int(value))
    except ValueError:
        logger.warning("Unexpected %s value: %s", enum_cls.__name__, value)
        raise UnsupportedTypeError(enum_cls, int(value)) from None


class NMState(IntEnum):
    """
    NMState(int)

    0  UNKNOWN:          Networking state is unknown
    10 ASLEEP:           Networking is not enabled
    20 DISCONNECTED:     There is no active network connection
    30 DISCONNECTING:    Network connections are being cleaned up
    40 CONNECTING:       A network connection is being started
    50 CONNECTED_LOCAL:  There is only local IPv4 and/or IPv6 connectivity
    60 CONNECTED_SITE:   There is only site-wide IPv4 and/or IPv6 connectivity
    70 CONNECTED_GLOBAL: There is global IPv4 and/or IPv6 Internet connectivity
    """
    UNKNOWN = 0
    ASLEEP = 10
    DISCONNECTED = 20
    DISCONNECTING = 30
    CONNECTING = 40
    CONNECTED_LOCAL = 50
    CONNECTED_SITE = 60
    CONNECTED_GLOBAL = 70


class ConnectivityState(IntEnum):
    """
    NMConnectivityState(int)

    0 UNKNOWN: Network connectivity is unknown
    1 NONE:    The host is not connected to any network
    2 PORTAL:  The Internet connection is hijacked by a captive portal gateway
    3 LIMITED: The host is connected to a network, but does not have access to the Internet
    4 FULL:    The host is connected to a network, and has full access to the Internet
    """
    UNKNOWN = 0
    NONE = 1
    PORTAL = 2
    LIMITED = 3
    FULL = 4


class DeviceType(IntEnum):
    """NMDeviceType(int)"""
    UNKNOWN = 0
    ETHERNET = 1
    WIFI = 2
    UNUSED1 = 3
    UNUSED2 = 4
    BT = 5
    OLPC_MESH = 6
    WIMAX = 7
    MODEM = 8
    INFINIBAND = 9
    BOND = 10
    VLAN = 11
    ADSL = 12
    BRIDGE = 13
    GENERIC = 14
    TEAM = 15
    TUN = 16
    IP_TUNNEL = 17
    MACVLAN = 18
    VXLAN = 19
    VETH = 20
    MACSEC = 21
    DUMMY = 22
    PPP = 23
    OVS_INTERFACE = 24
    OVS_PORT = 25
    OVS_BRIDGE = 26
    WPAN = 27
    SIXLOWPAN = 28
    WIREGUARD = 29
    WIFI_P2P = 30
    VRF = 31
    LOOPBACK = 32
    HSR = 33
    IPVLAN = 34


class DeviceState(IntEnum):
    """
    NMDeviceState(int)

    0   UNKNOWN:      The device's state is unknown
    10  UNMANAGED:    The device is recognized, but not managed by NetworkManager
    20  UNAVAILABLE:  The device is managed by NetworkManager, but is not available for use
    30  DISCONNECTED: The device can be activated, but is currently idle and not connected to a network
    40  PREPARE:      The device is preparing the connection to the network
    50  CONFIG:       The device is connecting to the requested network
    60  NEED_AUTH:    The device requires more information to continue connecting to the requested network
    70  IP_CONFIG:    The device is requesting IPv4 and/or IPv6 addresses and routing information from the network
    80  IP_CHECK:     The device is checking whether further action is required for the requested network connection
    90  SECONDARIES:  The device is waiting for a secondary connection (like a VPN)
    100 ACTIVATED:    The device has a network connection, either local or global
    110 DEACTIVATING: A disconnection from the current network connection was requested
    120 FAILED:       The device failed to connect to the requested network and is cleaning up the connection request
    """
    UNKNOWN = 0
    UNMANAGED = 10
    UNAVAILABLE = 20
    DISCONNECTED = 30
    PREPARE = 40
    CONFIG = 50
    NEED_AUTH = 60
    IP_CONFIG = 70
    IP_CHECK = 80
    SECONDARIES = 90
    ACTIVATED = 100
    DEACTIVATING = 110
    FAILED = 120


class DeviceStateReason(IntEnum):
    """NMDeviceStateReason(int)"""
    NONE = 0
    UNKNOWN = 1
    NOW_MANAGED = 2
    NOW_UNMANAGED = 3
    CONFIG_FAILED = 4
    IP_CONFIG_UNAVAILABLE = 5
    IP_CONFIG_EXPIRED = 6
    NO_SECRETS = 7
    SUPPLICANT_DISCONNECT = 8
    SUPPLICANT_CONFIG_FAILED = 9
    SUPPLICANT_FAILED = 10
    SUPPLICANT_TIMEOUT = 11
    PPP_START_FAILED = 12
    PPP_DISCONNECT = 13
    PPP_FAILED = 14
    DHCP_START_FAILED = 15
    DHCP_ERROR = 16
    DHCP_FAILED = 17
    SHARED_START_FAILED = 18
    SHARED_FAILED = 19
    AUTOIP_START_FAILED = 20
    AUTOIP_ERROR = 21
    AUTOIP_FAILED = 22
    MODEM_BUSY = 23
    MODEM_NO_DIAL_TONE = 24
    MODEM_NO_CARRIER = 25
    MODEM_DIAL_TIMEOUT = 26
    MODEM_DIAL_FAILED = 27
    MODEM_INIT_FAILED = 28
    GSM_APN_FAILED = 29
    GSM_REGISTRATION_NOT_SEARCHING = 30
    GSM_REGISTRATION_DENIED = 31
    GSM_REGISTRATION_TIMEOUT = 32
    GSM_REGISTRATION_FAILED = 33
    GSM_PIN_CHECK_FAILED = 34
    FIRMWARE_MISSING = 35
    REMOVED = 36
    SLEEPING = 37
    CONNECTION_REMOVED = 38
    USER_REQUESTED = 39
    CARRIER = 40
    CONNECTION_ASSUMED = 41
    SUPPLICANT_AVAILABLE = 42
    MODEM_NOT_FOUND = 43
    BT_FAILED = 44
    GSM_SIM_NOT_INSERTED = 45
    GSM_SIM_PIN_REQUIRED = 46
    GSM_SIM_PUK_REQUIRED = 47
    GSM_SIM_WRONG = 48
    INFINIBAND_MODE = 49
    DEPENDENCY_FAILED = 50
    BR2684_FAILED = 51
    MODEM_MANAGER_UNAVAILABLE = 52
    SSID_NOT_FOUND = 53
    SECONDARY_CONNECTION_FAILED = 54
    DCB_FCOE_FAILED = 55
    TEAMD_CONTROL_FAILED = 56
    MODEM_FAILED = 57
    MODEM_AVAILABLE = 58
    SIM_PIN_INCORRECT = 59
    NEW_ACTIVATION = 60
    PARENT_CHANGED = 61
    PARENT_MANAGED_CHANGED = 62
    OVSDB_FAILED = 63
    IP_ADDRESS_DUPLICATE = 64
    IP_METHOD_UNSUPPORTED = 65
    SRIOV_CONFIGURATION_FAILED = 66
    PEER_NOT_FOUND = 67
    DEVICE_HANDLER_FAILED = 68


class WirelessMode(IntEnum):
    """
    NM80211Mode(int)

    Used both for the mode of an access point and for the mode of
    a wireless device.

    0 UNKNOWN: The device or access point mode is unknown
    1 ADHOC:   For both devices and access point objects, indicates the object is part of an Ad-Hoc 802.11 network
    2 INFRA:   The device or access point is in infrastructure mode
    3 AP:      The device is an access point/hotspot
    4 MESH:    The device is a 802.11s mesh point
    """
    UNKNOWN = 0
    ADHOC = 1
    INFRA = 2
    AP = 3
    MESH = 4


class MeteredStatus(IntEnum):
    """NMMetered(int)"""
    UNKNOWN = 0
    YES = 1
    NO = 2
    GUESS_YES = 3
    GUESS_NO = 4


class ReloadFlag(IntFlag):
    """
    NMManagerReloadFlags(int)

    0 ALL:      Reload everything supported
    1 CONF:     Reload the NetworkManager.conf configuration from disk
    2 DNS_RC:   Update DNS configuration
    4 DNS_FULL: Means to restart the DNS plugin
    """
    ALL = 0
    CONF = 0x1
    DNS_RC = 0x2
    DNS_FULL = 0x4


class CapabilityFlags(IntFlag):
    """NMDeviceCapabilities(int)"""
    NONE = 0
    NM_SUPPORTED = 0x1
    CARRIER_DETECT = 0x2
    IS_SOFTWARE = 0x4
    SRIOV = 0x8


class DeviceInterfaceFlags(IntFlag):
    """NMDeviceInterfaceFlags(int)"""
    NONE = 0
    UP = 0x1
    LOWER_UP = 0x2
    PROMISC = 0x4
    CARRIER = 0x10000
    LLDP_CLIENT_ENABLED = 0x20000


class AccessPointCapabilityFlags(IntFlag):
    """NM80211ApFlags(int)"""
    NONE = 0
    PRIVACY = 0x1
    WPS = 0x2
    WPS_PBC = 0x4
    WPS_PIN = 0x8


class AccessPointSecurityFlags(IntFlag):
    """NM80211ApSecurityFlags(int)"""
    NONE = 0
    PAIR_WEP40 = 0x1
    PAIR_WEP104 = 0x2
    PAIR_TKIP = 0x4
    PAIR_CCMP = 0x8
    GROUP_WEP40 = 0x10
    GROUP_WEP104 = 0x20
    GROUP_TKIP = 0x40
    GROUP_CCMP = 0x80
    KEY_MGMT_PSK = 0x100
    KEY_MGMT_802_1X = 0x200
    KEY_MGMT_SAE = 0x400
    KEY_MGMT_OWE = 0x800
    KEY_MGMT_OWE_TM = 0x1000
    KEY_MGMT_EAP_SUITE_B_192 = 0x2000


class WirelessCapabilityFlags(IntFlag):
    """NMDeviceWifiCapabilities(int)"""
    NONE = 0
    CIPHER_WEP40 = 0x1
    CIPHER_WEP104 = 0x2
    CIPHER_TKIP = 0x4
    CIPHER_CCMP = 0x8
    WPA = 0x10
    RSN = 0x20
    AP = 0x40
    ADHOC = 0x80
    FREQ_VALID = 0x100
    FREQ_2GHZ = 0x200
    FREQ_5GHZ = 0x400
    FREQ_6GHZ = 0x800
    MESH = 0x1000
    IBSS_RSN = 0x2000


class ConnectionFlags(IntFlag):
    """NMSettingsConnectionFlags(int)"""
    NONE = 0
    UNSAVED = 0x1
    NM_GENERATED = 0x2
    VOLATILE = 0x4
    EXTERNAL = 0x8


def decode_flags(flag_cls, value):
    """
    Maps a wire bitmask to a flag set. Bits unknown to the library are
    kept in the resulting value.
    """
    return flag_cls(int(value))
