"""
Conversions between D-Bus wire values and the values returned by the facades.


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
from typing import Dict, List, Optional

import dbus

NULL_OBJECT_PATH = "/"

_VARIANT_TYPES = {
    "b": dbus.Boolean,
    "y": dbus.Byte,
    "n": dbus.Int16,
    "q": dbus.UInt16,
    "i": dbus.Int32,
    "u": dbus.UInt32,
    "x": dbus.Int64,
    "t": dbus.UInt64,
    "d": dbus.Double,
    "s": dbus.String,
    "o": dbus.ObjectPath,
}

SettingsMap = Dict[str, Dict[str, object]]


def to_bytes(value) -> bytes:
    """Converts an `ay` reply into bytes. Empty arrays stay empty."""
    return bytes(int(octet) for octet in value)


def to_str_list(value) -> List[str]:
    return [str(item) for item in value]


def to_int_list(value) -> List[int]:
    return [int(item) for item in value]


def to_packed_tuples(value) -> List[List[int]]:
    """Converts the legacy `aau` address/route representation."""
    return [[int(item) for item in entry] for entry in value]


def to_dict_list(value) -> List[Dict[str, object]]:
    """Converts `aa{sv}` replies, keeping the typed variant values."""
    return [{str(key): item for key, item in entry.items()} for entry in value]


def to_settings(value) -> SettingsMap:
    """
    Converts an `a{sa{sv}}` settings map to plain dictionaries.

    The variant values keep their dbus-python types (which subclass the
    python builtins) so that a map read from NetworkManager can be modified
    and sent back without losing the wire type of each value.
    """
    return {
        str(setting_name): {str(key): item for key, item in setting.items()}
        for setting_name, setting in value.items()
    }


def from_settings(settings: SettingsMap) -> "dbus.Dictionary":
    """Wraps a settings map so that it's marshalled as `a{sa{sv}}`."""
    return dbus.Dictionary(
        {
            setting_name: dbus.Dictionary(setting, signature="sv")
            for setting_name, setting in settings.items()
        },
        signature="sa{sv}"
    )


def optional_path(path) -> Optional[str]:
    """NetworkManager uses "/" to represent a missing object."""
    path = str(path)
    if not path or path == NULL_OBJECT_PATH:
        return None

    return path


def optional_string(value) -> Optional[str]:
    value = str(value)
    return value or None


def optional_timestamp(value, bits: int) -> Optional[int]:
    """
    Converts a boot time timestamp to an unsigned value of the given size.

    NetworkManager reports -1 when there is no timestamp. Any value that
    does not fit the unsigned range is reported as missing as well.
    """
    value = int(value)
    if 0 <= value < 2 ** bits:
        return value

    return None


def wrap_variant(value, signature: str):
    """
    Types a python value so that it's sent with the expected signature
    inside a variant (e.g. when setting a property).
    """
    try:
        wire_type = _VARIANT_TYPES[signature]
    except KeyError:
        return value

    return wire_type(value, variant_level=1)


def unpack_reply(values: tuple):
    """
    Normalizes the reply arguments received by an asynchronous reply
    handler to what a blocking call would have returned.
    """
    if not values:
        return None
    if len(values) == 1:
        return values[0]

    return tuple(values)
