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
import dbus
import pytest

from nmdbus.marshal import (
    from_settings, optional_path, optional_string, optional_timestamp, to_bytes,
    to_settings, unpack_reply, wrap_variant
)


@pytest.mark.parametrize("value, bits, expected", [
    (0, 32, 0),
    (123450, 32, 123450),
    (2 ** 32 - 1, 32, 2 ** 32 - 1),
    (-1, 32, None),
    (-(2 ** 31), 32, None),
    (2 ** 32, 32, None),
    (2 ** 63 - 1, 64, 2 ** 63 - 1),
    (-1, 64, None),
])
def test_optional_timestamp(value, bits, expected):
    assert optional_timestamp(dbus.Int64(value) if bits == 64 else value, bits) == expected


def test_optional_path():
    assert optional_path(dbus.ObjectPath("/")) is None
    assert optional_path("") is None
    assert optional_path(dbus.ObjectPath("/org/freedesktop/NetworkManager/AccessPoint/1")) == \
        "/org/freedesktop/NetworkManager/AccessPoint/1"


def test_optional_string():
    assert optional_string(dbus.String("")) is None
    assert optional_string(dbus.String("usb-0:1")) == "usb-0:1"


def test_to_bytes_accepts_byte_arrays_and_arrays_of_bytes():
    assert to_bytes(dbus.ByteArray(b"home")) == b"home"
    assert to_bytes(dbus.Array([dbus.Byte(0xff)], signature="y")) == b"\xff"
    assert to_bytes(dbus.Array([], signature="y")) == b""


def test_to_settings_keeps_the_wire_types():
    settings = to_settings(dbus.Dictionary({
        dbus.String("ipv4"): dbus.Dictionary({
            dbus.String("may-fail"): dbus.Boolean(False),
            dbus.String("dns-priority"): dbus.Int32(-10),
        }, signature="sv")
    }, signature="sa{sv}"))

    assert type(settings) is dict
    assert type(settings["ipv4"]) is dict
    assert isinstance(settings["ipv4"]["may-fail"], dbus.Boolean)
    assert isinstance(settings["ipv4"]["dns-priority"], dbus.Int32)


def test_from_settings_sets_the_settings_map_signatures():
    wrapped = from_settings({"ipv6": {"method": "ignore"}, "proxy": {}})

    assert wrapped.signature == "sa{sv}"
    assert wrapped["ipv6"].signature == "sv"
    assert wrapped["proxy"].signature == "sv"
    assert from_settings({}).signature == "sa{sv}"


@pytest.mark.parametrize("value, signature, expected_type", [
    (True, "b", dbus.Boolean),
    (1500, "u", dbus.UInt32),
    ("wlan0", "s", dbus.String),
])
def test_wrap_variant(value, signature, expected_type):
    wrapped = wrap_variant(value, signature)

    assert isinstance(wrapped, expected_type)
    assert wrapped.variant_level == 1
    assert wrapped == value


def test_wrap_variant_leaves_container_values_untouched():
    value = dbus.Dictionary({}, signature="sv")

    assert wrap_variant(value, "a{sv}") is value


def test_unpack_reply():
    assert unpack_reply(()) is None
    assert unpack_reply((dbus.UInt32(70),)) == 70
    assert unpack_reply((dbus.Dictionary({}), dbus.UInt64(3))) == ({}, 3)
