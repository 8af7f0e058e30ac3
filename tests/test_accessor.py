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
from unittest.mock import Mock, patch

import pytest
from dbus.exceptions import DBusException

from nmdbus import MissingDestinationError, TransportError
from nmdbus.dbus import DBUS_TIMEOUT, BlockingDBusAccessor
from nmdbus.dbus.mainloop import MainLoopThread
from nmdbus.raw import DeviceProxy, RemoteInterface, RemoteMethod, RemoteProperty
from tests.boilerplate import (
    DEVICE_IFACE, NM_BUS, NM_PATH, PROPERTIES_IFACE, WIFI_PATH, build_network_manager_bus
)


class ServicelessProxy(RemoteInterface):
    """An interface that does not declare the bus name hosting it."""
    interface_name = "org.example.Serviceless"

    Ping = RemoteMethod("", "")
    Name = RemoteProperty("s")


@pytest.fixture
def bus():
    return build_network_manager_bus()


def test_blocking_calls_carry_the_default_timeout(bus):
    accessor = BlockingDBusAccessor(bus, NM_BUS, WIFI_PATH)

    DeviceProxy(accessor).Interface.get()

    call = bus.calls[0]
    assert call.timeout == DBUS_TIMEOUT == 5.0
    assert call.object_path == WIFI_PATH
    assert call.interface == PROPERTIES_IFACE
    assert call.member == "Get"
    assert call.args == (DEVICE_IFACE, "Interface")
    assert call.signature == "ss"


def test_property_reads_return_the_raw_reply_without_transform(bus):
    accessor = BlockingDBusAccessor(bus, NM_BUS, WIFI_PATH)

    assert DeviceProxy(accessor).Interface.get() == "wlan0"


def test_transform_is_applied_to_the_reply(bus):
    accessor = BlockingDBusAccessor(bus, NM_BUS, WIFI_PATH)

    assert DeviceProxy(accessor).Mtu.get(transform=lambda mtu: mtu * 2) == 3000


def test_method_calls_without_arguments_let_dbus_guess_the_signature(bus):
    accessor = BlockingDBusAccessor(bus, NM_BUS, WIFI_PATH)

    DeviceProxy(accessor).Disconnect()

    assert bus.calls[0].signature is None


def test_a_proxy_is_resolved_for_every_call(bus):
    accessor = BlockingDBusAccessor(bus, NM_BUS, WIFI_PATH)
    proxy = DeviceProxy(accessor)

    proxy.Interface.get()
    proxy.Interface.get()

    assert bus.resolved == [(NM_BUS, WIFI_PATH), (NM_BUS, WIFI_PATH)]


def test_derived_accessors_share_the_connection_and_mode(bus):
    accessor = BlockingDBusAccessor(bus, NM_BUS, NM_PATH, timeout=1.0)

    child = accessor.with_path(WIFI_PATH)
    other = accessor.with_bus_and_path("org.example.Other", "/org/example")

    assert child.connection is other.connection is bus
    assert (child.bus_name, child.object_path) == (NM_BUS, WIFI_PATH)
    assert (other.bus_name, other.object_path) == ("org.example.Other", "/org/example")
    assert child.timeout == other.timeout == 1.0
    assert (accessor.bus_name, accessor.object_path) == (NM_BUS, NM_PATH)


def test_interface_default_destination_is_used_without_explicit_bus_name(bus):
    accessor = BlockingDBusAccessor(bus, object_path=WIFI_PATH)

    assert DeviceProxy(accessor).Interface.get() == "wlan0"
    assert bus.resolved == [(NM_BUS, WIFI_PATH)]


def test_explicit_bus_name_overrides_the_interface_default(bus):
    accessor = BlockingDBusAccessor(bus, "org.example.Other", WIFI_PATH)

    DeviceProxy(accessor).Interface.get()

    assert bus.resolved == [("org.example.Other", WIFI_PATH)]


def test_missing_destination_fails_before_any_call(bus):
    accessor = BlockingDBusAccessor(bus, object_path="/org/example")

    with pytest.raises(MissingDestinationError):
        ServicelessProxy(accessor).Ping()
    with pytest.raises(MissingDestinationError):
        ServicelessProxy(accessor).Name.get()

    assert bus.resolved == []
    assert bus.calls == []


def test_dbus_exceptions_are_translated_to_transport_errors():
    connection = Mock()
    method = connection.get_object.return_value.get_dbus_method.return_value
    method.side_effect = DBusException(
        "Did not receive a reply.", name="org.freedesktop.DBus.Error.NoReply"
    )
    accessor = BlockingDBusAccessor(connection, NM_BUS, WIFI_PATH)

    with pytest.raises(TransportError) as exc_info:
        DeviceProxy(accessor).State.get()

    assert exc_info.value.dbus_name == "org.freedesktop.DBus.Error.NoReply"
    assert exc_info.value.message == "Did not receive a reply."
    assert isinstance(exc_info.value.__cause__, DBusException)
    connection.get_object.assert_called_once_with(NM_BUS, WIFI_PATH, introspect=False)
    method.assert_called_once_with(
        "org.freedesktop.NetworkManager.Device", "State", signature="ss", timeout=DBUS_TIMEOUT
    )


def test_calling_an_object_that_vanished_fails(bus):
    accessor = BlockingDBusAccessor(bus, NM_BUS, "/org/freedesktop/NetworkManager/Devices/42")

    with pytest.raises(TransportError) as exc_info:
        DeviceProxy(accessor).State.get()

    assert exc_info.value.dbus_name == "org.freedesktop.DBus.Error.UnknownObject"


@patch("nmdbus.dbus.mainloop.Thread")
@patch("nmdbus.dbus.mainloop.GLib")
@patch("nmdbus.dbus.mainloop.DBusGMainLoop")
def test_main_loop_thread_is_started_once(dbus_main_loop_mock, glib_mock, thread_mock):
    with patch.multiple(MainLoopThread, _main_loop=None, _dbus_main_loop=None):
        first = MainLoopThread.ensure_running()
        second = MainLoopThread.ensure_running()

        assert first is second is dbus_main_loop_mock.return_value
        dbus_main_loop_mock.assert_called_once_with(set_as_default=True)
        thread_mock.assert_called_once_with(
            target=glib_mock.MainLoop.return_value.run,
            name="nmdbus-glib-main-loop", daemon=True
        )
        thread_mock.return_value.start.assert_called_once()
