"""
Resolution of remote objects on the bus.


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
import asyncio
import copy
import logging
from abc import abstractmethod
from typing import Callable, Optional

import dbus
import dbus.exceptions

from nmdbus.exceptions import MissingDestinationError, TransportError
from nmdbus.marshal import unpack_reply

logger = logging.getLogger(__name__)

# Timeout, in seconds, applied to every blocking call.
DBUS_TIMEOUT = 5.0


class DBusAccessor:
    """
    Holds a shared bus connection together with the bus name and the
    object path of a remote object.

    A new proxy object is resolved for every call. Nothing is cached, so
    once the remote object is gone the next call simply fails with a
    :class:`TransportError`.

    The way replies are delivered is up to the sub-classes: a
    :class:`BlockingDBusAccessor` returns the (translated) reply, while an
    :class:`AsyncDBusAccessor` returns an awaitable resolving to it. Code
    using an accessor only needs to pass a ``transform`` callable to have
    the reply translated in both cases.
    """
    properties_interface_path = "org.freedesktop.DBus.Properties"
    asynchronous = False

    def __init__(
            self, connection: "dbus.bus.BusConnection",
            bus_name: Optional[str] = None, object_path: str = None
    ):
        self.__connection = connection
        self.__bus_name = bus_name
        self.__object_path = str(object_path) if object_path else None

    def __repr__(self) -> str:
        return "{} <\"{}\" \"{}\">".format(
            str(self.__class__.__name__), self.bus_name, self.object_path
        )

    @property
    def connection(self) -> "dbus.bus.BusConnection":
        """
            :return: the bus connection shared by all derived accessors
            :rtype: dbus.bus.BusConnection
        """
        return self.__connection

    @property
    def bus_name(self) -> Optional[str]:
        """
            :return: the destination service name, if one was given
            :rtype: str
        """
        return self.__bus_name

    @property
    def object_path(self) -> str:
        """
            :return: dbus object path
            :rtype: str
        """
        return self.__object_path

    def with_path(self, object_path: str) -> "DBusAccessor":
        """
        Derives an accessor for another object hosted by the same service,
        usually a child object returned by a remote call.
        """
        return self.with_bus_and_path(self.bus_name, object_path)

    def with_bus_and_path(self, bus_name: Optional[str], object_path: str) -> "DBusAccessor":
        """Derives an accessor for an object on a different tree or service."""
        derived = copy.copy(self)
        derived.__bus_name = bus_name
        derived.__object_path = str(object_path)
        return derived

    def create_proxy(self, default_destination: Optional[str] = None) -> "dbus.proxies.ProxyObject":
        """
        Resolves the proxy object for the current bus name and object path.

            :param default_destination: bus name used when the accessor
                was not given one explicitly
            :type default_destination: str
            :return: proxy object
            :rtype: dbus.proxies.ProxyObject
            :raises MissingDestinationError: if there is no bus name to use
        """
        bus_name = self.bus_name or default_destination
        if not bus_name:
            raise MissingDestinationError(
                f"No destination to resolve {self.object_path}"
            )

        return self.connection.get_object(bus_name, self.object_path, introspect=False)

    def call_method(
            self, interface, method_name: str, args: tuple = (),
            signature: Optional[str] = None, transform: Optional[Callable] = None
    ):
        """
        Calls a method of the remote object.

            :param interface: declaration of the remote interface
            :type interface: RemoteInterface
            :param method_name: name of the remote method
            :param args: arguments of the call
            :param signature: input signature of the call
            :param transform: callable applied to the reply
        """
        return self._call(
            interface.default_destination, interface.interface_name,
            method_name, args, signature, transform
        )

    def get_property(self, interface, property_name: str, transform: Optional[Callable] = None):
        """Reads a property of the remote object."""
        return self._call(
            interface.default_destination, self.properties_interface_path,
            "Get", (interface.interface_name, property_name), "ss", transform
        )

    def set_property(
            self, interface, property_name: str, value: object,
            transform: Optional[Callable] = None
    ):
        """
        Sets a property of the remote object. The value is expected to be
        already typed for the wire (see :func:`nmdbus.marshal.wrap_variant`).
        """
        return self._call(
            interface.default_destination, self.properties_interface_path,
            "Set", (interface.interface_name, property_name, value), "ssv", transform
        )

    def _call(self, default_destination, interface_name, member, args, signature, transform):
        try:
            proxy = self.create_proxy(default_destination)
        except MissingDestinationError as exc:
            return self.fail(exc)

        logger.debug(
            "Calling %s.%s on %s", interface_name, member, self.object_path
        )
        method = proxy.get_dbus_method(member, interface_name)
        return self._dispatch(method, args, signature, transform)

    @abstractmethod
    def _dispatch(self, method, args, signature, transform):
        """Issues the call and delivers the (translated) reply."""
        raise NotImplementedError

    @abstractmethod
    def fail(self, exc: Exception):
        """
        Delivers an error detected before any call could be issued, the
        same way errors of remote calls are delivered: raised in blocking
        mode, as a failed awaitable in asynchronous mode.
        """
        raise NotImplementedError


class BlockingDBusAccessor(DBusAccessor):
    """
    Blocks the calling thread until the reply arrives or until the timeout
    expires.
    """
    def __init__(self, *args, timeout: float = DBUS_TIMEOUT, **kwargs):
        super().__init__(*args, **kwargs)
        self.timeout = timeout

    def _dispatch(self, method, args, signature, transform):
        try:
            reply = method(*args, signature=signature, timeout=self.timeout)
        except dbus.exceptions.DBusException as exc:
            raise TransportError.from_dbus_exception(exc) from exc

        return transform(reply) if transform else reply

    def fail(self, exc: Exception):
        raise exc


class AsyncDBusAccessor(DBusAccessor):
    """
    Returns an asyncio future for every call, resolved once the reply
    arrives.

    Replies are received on the thread iterating the GLib main loop the
    bus connection was created with (see
    :class:`nmdbus.dbus.mainloop.MainLoopThread`) and are handed over to
    the asyncio loop that issued the call. Cancelling the future abandons
    the call: the reply, if any, is discarded.
    """
    asynchronous = True

    def _dispatch(self, method, args, signature, transform):
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def on_reply(*values):
            loop.call_soon_threadsafe(_resolve, future, unpack_reply(values), transform)

        def on_error(exc):
            loop.call_soon_threadsafe(_reject, future, exc)

        try:
            method(
                *args, signature=signature,
                reply_handler=on_reply, error_handler=on_error
            )
        except dbus.exceptions.DBusException as exc:
            _reject(future, exc)

        return future

    def fail(self, exc: Exception):
        future = asyncio.get_running_loop().create_future()
        future.set_exception(exc)
        return future


def _resolve(future: asyncio.Future, reply, transform: Optional[Callable]):
    if future.done():
        return

    try:
        result = transform(reply) if transform else reply
    except Exception as exc:  # pylint: disable=broad-except
        future.set_exception(exc)
        return

    future.set_result(result)


def _reject(future: asyncio.Future, exc: Exception):
    if future.done():
        return

    if isinstance(exc, dbus.exceptions.DBusException):
        exc = TransportError.from_dbus_exception(exc)

    future.set_exception(exc)
