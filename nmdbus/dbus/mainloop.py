"""
GLib main loop used to receive the replies of asynchronous calls.


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
from threading import Thread, Lock

from dbus.mainloop.glib import DBusGMainLoop
from gi.repository import GLib

logger = logging.getLogger(__name__)


class MainLoopThread:
    """
    Runs the GLib main loop in a daemon thread.

    dbus-python dispatches the replies of asynchronous calls from the GLib
    main loop the bus connection was attached to. There is a single main
    loop per process, started the first time it's needed.
    """
    _lock = Lock()
    _main_loop = None
    _dbus_main_loop = None

    @classmethod
    def ensure_running(cls) -> "dbus.mainloop.NativeMainLoop":
        """
        Starts the main loop thread, if it was not started yet.

            :return: the main loop to attach bus connections to
            :rtype: dbus.mainloop.NativeMainLoop
        """
        if not cls._main_loop:
            with cls._lock:
                if not cls._main_loop:
                    cls._start()

        return cls._dbus_main_loop

    @classmethod
    def is_running(cls) -> bool:
        return bool(cls._main_loop and cls._main_loop.is_running())

    @classmethod
    def _start(cls):
        cls._dbus_main_loop = DBusGMainLoop(set_as_default=True)
        main_loop = GLib.MainLoop()
        # Setting daemon=True when creating the thread makes that this thread
        # exits abruptly when the python process exits.
        Thread(target=main_loop.run, name="nmdbus-glib-main-loop", daemon=True).start()
        cls._main_loop = main_loop
        logger.debug("GLib main loop thread started.")
