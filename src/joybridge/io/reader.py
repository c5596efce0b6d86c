# joybridge/io/reader.py
from __future__ import annotations

import threading
from queue import Queue
from typing import Callable

from .serial_link import SerialLink
from ..errors import LineTimeout, LinkIOError
from ..utils import get_logger


class SerialReader(threading.Thread):
    """
    Background thread: block on ``link.read_line()`` and push every non-blank
    line onto ``lines``. Timeouts are normal. Any other failure is handed to
    ``on_error`` and ends the thread; the owner decides whether to reopen.
    """

    def __init__(self, link: SerialLink, lines: Queue, on_error: Callable[[str], None],
                 verbose=None):
        super().__init__(daemon=True, name="SerialReader")
        self.link = link
        self.lines = lines
        self.on_error = on_error
        self.stop_event = threading.Event()
        self.log = get_logger("SerialReader", verbose)

    def stop(self):
        self.stop_event.set()

    def run(self):
        self.log.debug("Listening on %s", self.link.port)
        while not self.stop_event.is_set() and self.link.is_open:
            try:
                line = self.link.read_line()
            except LineTimeout:
                continue
            except Exception as e:
                if not self.stop_event.is_set():
                    self.on_error(str(e) if isinstance(e, LinkIOError)
                                  else f"Serial read error: {e}")
                break

            if line.strip():
                self.log.debug("RX %s", line)
                self.lines.put(line)
        self.log.debug("Reader exiting")
