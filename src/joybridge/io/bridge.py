# joybridge/io/bridge.py
from __future__ import annotations

import threading
from collections import deque
from queue import Queue, Empty
from typing import Deque, List, Optional

from .ports import PortEnumerator, list_port_names, resolve_port
from .reader import SerialReader
from .serial_link import SerialLink, open_serial
from ..errors import SerialConnectionError, LineTimeout, LinkIOError
from ..utils import get_logger
from ..utils.dataclasses import SerialConfig


class SerialBridge:
    """
    Owns one SerialLink and gives the rest of the program non-blocking,
    thread-safe line I/O:

        bridge = SerialBridge(cfg)
        bridge.open()
        ...
        for line in bridge.drain_inbound(): ...     # once per tick
        bridge.send_line("LED 1")
        bridge.flush_outbound()                      # once per tick
        ...
        bridge.close()

    A SerialReader thread fills the inbound queue. Failures never raise out
    of the bridge: they land in a single latest-error slot that the consumer
    empties with take_error().
    """

    JOIN_TIMEOUT = 0.5          # seconds to wait for the reader on close

    def __init__(self, cfg: SerialConfig, serial_factory=open_serial,
                 enumerate_ports: PortEnumerator = list_port_names):
        self.cfg = cfg
        self.log = get_logger(self.__class__.__name__, cfg.verbose)
        self.port = cfg.port
        self.link: Optional[SerialLink] = None
        self._serial_factory = serial_factory
        self._enumerate_ports = enumerate_ports
        self._reader: Optional[SerialReader] = None
        self._inbound: Queue = Queue()
        self._outbound: Deque[str] = deque()
        self._error_lock = threading.Lock()
        self._last_error: Optional[str] = None

    # ---------- lifecycle ----------------------------------------------
    @property
    def is_open(self) -> bool:
        """False once the port is closed or the reader thread has died."""
        link = self.link
        if link is None or not link.is_open:
            return False
        reader = self._reader
        return reader is None or reader.is_alive()

    def open(self) -> bool:
        """
        Resolve the device, open it and start reading. Returns False (with
        the reason in the error slot) when the port could not be opened.
        """
        if self.is_open:
            return True
        if self.link is not None:
            # reader died on an I/O error; start over on a fresh handle
            self.close()

        if self.cfg.auto_detect:
            chosen = resolve_port(self.port, self._enumerate_ports, self.cfg.markers)
            if chosen:
                self.port = chosen

        link = SerialLink(self.port, self.cfg.baud_rate, timeout=self.cfg.read_timeout,
                          dtr=self.cfg.dtr, rts=self.cfg.rts,
                          serial_factory=self._serial_factory, verbose=self.cfg.verbose)
        try:
            link.open()
        except SerialConnectionError as e:
            self.record_error(str(e))
            return False

        self.link = link
        self._start_reader()
        return True

    def _start_reader(self):
        self._reader = SerialReader(self.link, self._inbound, self.record_error,
                                    verbose=self.cfg.verbose)
        self._reader.start()

    def close(self):
        """Stop the reader, then close the port. Idempotent."""
        reader, self._reader = self._reader, None
        if reader is not None:
            reader.stop()
            reader.join(self.JOIN_TIMEOUT)
            if reader.is_alive():
                self.log.debug("Reader still blocked after %.1f s, closing anyway",
                               self.JOIN_TIMEOUT)

        link, self.link = self.link, None
        if link is not None:
            link.close()

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, *exc):
        self.close()

    # ---------- errors -------------------------------------------------
    def record_error(self, message: str):
        with self._error_lock:
            self._last_error = message

    def take_error(self) -> Optional[str]:
        """Return the latest error (if any) and clear it."""
        with self._error_lock:
            message, self._last_error = self._last_error, None
        return message

    # ---------- inbound ------------------------------------------------
    def drain_inbound(self) -> List[str]:
        """All lines received since the last call, oldest first. Never blocks."""
        lines = []
        while True:
            try:
                lines.append(self._inbound.get_nowait())
            except Empty:
                return lines

    # ---------- outbound -----------------------------------------------
    def send_line(self, message: str):
        """Queue ``message`` for the next flush; the terminator is added then."""
        if not message or not message.strip():
            return
        self._outbound.append(message)

    def send(self, fmt: str, *args):
        """Convenience formatter: ``send("LED {0}", 1)``."""
        self.send_line(fmt.format(*args))

    @property
    def pending_outbound(self) -> int:
        return len(self._outbound)

    def flush_outbound(self) -> int:
        """
        Write queued lines in order. The first failing write stops the flush;
        that line and everything behind it stay queued. Returns lines written.
        """
        link = self.link
        if link is None or not link.is_open:
            return 0

        sent = 0
        while self._outbound:
            line = self._outbound[0]
            try:
                link.write_line(line)
            except LinkIOError as e:
                self.record_error(str(e))
                break
            self._outbound.popleft()
            self.log.debug("TX %s", line)
            sent += 1
        return sent


class BlockingSerialBridge(SerialBridge):
    """
    Same interface, no thread: drain_inbound() does one blocking read of at
    most ``read_timeout_ms`` on the caller's thread. Read errors are recorded
    and the next call simply tries again.
    """

    def _start_reader(self):
        pass

    def drain_inbound(self) -> List[str]:
        link = self.link
        if link is None or not link.is_open:
            return []
        try:
            line = link.read_line()
        except LineTimeout:
            return []
        except LinkIOError as e:
            self.record_error(str(e))
            return []

        if not line.strip():
            return []
        self.log.debug("RX %s", line)
        return [line]


def make_bridge(cfg: SerialConfig, **kwargs) -> SerialBridge:
    """Pick the bridge class for ``cfg.mode``."""
    if cfg.mode == "sync":
        return BlockingSerialBridge(cfg, **kwargs)
    return SerialBridge(cfg, **kwargs)
