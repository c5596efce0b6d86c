# joybridge/joystick.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .io import SerialBridge, make_bridge
from .protocol import AxisState, try_decode
from .utils import get_logger
from .utils.dataclasses import SerialConfig


@dataclass(frozen=True)
class JoystickSnapshot:
    state: AxisState                        # latest valid record (may be from an earlier tick)
    samples: Tuple[AxisState, ...] = ()     # every valid record decoded this tick, oldest first
    discarded: int = 0                      # lines that were not ``x y button``
    connected: bool = False

    @property
    def updated(self) -> bool:
        return bool(self.samples)


class Joystick:
    """
    Consumer side of the bridge, called once per frame via tick().

    Each tick surfaces any bridge error once, drains and decodes the received
    lines, keeps the last valid record as the current state, and flushes
    queued outgoing lines.
    """

    def __init__(self, cfg: SerialConfig, bridge: Optional[SerialBridge] = None):
        self._logger = get_logger("Joystick", cfg.verbose)
        self._enable = cfg.enable
        self._delimiter = cfg.delimiter
        self.bridge = bridge if bridge is not None else make_bridge(cfg)
        self.state = AxisState()

    @property
    def connected(self) -> bool:
        return self.bridge.is_open

    def connect(self) -> bool:
        if not self._enable:
            self._logger.debug("Not enabled")
            return False
        ok = self.bridge.open()
        self._surface_error()
        return ok

    def disconnect(self):
        self.bridge.close()
        self._logger.info("Disconnected from joystick")

    def send_line(self, message: str):
        self.bridge.send_line(message)

    def send(self, fmt: str, *args):
        self.bridge.send(fmt, *args)

    def _surface_error(self):
        message = self.bridge.take_error()
        if message:
            self._logger.error(message)

    def tick(self) -> JoystickSnapshot:
        self._surface_error()

        samples = []
        discarded = 0
        for line in self.bridge.drain_inbound():
            record = try_decode(line, self._delimiter)
            if record is None:
                self._logger.debug("Discarding %r", line)
                discarded += 1
                continue
            samples.append(record)

        if samples:
            self.state = samples[-1]

        self.bridge.flush_outbound()
        # a failed write shows up on this tick rather than the next one
        self._surface_error()

        return JoystickSnapshot(self.state, tuple(samples), discarded, self.connected)
