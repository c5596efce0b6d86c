# joybridge/io/ports.py
from __future__ import annotations

from typing import Callable, Iterable, List, Sequence

import serial.tools.list_ports

from ..utils import get_logger
from ..utils.dataclasses import DEFAULT_MARKERS

log = get_logger("Ports")

# anything that returns the current device names; swapped out in tests
PortEnumerator = Callable[[], List[str]]


def list_port_names() -> List[str]:
    """Device paths of every serial port the OS reports, e.g. ``/dev/ttyACM0``."""
    return [p.device for p in serial.tools.list_ports.comports()]


def choose_port(preferred: str, ports: Sequence[str],
                markers: Iterable[str] = DEFAULT_MARKERS) -> str:
    """
    Pick a device out of ``ports``:
      1. ``preferred`` if it is one of them
      2. the first one whose name contains a USB-serial marker
      3. the first one
    With nothing enumerated, ``preferred`` comes back unchanged (may be "").
    """
    if preferred and preferred in ports:
        return preferred

    markers = list(markers)
    for p in ports:
        if any(m in p for m in markers):
            return p

    if ports:
        return ports[0]
    return preferred


def resolve_port(preferred: str, enumerate_ports: PortEnumerator = list_port_names,
                 markers: Iterable[str] = DEFAULT_MARKERS) -> str:
    """choose_port() over a live enumeration; enumeration errors keep ``preferred``."""
    try:
        ports = enumerate_ports()
    except Exception as e:
        log.debug("Port enumeration failed: %s", e)
        return preferred
    chosen = choose_port(preferred, ports, markers)
    if chosen != preferred:
        log.info("Auto-selected serial port %s (wanted %r)", chosen, preferred)
    return chosen
