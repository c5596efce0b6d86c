# joybridge/protocol/decoder.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Optional, Tuple

from ..errors import DecodeError

AXIS_CENTER: Final[int] = 512
FIELD_COUNT: Final[int] = 3
_SPLIT = re.compile(r"[\s,]+")


def normalize_axis(value: int) -> float:
    """Map a 0..1023 reading onto roughly -1..+1 (512 is centre, 1024 is +1)."""
    return (value - AXIS_CENTER) / float(AXIS_CENTER)


@dataclass(frozen=True)
class AxisState:
    """One ``x y button`` record as sent by the joystick firmware."""
    x: int = AXIS_CENTER
    y: int = AXIS_CENTER
    button: int = 1                     # INPUT_PULLUP: pressed == 0

    @property
    def pressed(self) -> bool:
        return self.button == 0

    def normalized(self) -> Tuple[float, float]:
        return normalize_axis(self.x), normalize_axis(self.y)


def split_fields(line: str, delimiter: Optional[str] = None) -> list[str]:
    text = line.strip()
    if delimiter is None:
        parts = _SPLIT.split(text)
    else:
        parts = text.split(delimiter)
    return [p.strip() for p in parts if p.strip()]


def decode_line(line: str, delimiter: Optional[str] = None) -> AxisState:
    """
    Parse ``"x y button"`` (or ``"x,y,button"``) into an AxisState.

    Raises DecodeError on a wrong field count or a non-integer field.
    """
    parts = split_fields(line, delimiter)
    if len(parts) != FIELD_COUNT:
        raise DecodeError(f"expected {FIELD_COUNT} fields, got {len(parts)}: {line!r}")
    try:
        x, y, button = (int(p) for p in parts)
    except ValueError as e:
        raise DecodeError(f"non-integer field in {line!r}") from e
    return AxisState(x, y, button)


def try_decode(line: str, delimiter: Optional[str] = None) -> Optional[AxisState]:
    """Like decode_line but returns None for noise instead of raising."""
    try:
        return decode_line(line, delimiter)
    except DecodeError:
        return None
