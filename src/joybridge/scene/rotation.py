from __future__ import annotations

from typing import Iterable

from spatialmath import SO3

from ..protocol import AxisState
from ..utils import get_logger
from ..utils.dataclasses import SceneConfig


def rotate_local(orientation: SO3, yaw_deg: float, pitch_deg: float) -> SO3:
    """Yaw about local up (y), then pitch about local right (x)."""
    return orientation * SO3.Ry(yaw_deg, unit="deg") * SO3.Rx(pitch_deg, unit="deg")


class RotationController:
    """
    Turns the target by ``normalized axis * sensitivity`` degrees per update
    and toggles a light on every press edge (button 1 -> 0).
    """

    def __init__(self, cfg: SceneConfig):
        self._logger = get_logger("Rotation", cfg.verbose)
        self.sensitivity_x = cfg.sensitivity_x
        self.sensitivity_y = cfg.sensitivity_y
        self.orientation = SO3()
        self.light_on = False
        self._last_button = 1

    def update(self, state: AxisState, samples: Iterable[AxisState] = ()) -> bool:
        """
        Apply one frame. ``samples`` are all records seen since the last
        frame; edges are looked for across them so a short press between two
        frames still counts. Returns True if the light changed.
        """
        nx, ny = state.normalized()
        self.orientation = rotate_local(self.orientation,
                                        nx * self.sensitivity_x,
                                        -ny * self.sensitivity_y)

        toggled = False
        for record in (tuple(samples) or (state,)):
            if self._last_button == 1 and record.button == 0:
                self.light_on = not self.light_on
                toggled = not toggled
                self._logger.debug("Light %s", "on" if self.light_on else "off")
            self._last_button = record.button
        return toggled


class FlashlightController:
    """Rotates by ``rotation_speed`` degrees at full deflection; light follows the raw button."""

    def __init__(self, cfg: SceneConfig):
        self.rotation_speed = cfg.rotation_speed
        self.orientation = SO3()
        self.light_on = False

    def update(self, state: AxisState):
        nx, ny = state.normalized()
        self.orientation = rotate_local(self.orientation,
                                        nx * self.rotation_speed,
                                        -ny * self.rotation_speed)
        self.light_on = state.button == 1
