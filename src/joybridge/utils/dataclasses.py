# joybridge/utils/dataclasses.py

from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_MARKERS = ["usbmodem", "usbserial", "ttyACM", "ttyUSB"]


@dataclass
class SerialConfig:
    port: str = ""
    baud_rate: int = 115200
    auto_detect: bool = True
    read_timeout_ms: int = 100
    mode: str = "async"                 # async | sync
    markers: List[str] = field(default_factory=lambda: list(DEFAULT_MARKERS))
    delimiter: Optional[str] = None     # None = whitespace and/or commas
    dtr: bool = True
    rts: bool = True
    verbose: bool = False
    enable: bool = True

    def __post_init__(self):
        if self.mode not in ("async", "sync"):
            raise ValueError(f"serial.mode must be 'async' or 'sync', got {self.mode!r}")
        if self.delimiter is not None and not self.delimiter:
            raise ValueError("serial.delimiter must be null or a non-empty string")
        if not isinstance(self.markers, (list, tuple)):
            raise ValueError(f"serial.markers must be a list, got {self.markers!r}")

    @property
    def read_timeout(self) -> float:
        return self.read_timeout_ms / 1000.0


@dataclass
class SceneConfig:
    sensitivity_x: float = 0.2
    sensitivity_y: float = 0.2
    rotation_speed: float = 1.0
    verbose: bool = False
    enable: bool = True


@dataclass
class OrchestratorConfig:
    polling_period: float = 0.02
    echo_light: bool = False
    verbose: bool = False


@dataclass
class Configs:
    serial: SerialConfig = field(default_factory=SerialConfig)
    scene: SceneConfig = field(default_factory=SceneConfig)
    orchestrator: OrchestratorConfig = field(default_factory=OrchestratorConfig)
