from .logger import get_logger, ColorLogger
from .config_loader import load_config, parse_config
from .dataclasses import SerialConfig, SceneConfig, OrchestratorConfig, Configs

__all__ = [
    "get_logger", "ColorLogger",
    "load_config", "parse_config",
    "SerialConfig", "SceneConfig", "OrchestratorConfig", "Configs",
]
