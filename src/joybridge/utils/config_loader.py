import yaml
from .dataclasses import SerialConfig, SceneConfig, OrchestratorConfig, Configs


def load_config(path="./config/settings.yml"):
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}

    return parse_config(raw)


def parse_config(raw):
    """Build ``Configs`` from an already-parsed mapping; absent sections use defaults."""
    return Configs(SerialConfig(**(raw.get("serial") or {})),
                   SceneConfig(**(raw.get("scene") or {})),
                   OrchestratorConfig(**(raw.get("orchestrator") or {})))
