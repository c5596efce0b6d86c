from .rotation import RotationController, FlashlightController, rotate_local

__all__ = ["RotationController", "FlashlightController", "rotate_local"]
