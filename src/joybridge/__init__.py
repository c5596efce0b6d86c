"""
joybridge: serial joystick/button peripheral -> scene control.
"""
from .errors import BridgeError, SerialConnectionError, LineTimeout, LinkIOError, DecodeError
from .io import SerialBridge, BlockingSerialBridge, SerialLink, make_bridge
from .joystick import Joystick, JoystickSnapshot
from .protocol import AxisState, decode_line, try_decode

__version__ = "0.1.0"

__all__ = [
    "BridgeError", "SerialConnectionError", "LineTimeout", "LinkIOError", "DecodeError",
    "SerialBridge", "BlockingSerialBridge", "SerialLink", "make_bridge",
    "Joystick", "JoystickSnapshot",
    "AxisState", "decode_line", "try_decode",
]
