# joybridge/io/__init__.py
from .serial_link import SerialLink, open_serial
from .reader import SerialReader
from .ports import choose_port, list_port_names, resolve_port
from .bridge import SerialBridge, BlockingSerialBridge, make_bridge

__all__ = [
    "SerialLink", "open_serial", "SerialReader",
    "choose_port", "list_port_names", "resolve_port",
    "SerialBridge", "BlockingSerialBridge", "make_bridge",
]
