"""
joybridge.errors
Exception types raised at the SerialLink boundary.

Each one also derives from the matching builtin so callers that only know
about ``ConnectionError`` / ``TimeoutError`` / ``IOError`` still catch them.
"""


class BridgeError(Exception):
    """Base class for everything the bridge raises."""


class SerialConnectionError(BridgeError, ConnectionError):
    """The device could not be resolved or opened."""


class LineTimeout(BridgeError, TimeoutError):
    """No complete line arrived within the read timeout. Not a fault."""


class LinkIOError(BridgeError, IOError):
    """A read or write failed on an open link."""


class DecodeError(BridgeError, ValueError):
    """A received line is not a valid ``x y button`` record."""
