"""
Shared fixtures: a scripted stand-in for ``serial.Serial`` and a stub bridge
for exercising the consumer side without threads.
"""

import time
from collections import deque

import pytest

from joybridge.utils.dataclasses import SerialConfig


class FakeSerial:
    """
    Minimal ``serial.Serial`` look-alike.

    ``chunks`` are returned one per ``read_until`` call; an Exception instance
    in the list is raised instead. When the script runs out, reads behave like
    a timeout (empty bytes). ``write_errors`` works the same way per write.
    """

    def __init__(self, chunks=(), write_errors=()):
        self.is_open = True
        self.chunks = deque(chunks)
        self.write_errors = deque(write_errors)
        self.written = []
        self.reset_calls = 0
        self.close_calls = 0

    def reset_input_buffer(self):
        self.reset_calls += 1

    def read_until(self, expected=b"\n", size=None):
        if not self.chunks:
            time.sleep(0.005)
            return b""
        item = self.chunks.popleft()
        if isinstance(item, Exception):
            raise item
        return item

    def write(self, data):
        if self.write_errors:
            err = self.write_errors.popleft()
            if err is not None:
                raise err
        self.written.append(data)
        return len(data)

    def flush(self):
        pass

    def close(self):
        self.is_open = False
        self.close_calls += 1


class StubBridge:
    """Bridge stand-in: lines are pushed by the test, writes are recorded."""

    def __init__(self):
        self.is_open = False
        self.inbound = []
        self.outbound = []
        self.written = []
        self.errors = []
        self.open_calls = 0
        self.close_calls = 0

    def open(self):
        self.open_calls += 1
        self.is_open = True
        return True

    def close(self):
        self.close_calls += 1
        self.is_open = False

    def drain_inbound(self):
        lines, self.inbound = self.inbound, []
        return lines

    def send_line(self, message):
        if message and message.strip():
            self.outbound.append(message)

    def send(self, fmt, *args):
        self.send_line(fmt.format(*args))

    def flush_outbound(self):
        sent = len(self.outbound)
        self.written.extend(self.outbound)
        self.outbound = []
        return sent

    def record_error(self, message):
        self.errors.append(message)

    def take_error(self):
        if not self.errors:
            return None
        message = self.errors[-1]
        self.errors = []
        return message


def wait_for(predicate, timeout=2.0, poll=0.01):
    """Poll ``predicate`` until it is truthy or ``timeout`` seconds pass."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(poll)
    return bool(predicate())


@pytest.fixture
def serial_cfg():
    return SerialConfig(port="/dev/ttyACM0", auto_detect=False, read_timeout_ms=20)


@pytest.fixture
def fake_serial():
    return FakeSerial()


@pytest.fixture
def stub_bridge():
    return StubBridge()


def factory_for(fake):
    """A ``serial_factory`` that hands out ``fake`` and remembers the call."""
    calls = []

    def factory(port, baud, timeout, dtr, rts):
        calls.append((port, baud, timeout, dtr, rts))
        return fake

    factory.calls = calls
    return factory
