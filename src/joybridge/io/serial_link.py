# joybridge/io/serial_link.py
import threading

import serial

from ..errors import SerialConnectionError, LineTimeout, LinkIOError
from ..utils import get_logger


def open_serial(port: str, baud: int, timeout: float, dtr: bool = True, rts: bool = True):
    """
    Open ``port`` with pyserial. Plain device paths and pyserial URLs
    (``loop://``, ``socket://host:port``) both work.
    """
    ser = serial.serial_for_url(port, do_not_open=True)
    ser.baudrate = baud
    ser.timeout = timeout
    ser.write_timeout = timeout
    ser.dtr = dtr                       # native USB boards often wait for DTR
    ser.rts = rts
    ser.open()
    return ser


class SerialLink:
    """
    Line-oriented wrapper around one serial port.

    ``read_line`` blocks for at most ``timeout`` seconds and raises LineTimeout
    when no full line arrived; bytes of an unfinished line are kept for the
    next call. pyserial errors are re-raised as LinkIOError.
    """

    MAX_LINE = 4096             # bytes kept while waiting for a terminator

    def __init__(self, port: str, baud: int, timeout: float = 0.1, newline: str = "\n",
                 dtr: bool = True, rts: bool = True, encoding: str = "ascii",
                 serial_factory=open_serial, verbose=None):
        self.log = get_logger(self.__class__.__name__, verbose)
        self._lock = threading.Lock()               # serializes writes
        self.port = port
        self.baud = baud
        self.timeout = timeout
        self.newline = newline
        self.dtr = dtr
        self.rts = rts
        self.encoding = encoding
        self._factory = serial_factory
        self._nl = newline.encode(encoding)
        self._partial = bytearray()
        self.overflows = 0          # unterminated runs dropped for exceeding MAX_LINE
        self.ser = None

    @property
    def is_open(self) -> bool:
        ser = self.ser
        return ser is not None and ser.is_open

    def open(self):
        if self.is_open:
            return
        if not self.port:
            raise SerialConnectionError("No serial port specified/found.")

        try:
            ser = self._factory(self.port, self.baud, self.timeout, self.dtr, self.rts)
        except (serial.SerialException, OSError, ValueError) as e:
            raise SerialConnectionError(f"Error opening serial port '{self.port}': {e}") from e

        try:
            ser.reset_input_buffer()        # drop whatever piled up before we looked
        except (serial.SerialException, OSError) as e:
            ser.close()
            raise SerialConnectionError(f"Error opening serial port '{self.port}': {e}") from e

        self._partial.clear()
        self.ser = ser
        self.log.info("Opened %s @ %d", self.port, self.baud)

    def read_line(self) -> str:
        """
        Return the next complete line without its terminator (a trailing
        ``\\r`` from Arduino's println() is dropped too).
        """
        ser = self.ser
        if ser is None:
            raise LinkIOError("Serial port is not open")
        try:
            raw = ser.read_until(self._nl)
        except (serial.SerialException, OSError) as e:
            raise LinkIOError(f"Serial read error: {e}") from e

        self._partial += raw
        if not self._partial.endswith(self._nl):
            if len(self._partial) > self.MAX_LINE:
                self.overflows += 1
                self.log.debug("Dropping %d bytes with no line terminator", len(self._partial))
                self._partial.clear()
            raise LineTimeout(f"No line within {self.timeout:.3f} s")

        data = bytes(self._partial[:-len(self._nl)])
        self._partial.clear()
        # bad bytes become U+FFFD so a damaged record fails to parse
        return data.decode(self.encoding, errors="replace").rstrip("\r")

    def write_line(self, text: str):
        ser = self.ser
        if ser is None:
            raise LinkIOError("Serial port is not open")
        data = (text + self.newline).encode(self.encoding, errors="replace")
        with self._lock:
            try:
                ser.write(data)
                ser.flush()
            except (serial.SerialException, OSError) as e:
                raise LinkIOError(f"Serial write error: {e}") from e

    def close(self):
        """Close the port. Safe to call repeatedly; close errors are dropped."""
        ser, self.ser = self.ser, None
        if ser is None:
            return
        try:
            ser.close()
        except Exception as e:
            self.log.debug("Ignoring error while closing %s: %s", self.port, e)
        else:
            self.log.info("Closed %s", self.port)

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, *exc):
        self.close()
