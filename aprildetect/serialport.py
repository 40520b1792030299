"""Minimal serial port access for talking to a microcontroller."""

from __future__ import annotations

import time
from typing import Optional, Union

import serial

BAUD_RATES = (9600, 19200, 38400, 115200)
"""Baud rates the port can be opened with."""

_POLL_INTERVAL = 0.0001


def _terminator(until: Union[int, bytes, str]) -> int:
    if isinstance(until, int):
        if not 0 <= until <= 255:
            raise ValueError("terminator must be a byte value")
        return until
    data = until.encode("latin-1") if isinstance(until, str) else bytes(until)
    if len(data) != 1:
        raise ValueError("terminator must be a single byte")
    return data[0]


class SerialPort:
    """A serial connection with 8 data bits, no parity and one stop bit.

    ``port`` is a device path or any URL the serial library understands.
    Reads never block: a read with no data waiting returns ``None``.
    """

    def __init__(self, port: str, rate: int = 115200) -> None:
        if rate not in BAUD_RATES:
            raise ValueError(f"unknown baud rate requested: {rate}")
        self._port = serial.serial_for_url(
            port,
            baudrate=rate,
            bytesize=serial.EIGHTBITS,
            parity=serial.PARITY_NONE,
            stopbits=serial.STOPBITS_ONE,
            timeout=0,
        )

    def read(self) -> Optional[int]:
        """Return the next byte, or ``None`` if nothing is waiting."""
        data = self._port.read(1)
        return data[0] if data else None

    def read_bytes_until(self, until: Union[int, bytes, str], max_length: int = 300) -> bytes:
        """Read until ``until`` arrives (and include it) or ``max_length`` bytes are read.

        Waits for more data while none is available.
        """
        if max_length <= 0:
            raise ValueError("max_length must be positive")
        stop = _terminator(until)
        result = bytearray()
        while len(result) < max_length:
            c = self.read()
            if c is None:
                time.sleep(_POLL_INTERVAL)
                continue
            result.append(c)
            if c == stop:
                break
        return bytes(result)

    def write(self, value: Union[str, bytes, int, float]) -> None:
        """Send a string, raw bytes or the text form of a number."""
        if isinstance(value, (bytes, bytearray)):
            data = bytes(value)
        elif isinstance(value, str):
            data = value.encode("latin-1")
        elif isinstance(value, bool):
            data = str(int(value)).encode("ascii")
        elif isinstance(value, int):
            data = str(value).encode("ascii")
        elif isinstance(value, float):
            data = f"{value:g}".encode("ascii")
        else:
            raise TypeError(f"cannot send value of type {type(value).__name__}")
        self._port.write(data)

    def close(self) -> None:
        """Close the connection."""
        self._port.close()

    def __enter__(self) -> "SerialPort":
        return self

    def __exit__(self, *args) -> None:
        self.close()