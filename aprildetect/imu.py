"""Reading and parsing status lines from a serial inertial measurement unit."""

from __future__ import annotations

import argparse
import math
import re
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .serialport import SerialPort

_FLOAT = r"\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)"
_INT = r"\s*([-+]?(?:0[xX][0-9a-fA-F]+|0[0-7]*|[1-9]\d*))"

_FIELDS = (
    ("!!!VER:", _FLOAT),
    (",AN0:", _FLOAT),
    (",AN1:", _FLOAT),
    (",AN2:", _FLOAT),
    (",AN3:", _FLOAT),
    (",AN4:", _FLOAT),
    (",AN5:", _FLOAT),
    (",RLL:", _FLOAT),
    (",PCH:", _FLOAT),
    (",YAW:", _FLOAT),
    (",IMUH:", _INT),
    (",TOW:", _INT),
)
_LINE = re.compile("".join(re.escape(label) + value for label, value in _FIELDS))


def _parse_int(text: str) -> int:
    sign = -1 if text.startswith("-") else 1
    body = text.lstrip("+-")
    if body[:2].lower() == "0x":
        return sign * int(body[2:], 16)
    if len(body) > 1 and body.startswith("0"):
        return sign * int(body[1:], 8)
    return sign * int(body, 10)


@dataclass(frozen=True)
class ImuReading:
    """One status line: raw gyroscope and accelerometer values and Euler angles."""

    version: float
    gyro: Tuple[float, float, float]
    accel: Tuple[float, float, float]
    roll: float
    pitch: float
    yaw: float
    health: int
    tow: int

    @property
    def accel_pitch(self) -> float:
        """Pitch estimated from the accelerometer alone."""
        return math.atan2(self.accel[0], self.accel[2])

    @property
    def accel_roll(self) -> float:
        """Roll estimated from the accelerometer alone."""
        return math.atan2(self.accel[1], self.accel[2])


def parse_line(s: str) -> Optional[ImuReading]:
    """Parse a status line; return ``None`` if it holds something else."""
    match = _LINE.match(s)
    if match is None:
        return None
    values = match.groups()
    floats = [float(v) for v in values[:10]]
    return ImuReading(
        version=floats[0],
        gyro=(floats[1], floats[2], floats[3]),
        accel=(floats[4], floats[5], floats[6]),
        roll=floats[7],
        pitch=floats[8],
        yaw=floats[9],
        health=_parse_int(values[10]),
        tow=_parse_int(values[11]),
    )


def _describe(reading: ImuReading) -> List[str]:
    ax, ay, az = reading.accel
    return [
        f"Euler angles: {reading.yaw:g},{reading.pitch:g},{reading.roll:g}",
        f"{ax:g} {ay:g} {az:g}pitch: {reading.accel_pitch:g} roll: {reading.accel_roll:g}",
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read status lines from the unit and print the angles in each."""
    parser = argparse.ArgumentParser(description="Print readings from a serial IMU.")
    parser.add_argument("--port", default="/dev/ttyUSB0", help="serial device")
    parser.add_argument("--rate", type=int, default=38400, help="baud rate")
    args = parser.parse_args(argv)

    try:
        port = SerialPort(args.port, args.rate)
    except ValueError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    except OSError:
        print("Unable to open serial port", file=sys.stderr)
        return 1

    with port:
        try:
            while True:
                line = port.read_bytes_until(b"\n").decode("latin-1")
                reading = parse_line(line)
                if reading is not None:
                    for text in _describe(reading):
                        print(text)
        except KeyboardInterrupt:
            return 0


if __name__ == "__main__":
    sys.exit(main())