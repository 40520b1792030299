"""Command-line demo: detect tags in images and report their pose."""

from __future__ import annotations

import contextlib
import getopt
import math
import re
import sys
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image

from .serialport import SerialPort
from .tagcodes import TAG_CODES_16H5, TAG_CODES_16H5_OTHER, TAG_CODES_25H9
from .tagcodes36 import TAG_CODES_36H11_OTHER
from .tagdetection import TagDetection
from .tagdetector import TagDetector
from .tagfamily import TagCodes

DEFAULT_TAG_FAMILY = "36h11_other"
ARDUINO_PORT = "/dev/ttyACM0"

_TAG_FAMILIES = {
    "16h5": TAG_CODES_16H5,
    "16h5_other": TAG_CODES_16H5_OTHER,
    "25h9": TAG_CODES_25H9,
    "36h11_other": TAG_CODES_36H11_OTHER,
}

INTRO = "\nApril tags test code\n\n"

USAGE = (
    "\n"
    "Usage:\n"
    "  apriltags_demo [OPTION...] [IMG1 [IMG2...]]\n"
    "\n"
    "Options:\n"
    "  -h  -?          Show help options\n"
    "  -a              Arduino (send tag ids over serial port)\n"
    "  -d              Disable graphics\n"
    "  -t              Timing of tag extraction\n"
    f"  -C <bbxhh>      Tag family (default {DEFAULT_TAG_FAMILY})\n"
    "  -D <id>         Video device ID (if multiple cameras present)\n"
    "  -F <fx>         Focal length in pixels\n"
    "  -W <width>      Image width (default 640, availability depends on camera)\n"
    "  -H <height>     Image height (default 480, availability depends on camera)\n"
    "  -S <size>       Tag size (square black frame) in meters\n"
    "  -E <exposure>   Manually set camera exposure (default auto; range 0-10000)\n"
    "  -G <gain>       Manually set camera gain (default auto; range 0-255)\n"
    "  -B <brightness> Manually set the camera brightness (default 128; range 0-255)\n"
    "\n"
)

_SHORT_OPTIONS = "h?adtC:F:H:S:W:E:G:B:D:"
_ARG_OPTIONS = "CFHSWEGBD"
_EXPOSURE_NAMES = {"E": "Exposure", "G": "Gain", "B": "Brightness"}

_INT_PREFIX = re.compile(r"\s*([-+]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)")


class _UsageError(ValueError):
    """The command line could not be parsed."""


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def standard_rad(t: float) -> float:
    """Normalise an angle into the interval [-pi, pi]."""
    if t >= 0.0:
        return math.fmod(t + math.pi, 2 * math.pi) - math.pi
    return math.fmod(t - math.pi, -2 * math.pi) + math.pi


def wro_to_euler(wro) -> Tuple[float, float, float]:
    """Convert a rotation matrix to ``(yaw, pitch, roll)``."""
    r = np.asarray(wro, dtype=float)
    yaw = standard_rad(math.atan2(r[1, 0], r[0, 0]))
    c = math.cos(yaw)
    s = math.sin(yaw)
    pitch = standard_rad(math.atan2(-r[2, 0], r[0, 0] * c + r[1, 0] * s))
    roll = standard_rad(
        math.atan2(r[0, 2] * s - r[1, 2] * c, -r[0, 1] * s + r[1, 1] * c)
    )
    return yaw, pitch, roll


def select_tag_codes(name: str) -> TagCodes:
    """Return the code table of the named tag family."""
    try:
        return _TAG_FAMILIES[name]
    except KeyError:
        raise ValueError("Invalid tag family specified") from None


@dataclass
class DemoOptions:
    """Settings of the demo, most of which the command line can change."""

    tag_family: str = DEFAULT_TAG_FAMILY
    draw: bool = True
    arduino: bool = False
    timing: bool = False
    width: int = 640
    height: int = 480
    tag_size: float = 0.166
    fx: float = 600.0
    fy: float = 600.0
    px: float = 320
    py: float = 240
    device_id: int = 0
    exposure: int = -1
    gain: int = -1
    brightness: int = -1
    image_names: List[str] = field(default_factory=list)
    show_help: bool = False

    @property
    def tag_codes(self) -> TagCodes:
        return select_tag_codes(self.tag_family)

    @property
    def is_video(self) -> bool:
        return not self.image_names


def parse_options(argv: Sequence[str]) -> DemoOptions:
    """Parse command-line arguments (without the program name)."""
    options = DemoOptions()
    try:
        opts, args = getopt.gnu_getopt(list(argv), _SHORT_OPTIONS)
    except getopt.GetoptError as err:
        if err.opt and err.opt in _ARG_OPTIONS:
            raise _UsageError(f"option -{err.opt} requires an argument") from err
        options.show_help = True
        return options

    for opt, value in opts:
        flag = opt[1:]
        if flag in ("h", "?"):
            options.show_help = True
            return options
        if flag == "a":
            options.arduino = True
        elif flag == "d":
            options.draw = False
        elif flag == "t":
            options.timing = True
        elif flag == "C":
            select_tag_codes(value)
            options.tag_family = value
        elif flag == "F":
            options.fx = _atof(value)
            options.fy = options.fx
        elif flag == "H":
            options.height = _atoi(value)
            options.py = int(options.height / 2)
        elif flag == "S":
            options.tag_size = _atof(value)
        elif flag == "W":
            options.width = _atoi(value)
            options.px = int(options.width / 2)
        elif flag in _EXPOSURE_NAMES:
            if sys.platform == "darwin":
                raise ValueError(
                    f"Error: {_EXPOSURE_NAMES[flag]} option (-{flag}) not available"
                )
            setattr(options, _EXPOSURE_NAMES[flag].lower(), _atoi(value))
        elif flag == "D":
            options.device_id = _atoi(value)

    options.image_names = list(args)
    return options


def format_detection(detection: TagDetection, options: DemoOptions) -> str:
    """One line describing a detection's id and pose relative to the camera."""
    translation, rotation = detection.relative_translation_rotation(
        options.tag_size, options.fx, options.fy, options.px, options.py
    )
    fixed_rot = np.diag([1.0, -1.0, 1.0]) @ rotation
    yaw, pitch, roll = wro_to_euler(fixed_rot)
    x, y, z = (float(v) for v in translation)
    distance = float(np.linalg.norm(translation))
    return (
        f"  Id: {detection.id} (Hamming: {detection.hamming_distance})"
        f"  distance={distance:g}m, x={x:g}, y={y:g}, z={z:g}"
        f", yaw={yaw:g}, pitch={pitch:g}, roll={roll:g}"
    )


def _serial_message(detections: Sequence[TagDetection], options: DemoOptions) -> str:
    """Text sent over the serial link: the first tag's id and translation."""
    if not detections:
        return "-1,0.0,0.0,0.0\n"
    first = detections[0]
    translation, _ = first.relative_translation_rotation(
        options.tag_size, options.fx, options.fy, options.px, options.py
    )
    x, y, z = (float(v) for v in translation)
    return f"{first.id},{x:g},{y:g},{z:g}\n"


def _process_image(
    image: Image.Image,
    detector: TagDetector,
    options: DemoOptions,
    port: Optional[SerialPort],
) -> List[TagDetection]:
    gray = image.convert("L")
    start = time.perf_counter()
    detections = detector.extract_tags(gray)
    if options.timing:
        print(f"Extracting tags took {time.perf_counter() - start:g} seconds.")

    print(f"{len(detections)} tags detected:")
    for detection in detections:
        print(format_detection(detection, options))

    if options.draw:
        for detection in detections:
            detection.draw(image)

    if port is not None:
        port.write(_serial_message(detections, options))
    return detections


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demo on the image files named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_options(args)
    except _UsageError:
        print(INTRO + USAGE, end="")
        return 1
    except ValueError as err:
        print(err)
        return 1

    if options.show_help:
        print(INTRO + USAGE, end="")
        return 0

    detector = TagDetector(options.tag_codes)

    with contextlib.ExitStack() as stack:
        port: Optional[SerialPort] = None
        if options.arduino:
            try:
                port = stack.enter_context(SerialPort(ARDUINO_PORT))
            except OSError:
                print("Unable to open serial port")
                return 1

        if options.is_video:
            print("Processing video")
            print(f"ERROR: Can't find video device {options.device_id}", file=sys.stderr)
            return 1

        print("Processing image")
        for name in options.image_names:
            try:
                with Image.open(name) as loaded:
                    image = loaded.convert("RGB")
            except OSError as err:
                print(f"ERROR: cannot read image {name}: {err}", file=sys.stderr)
                return 1
            _process_image(image, detector, options, port)
    return 0


if __name__ == "__main__":
    sys.exit(main())