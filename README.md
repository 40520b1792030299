# aprildetect

`aprildetect` finds square black-and-white fiducial tags in grayscale
images. It decodes each tag's id against a tag family and recovers the
tag's position and orientation relative to the camera.

The detector works in these steps:

1. It smooths the image and computes the local gradients.
2. It groups pixels whose gradient directions are similar.
3. It fits line segments to those groups.
4. It chains the segments into closed four-sided loops, the quads.
5. It samples the bit grid inside each quad and matches the observed
   code against the family's codes in all four rotations.
6. Where detections with the same id overlap, it keeps the one with the
   lower Hamming distance, or else the one with the longer observed
   perimeter.

## Installation

```
pip install aprildetect
```

To also install the test dependencies:

```
pip install "aprildetect[test]"
```

## Using the library

```python
import numpy as np
from PIL import Image

from aprildetect.demo import select_tag_codes
from aprildetect.tagdetector import TagDetector

gray = np.asarray(Image.open("scene.png").convert("L"))

detector = TagDetector(select_tag_codes("16h5"))
for detection in detector.extract_tags(gray):
    translation, rotation = detection.relative_translation_rotation(
        0.166, 600.0, 600.0, gray.shape[1] / 2, gray.shape[0] / 2
    )
    print(detection.id, detection.xy_orientation(), translation)
```

`TagDetector.extract_tags` accepts a 2-D array of values from 0 to 255 or
a PIL image, which it converts to grayscale. It returns a list of
`TagDetection` objects. Each holds the tag `id`, its `hamming_distance`,
its four corners `p`, its centre `cxy` and its `homography`.

The arguments to `relative_translation_rotation` are, in order:

- the side length of the tag's black square, in metres
- the focal lengths `fx` and `fy`, in pixels
- the principal point `px` and `py`

It returns a translation vector and a 3x3 rotation matrix in the camera
frame: z forward, x right, y down. `relative_transform` returns the same
pose as a 4x4 matrix. `TagDetection.draw` draws a detection's outline,
centre and id onto a PIL image in place.

### Tag families

The code tables live in `aprildetect.tagcodes` (`TAG_CODES_16H5`,
`TAG_CODES_16H5_OTHER`, `TAG_CODES_25H9`) and `aprildetect.tagcodes36`
(`TAG_CODES_36H11_OTHER`). `aprildetect.demo.select_tag_codes` looks them
up by the names `16h5`, `16h5_other`, `25h9` and `36h11_other`, and raises
`ValueError` for any other name.

### Lower-level pieces

You can also use the building blocks on their own:

- `aprildetect.tagfamily`: `TagFamily`, `rotate90`, `hamming_distance` and
  `pop_count` for decoding codes. `TagFamily.hamming_histogram` counts
  code pairs by their rotation-aware Hamming distance.
- `aprildetect.glines`: `GLine2D` and `GLineSegment2D` for weighted
  least-squares line fits and line intersections.
- `aprildetect.homography`: `Homography33` for a four-point homography.
- `aprildetect.quad`: `Quad` and `search_quads`.
- `aprildetect.gridder`: `Gridder`, a grid for looking up objects near a
  point.
- `aprildetect.graymodel`: `GrayModel`, a bilinear fit of gray values.
- `aprildetect.edge`: `edge_cost`, `calc_edges` and `merge_edges` for
  gradient clustering.
- `aprildetect.unionfind`: `UnionFind`, a disjoint-set structure.
- `aprildetect.gaussian`: `make_gaussian_filter` and
  `convolve_symmetric_centered`.
- `aprildetect.floatimage`: `FloatImage`, a floating-point image with
  separable filtering.
- `aprildetect.mathutil`: `mod2pi`, `distance_2d` and related helpers.
- `aprildetect.serialport`: `SerialPort`, a small serial-line wrapper
  that works as a context manager. It accepts the baud rates 9600, 19200,
  38400 and 115200.

## Command-line tools

### `aprildetect-demo`

`aprildetect-demo` detects tags in the image files it is given. For each
image it prints the number of tags found. For each tag it then shows the
id, the Hamming distance, the distance to the tag, the x, y and z
offsets, and yaw, pitch and roll.

```
aprildetect-demo -C 25h9 -S 0.166 -F 600 photo1.png photo2.png
```

| Option | Meaning |
| --- | --- |
| `-h`, `-?` | show help |
| `-a` | send the first detection's id and translation over the serial port `/dev/ttyACM0`, or `-1,0.0,0.0,0.0` when nothing is found |
| `-d` | do not draw detections onto the in-memory image |
| `-t` | print how long tag extraction took |
| `-C <family>` | tag family: `16h5`, `16h5_other`, `25h9` or `36h11_other` (default `36h11_other`) |
| `-F <fx>` | focal length in pixels, used for both `fx` and `fy` (default 600) |
| `-W <width>` | image width; the principal point x is half of it (default 640) |
| `-H <height>` | image height; the principal point y is half of it (default 480) |
| `-S <size>` | tag size (side of the black square) in metres (default 0.166) |
| `-D <id>` | video device id |
| `-E <exposure>` | camera exposure |
| `-G <gain>` | camera gain |
| `-B <brightness>` | camera brightness |

`-E`, `-G` and `-B` are rejected on macOS.

### `aprildetect-imu`

`aprildetect-imu` reads lines from an inertial measurement unit attached
to a serial port, until it is interrupted. It parses every well-formed
status line and prints:

- the Euler angles reported by the unit
- the pitch and roll computed from the raw accelerometer values

```
aprildetect-imu --port /dev/ttyUSB0 --rate 38400
```

Both options are shown with their defaults. `aprildetect.imu.parse_line`
parses a single line into an `ImuReading`, or returns `None` for a line
it does not recognise.

## What the package does not do

- It does not capture from cameras. Run without image files,
  `aprildetect-demo` reports that it cannot find the video device and
  exits with status 1. `-D`, `-E`, `-G` and `-B` are accepted but have no
  effect.
- It does not open a window. Detections drawn by the demo are not
  displayed or saved.