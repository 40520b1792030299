import math

import numpy as np
import pytest
from PIL import Image

from aprildetect.tagcodes import TAG_CODES_16H5, TAG_CODES_25H9
from aprildetect.tagdetector import TagDetector

CELL = 10
MARGIN = 20


def render_tag(codes, code_id, cell=CELL, margin=MARGIN):
    """Black-bordered tag on white, top-left bit first, 1 bits white."""
    dim = math.isqrt(codes.bits)
    side = (dim + 2) * cell
    total = side + 2 * margin
    img = np.full((total, total), 255, dtype=np.uint8)
    img[margin : margin + side, margin : margin + side] = 0
    code = codes.codes[code_id]
    for k in range(codes.bits):
        if (code >> (codes.bits - 1 - k)) & 1:
            r, c = divmod(k, dim)
            y0 = margin + (r + 1) * cell
            x0 = margin + (c + 1) * cell
            img[y0 : y0 + cell, x0 : x0 + cell] = 255
    return img


def best_match(detections, code_id):
    matches = [d for d in detections if d.id == code_id]
    assert len(matches) >= 1
    return max(matches, key=lambda d: d.observed_perimeter)


@pytest.mark.parametrize(
    "codes, code_id",
    [(TAG_CODES_16H5, 0), (TAG_CODES_16H5, 7), (TAG_CODES_25H9, 3)],
)
def test_detects_rendered_tag(codes, code_id):
    detections = TagDetector(codes).extract_tags(render_tag(codes, code_id))
    det = best_match(detections, code_id)
    assert det.hamming_distance == 0
    assert det.good
    assert det.code == codes.codes[code_id]
    assert all(d.good for d in detections)


def test_center_lies_in_middle_of_tag():
    img = render_tag(TAG_CODES_16H5, 0)
    det = best_match(TagDetector(TAG_CODES_16H5).extract_tags(img), 0)
    middle = img.shape[0] / 2 - 0.5
    assert det.cxy[0] == pytest.approx(middle, abs=1.5)
    assert det.cxy[1] == pytest.approx(middle, abs=1.5)


def test_corners_lie_on_black_square():
    img = render_tag(TAG_CODES_16H5, 0)
    det = best_match(TagDetector(TAG_CODES_16H5).extract_tags(img), 0)
    lo = MARGIN - 0.5
    hi = img.shape[0] - MARGIN - 0.5
    expected = [(lo, lo), (hi, lo), (hi, hi), (lo, hi)]
    matched = set()
    for px, py in det.p:
        hits = [
            i
            for i, (ex, ey) in enumerate(expected)
            if abs(px - ex) <= 1.5 and abs(py - ey) <= 1.5
        ]
        assert len(hits) == 1
        matched.add(hits[0])
    assert matched == {0, 1, 2, 3}


def test_first_corner_follows_tag_when_rotated():
    img = render_tag(TAG_CODES_16H5, 5)
    detector = TagDetector(TAG_CODES_16H5)
    original = best_match(detector.extract_tags(img), 5)
    rotated = best_match(detector.extract_tags(np.rot90(img)), 5)
    width = img.shape[1]
    x, y = original.p[0]
    # np.rot90 maps (x, y) to (y, width - 1 - x)
    assert rotated.p[0][0] == pytest.approx(y, abs=1.5)
    assert rotated.p[0][1] == pytest.approx(width - 1 - x, abs=1.5)


def test_pil_image_gives_same_result_as_array():
    img = render_tag(TAG_CODES_16H5, 2)
    detector = TagDetector(TAG_CODES_16H5)
    from_array = detector.extract_tags(img)
    from_pil = detector.extract_tags(Image.fromarray(img).convert("RGB"))
    assert sorted(d.id for d in from_array) == sorted(d.id for d in from_pil)
    a = best_match(from_array, 2)
    b = best_match(from_pil, 2)
    assert a.cxy == pytest.approx(b.cxy)


def test_two_tags_side_by_side():
    left = render_tag(TAG_CODES_16H5, 0)
    right = render_tag(TAG_CODES_16H5, 1)
    detections = TagDetector(TAG_CODES_16H5).extract_tags(np.hstack([left, right]))
    ids = {d.id for d in detections}
    assert {0, 1} <= ids
    assert best_match(detections, 1).cxy[0] > best_match(detections, 0).cxy[0]


def test_kept_detections_do_not_overlap_with_same_id():
    img = render_tag(TAG_CODES_25H9, 10)
    detections = TagDetector(TAG_CODES_25H9).extract_tags(img)
    assert any(d.id == 10 for d in detections)
    for i, a in enumerate(detections):
        for b in detections[i + 1 :]:
            assert not (a.id == b.id and a.overlaps_too_much(b))


def test_blank_image_has_no_tags():
    img = np.full((60, 80), 128, dtype=np.uint8)
    assert TagDetector(TAG_CODES_16H5).extract_tags(img) == []


def test_tiny_image_has_no_tags():
    assert TagDetector(TAG_CODES_16H5).extract_tags(np.zeros((2, 2))) == []


def test_colour_array_rejected():
    with pytest.raises(ValueError):
        TagDetector(TAG_CODES_16H5).extract_tags(np.zeros((10, 10, 3)))


def test_detector_uses_given_family():
    detector = TagDetector(TAG_CODES_25H9)
    assert detector.tag_family.bits == TAG_CODES_25H9.bits
    assert detector.tag_family.codes == list(TAG_CODES_25H9.codes)