import math

import numpy as np
import pytest
from PIL import Image

from aprildetect.tagdetection import TagDetection


def _square(cx, cy, half):
    return [(cx - half, cy - half), (cx + half, cy - half), (cx + half, cy + half), (cx - half, cy + half)]


def test_id_constructor():
    det = TagDetection(7)
    assert det.id == 7
    assert det.good is False
    assert np.array_equal(det.homography, np.zeros((3, 3)))


def test_interpolate_zero_homography_returns_origin():
    det = TagDetection()
    assert det.interpolate(0.3, -0.4) == (0.0, 0.0)
    assert det.xy_orientation() == 0.0


def test_interpolate_identity_adds_offset():
    det = TagDetection(homography=np.eye(3), hxy=(10.0, 20.0))
    assert det.interpolate(1.0, -1.0) == pytest.approx((11.0, 19.0))


def test_xy_orientation_of_rotated_homography():
    h = np.array([[0.0, -1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
    det = TagDetection(homography=h)
    assert det.xy_orientation() == pytest.approx(math.pi / 2)


def test_xy_orientation_identity_is_zero():
    det = TagDetection(homography=np.eye(3))
    assert det.xy_orientation() == pytest.approx(0.0)


def test_overlaps_same_place():
    a = TagDetection(p=_square(50, 50, 10), cxy=(50, 50))
    b = TagDetection(p=_square(52, 51, 10), cxy=(52, 51))
    assert a.overlaps_too_much(b)
    assert b.overlaps_too_much(a)


def test_no_overlap_far_apart():
    a = TagDetection(p=_square(50, 50, 10), cxy=(50, 50))
    b = TagDetection(p=_square(200, 50, 10), cxy=(200, 50))
    assert not a.overlaps_too_much(b)


def _rot_x(a):
    c, s = math.cos(a), math.sin(a)
    return np.array([[1, 0, 0], [0, c, -s], [0, s, c]])


def _rot_y(a):
    c, s = math.cos(a), math.sin(a)
    return np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]])


def _synthetic(rot, trans, tag_size, fx, fy, px, py):
    s = tag_size / 2
    obj = np.array([[-s, -s, 0], [s, -s, 0], [s, s, 0], [-s, s, 0]])
    cam = obj @ rot.T + trans
    pts = [(fx * x / z + px, fy * y / z + py) for x, y, z in cam]
    return TagDetection(p=pts)


def test_relative_transform_recovers_pose():
    rot = _rot_y(0.3) @ _rot_x(0.2)
    trans = np.array([0.1, -0.05, 1.5])
    det = _synthetic(rot, trans, 0.2, 600.0, 600.0, 320.0, 240.0)
    transform = det.relative_transform(0.2, 600.0, 600.0, 320.0, 240.0)
    assert np.allclose(transform[:3, 3], trans, atol=1e-5)
    assert np.allclose(transform[:3, :3], rot, atol=1e-5)
    assert np.allclose(transform[3], [0, 0, 0, 1])


def test_relative_transform_rotation_is_orthonormal():
    rot = _rot_x(-0.4)
    trans = np.array([-0.2, 0.1, 2.0])
    det = _synthetic(rot, trans, 0.166, 500.0, 520.0, 300.0, 200.0)
    transform = det.relative_transform(0.166, 500.0, 520.0, 300.0, 200.0)
    r = transform[:3, :3]
    assert np.allclose(r @ r.T, np.eye(3), atol=1e-9)
    assert np.linalg.det(r) == pytest.approx(1.0)
    assert np.allclose(transform[:3, 3], trans, atol=1e-5)


def test_translation_rotation_matches_transform():
    rot = _rot_y(-0.2)
    trans = np.array([0.0, 0.0, 1.0])
    det = _synthetic(rot, trans, 0.166, 600.0, 600.0, 320.0, 240.0)
    t, r = det.relative_translation_rotation(0.166, 600.0, 600.0, 320.0, 240.0)
    transform = det.relative_transform(0.166, 600.0, 600.0, 320.0, 240.0)
    assert np.allclose(t, transform[:3, 3])
    assert np.allclose(r, transform[:3, :3])
    assert np.linalg.norm(t) == pytest.approx(1.0, abs=1e-5)


def test_relative_transform_degenerate_corners_raise():
    det = TagDetection(p=[(5.0, 5.0)] * 4)
    with pytest.raises(ValueError):
        det.relative_transform(0.166, 600.0, 600.0, 320.0, 240.0)


def test_draw_outline_colours():
    image = Image.new("RGB", (100, 100))
    det = TagDetection(id=3, p=[(10, 10), (80, 10), (80, 80), (10, 80)], cxy=(45, 45))
    det.draw(image)
    assert image.getpixel((40, 10)) == (0, 0, 255)
    assert image.getpixel((80, 40)) == (0, 255, 0)
    assert image.getpixel((40, 80)) == (255, 0, 0)
    assert image.getpixel((10, 40)) == (255, 0, 255)
    assert image.getpixel((53, 45)) == (255, 0, 0)


def test_draw_on_grayscale_image_marks_pixels():
    image = Image.new("L", (60, 60))
    det = TagDetection(p=[(5, 5), (50, 5), (50, 50), (5, 50)], cxy=(27, 27))
    det.draw(image)
    assert image.getpixel((20, 5)) > 0
    assert image.getpixel((2, 2)) == 0