import pytest

from aprildetect.floatimage import FloatImage
from aprildetect.gaussian import make_gaussian_filter


def _ramp(width, height):
    return FloatImage(width, height, [float(i) for i in range(width * height)])


def test_new_image_is_zero_filled():
    img = FloatImage(3, 2)
    assert (img.width, img.height, len(img)) == (3, 2, 6)
    assert img.min_max() == (0.0, 0.0)


def test_pixels_are_row_major():
    img = _ramp(4, 3)
    assert img.get(1, 2) == 9.0
    assert img.get(3, 0) == 3.0


def test_set_get_round_trip():
    img = FloatImage(2, 2)
    img.set(1, 0, 0.25)
    assert img.get(1, 0) == 0.25
    assert img.get(0, 1) == 0.0


def test_wrong_pixel_count_rejected():
    with pytest.raises(ValueError):
        FloatImage(2, 2, [1.0, 2.0, 3.0])


def test_negative_dimension_rejected():
    with pytest.raises(ValueError):
        FloatImage(-1, 2)


def test_copy_is_independent():
    img = _ramp(3, 3)
    clone = img.copy()
    clone.set(0, 0, 100.0)
    assert img.get(0, 0) == 0.0
    assert clone.get(2, 2) == img.get(2, 2)


def test_normalize_maps_to_unit_interval():
    img = FloatImage(2, 2, [2.0, 4.0, 6.0, 10.0])
    img.normalize()
    assert img.min_max() == pytest.approx((0.0, 1.0))
    assert img.get(1, 0) < img.get(0, 1) < img.get(1, 1)


def test_normalize_constant_image_raises():
    img = FloatImage(2, 2, [3.0] * 4)
    with pytest.raises(ValueError):
        img.normalize()


def test_decimate_keeps_even_pixels():
    img = _ramp(5, 4)
    original = img.copy()
    img.decimate_avg()
    assert (img.width, img.height) == (2, 2)
    for y in range(2):
        for x in range(2):
            assert img.get(x, y) == original.get(2 * x, 2 * y)


def test_impulse_filter_leaves_image_unchanged():
    img = _ramp(6, 5)
    before = img.copy()
    img.filter_factored_centered([0.0, 1.0, 0.0], [0.0, 1.0, 0.0])
    assert img.data.tolist() == pytest.approx(before.data.tolist())


def test_blurring_constant_image_keeps_it_constant():
    img = FloatImage(7, 6, [0.5] * 42)
    f = make_gaussian_filter(0.8, 3)
    img.filter_factored_centered(f, f)
    lo, hi = img.min_max()
    assert lo == pytest.approx(0.5)
    assert hi == pytest.approx(0.5)


def test_blur_stays_within_original_range():
    img = _ramp(8, 8)
    lo, hi = img.min_max()
    f = make_gaussian_filter(1.5, 5)
    img.filter_factored_centered(f, f)
    new_lo, new_hi = img.min_max()
    assert lo - 1e-9 <= new_lo <= new_hi <= hi + 1e-9


def test_min_max_of_empty_image_raises():
    with pytest.raises(ValueError):
        FloatImage().min_max()