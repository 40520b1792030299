import pytest

from aprildetect.homography import Homography33

SQUARE = [(-1.0, -1.0), (1.0, -1.0), (1.0, 1.0), (-1.0, 1.0)]
QUAD = [(10.0, 10.0), (50.0, 12.0), (48.0, 40.0), (8.0, 44.0)]


def test_corners_map_onto_image_points():
    hom = Homography33((30.0, 25.0))
    hom.set_correspondences(SQUARE, QUAD)
    for (wx, wy), (ix, iy) in zip(SQUARE, QUAD):
        px, py = hom.project(wx, wy)
        assert px == pytest.approx(ix, abs=1e-6)
        assert py == pytest.approx(iy, abs=1e-6)


def test_matrix_is_normalised():
    hom = Homography33((30.0, 25.0))
    hom.set_correspondences(SQUARE, QUAD)
    assert hom.h[2, 2] == pytest.approx(1.0)


def test_affine_mapping_projects_centre():
    dst = [(2 * x + 5, 2 * y + 7) for x, y in SQUARE]
    hom = Homography33((0.0, 0.0))
    hom.set_correspondences(SQUARE, dst)
    px, py = hom.project(0.0, 0.0)
    assert px == pytest.approx(5.0)
    assert py == pytest.approx(7.0)


def test_optical_center_does_not_change_projection():
    a = Homography33((0.0, 0.0))
    b = Homography33((100.0, -40.0))
    a.set_correspondences(SQUARE, QUAD)
    b.set_correspondences(SQUARE, QUAD)
    pa = a.project(0.3, -0.2)
    pb = b.project(0.3, -0.2)
    assert pa == pytest.approx(pb)


def test_new_correspondences_invalidate_solution():
    hom = Homography33((0.0, 0.0))
    hom.set_correspondences(SQUARE, QUAD)
    hom.compute()
    moved = [(x + 100, y) for x, y in QUAD]
    hom.set_correspondences(SQUARE, moved)
    px, py = hom.project(-1.0, -1.0)
    assert px == pytest.approx(moved[0][0], abs=1e-6)
    assert py == pytest.approx(moved[0][1], abs=1e-6)


def test_compute_without_correspondences_fails():
    hom = Homography33((0.0, 0.0))
    with pytest.raises(ValueError):
        hom.compute()


def test_too_few_correspondences_fail():
    hom = Homography33((0.0, 0.0))
    hom.set_correspondences(SQUARE[:3], QUAD[:3])
    with pytest.raises(ValueError):
        hom.project(0.0, 0.0)


def test_coincident_points_fail():
    hom = Homography33((0.0, 0.0))
    hom.set_correspondences(SQUARE, [(3.0, 3.0)] * 4)
    with pytest.raises(ValueError):
        hom.compute()