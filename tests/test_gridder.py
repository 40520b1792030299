import pytest

from aprildetect.gridder import Gridder


def test_dimensions_cover_extent():
    grid = Gridder(0, 0, 100, 50, 10)
    assert grid.width == 11
    assert grid.height == 6
    assert grid.x1 >= 100
    assert grid.y1 >= 50


def test_find_nearby_object():
    grid = Gridder(0, 0, 100, 100, 10)
    grid.add(25, 35, "a")
    assert list(grid.find(25, 35, 1)) == ["a"]


def test_far_object_not_found():
    grid = Gridder(0, 0, 100, 100, 10)
    grid.add(5, 5, "near")
    grid.add(95, 95, "far")
    assert list(grid.find(5, 5, 2)) == ["near"]


def test_outside_objects_are_ignored():
    grid = Gridder(0, 0, 100, 100, 10)
    grid.add(-20, 5, "left")
    grid.add(5, 500, "below")
    assert list(grid.find(50, 50, 1000)) == []


def test_same_cell_returns_most_recent_first():
    grid = Gridder(0, 0, 100, 100, 10)
    for name in ("first", "second", "third"):
        grid.add(12, 12, name)
    assert list(grid.find(12, 12, 0)) == ["third", "second", "first"]


def test_cells_visited_row_major():
    grid = Gridder(0, 0, 30, 30, 10)
    grid.add(25, 5, "top-right")
    grid.add(5, 15, "middle-left")
    grid.add(5, 5, "top-left")
    found = list(grid.find(15, 15, 100))
    assert found == ["top-left", "top-right", "middle-left"]


def test_range_is_clamped_to_grid():
    grid = Gridder(0, 0, 20, 20, 10)
    grid.add(0, 0, "corner")
    assert list(grid.find(-500, -500, 1)) == ["corner"]


def test_non_positive_cell_size_rejected():
    with pytest.raises(ValueError):
        Gridder(0, 0, 10, 10, 0)


def test_inverted_extent_rejected():
    with pytest.raises(ValueError):
        Gridder(0, 0, -100, 10, 10)