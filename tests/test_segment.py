import pytest

from aprildetect.segment import Segment


def test_new_segment_is_empty():
    seg = Segment()
    assert (seg.x0, seg.y0, seg.x1, seg.y1, seg.theta, seg.length) == (0.0,) * 6
    assert seg.children == []
    assert seg.segment_length() == 0.0


def test_ids_are_unique_and_increasing():
    a, b, c = Segment(), Segment(), Segment()
    assert a.segment_id < b.segment_id < c.segment_id


def test_children_lists_are_independent():
    a, b = Segment(), Segment()
    a.children.append(b)
    assert b.children == []
    assert a.children == [b]


def test_segment_length():
    seg = Segment()
    seg.x0, seg.y0, seg.x1, seg.y1 = 1.0, 1.0, 4.0, 5.0
    assert seg.segment_length() == pytest.approx(5.0)


def test_str_shows_endpoints():
    seg = Segment()
    seg.x0, seg.y0, seg.x1, seg.y1 = 1.5, 2.0, 3.0, 4.25
    assert str(seg) == "(1.5,2), (3,4.25)"