import pytest

from aprildetect.tagcodes import TAG_CODES_16H5, TAG_CODES_16H5_OTHER, TAG_CODES_25H9
from aprildetect.tagfamily import TagFamily, rotate90

ALL = [TAG_CODES_16H5, TAG_CODES_16H5_OTHER, TAG_CODES_25H9]


@pytest.mark.parametrize(
    "codes, count, dimension",
    [(TAG_CODES_16H5, 30, 4), (TAG_CODES_16H5_OTHER, 30, 4), (TAG_CODES_25H9, 35, 5)],
)
def test_counts_and_dimensions(codes, count, dimension):
    family = TagFamily(codes)
    assert len(family.codes) == count
    assert family.dimension == dimension


def test_first_and_last_codes_pinned():
    assert TagFamily(TAG_CODES_16H5).decode(0x231B).id == 0
    last = TagFamily(TAG_CODES_25H9).decode(0xB991CE)
    assert last.id == 34
    assert last.hamming_distance == 0


@pytest.mark.parametrize("codes", ALL)
def test_four_rotations_restore_each_code(codes):
    family = TagFamily(codes)
    for code in family.codes:
        w = code
        for _ in range(4):
            w = rotate90(w, family.dimension)
        assert w == code


@pytest.mark.parametrize("codes", ALL)
def test_minimum_distance_holds(codes):
    hist = TagFamily(codes).hamming_histogram()
    n = len(codes.codes)
    assert sum(hist) == n * (n - 1) // 2
    assert all(v == 0 for v in hist[: codes.min_hamming_distance])


@pytest.mark.parametrize("codes", ALL)
def test_every_code_decodes_to_itself(codes):
    fam = TagFamily(codes)
    for i, code in enumerate(codes.codes):
        d = fam.decode(code)
        assert d.id == i and d.hamming_distance == 0 and d.good
        rd = fam.decode(rotate90(code, fam.dimension))
        assert rd.id == i and rd.hamming_distance == 0