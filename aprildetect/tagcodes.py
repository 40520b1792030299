"""Code tables for the 16h5 and 25h9 tag families."""

from __future__ import annotations

from .tagfamily import TagCodes

TAG_CODES_16H5 = TagCodes(
    16,
    5,
    (
        0x231B, 0x2EA5, 0x346A, 0x45B9, 0x79A6, 0x7F6B, 0xB358, 0xE745,
        0xFE59, 0x156D, 0x380B, 0xF0AB, 0x0D84, 0x4736, 0x8C72, 0xAF10,
        0x093C, 0x93B4, 0xA503, 0x468F, 0xE137, 0x5795, 0xDF42, 0x1C1D,
        0xE9DC, 0x73AD, 0xAD5F, 0xD530, 0x07CA, 0xAF2E,
    ),
)
"""16 bits, minimum Hamming distance 5, 30 codes."""

TAG_CODES_16H5_OTHER = TagCodes(
    16,
    5,
    (
        0x231B, 0x2EA5, 0x346A, 0x45B9, 0x6857, 0x7F6B, 0xAD93, 0xB358,
        0xB91D, 0xE745, 0x156D, 0xD3D2, 0xDF5C, 0x4736, 0x8C72, 0x5A02,
        0xD32B, 0x1867, 0x468F, 0xDC91, 0x4940, 0xA9ED, 0x2BD5, 0x599A,
        0x9009, 0x61F6, 0x3850, 0x8157, 0xBFCA, 0x987C,
    ),
)
"""Alternative 16h5 code set, 30 codes."""

TAG_CODES_25H9 = TagCodes(
    25,
    9,
    (
        0x155CBF1, 0x1E4D1B6, 0x17B0B68, 0x1EAC9CD, 0x12E14CE, 0x3548BB,
        0x7757E6, 0x1065DAB, 0x1BAA2E7, 0xDEA688, 0x81D927, 0x51B241,
        0xDBC8AE, 0x1E50E19, 0x15819D2, 0x16D8282, 0x163E035, 0x9D9B81,
        0x173EEC4, 0xAE3A09, 0x5F7C51, 0x1A137FC, 0xDC9562, 0x1802E45,
        0x1C3542C, 0x870FA4, 0x914709, 0x16684F0, 0xC8F2A5, 0x833EBB,
        0x59717F, 0x13CD050, 0xFA0AD1, 0x1B763B0, 0xB991CE,
    ),
)
"""25 bits, minimum Hamming distance 9, 35 codes."""