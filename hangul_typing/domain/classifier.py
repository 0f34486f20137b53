"""Jamo classification.

A character may belong to more than one category: the 14 simple consonants
(and the doubled ㄲ/ㅆ) are valid both as initial and as final consonants.
`classify()` therefore reports *every* category a character belongs to and
leaves precedence to the caller (see `assembler.py`).
"""

from __future__ import annotations

from enum import Enum

from hangul_typing.domain.jamo_tables import CHO_INDEX, JONG_INDEX, JUNG_INDEX


class JamoCategory(Enum):
    CHO = "cho"
    JUNG = "jung"
    JONG = "jong"
    OTHER = "other"


_OTHER_ONLY = frozenset({JamoCategory.OTHER})


def is_cho(char: str) -> bool:
    return char in CHO_INDEX


def is_jung(char: str) -> bool:
    return char in JUNG_INDEX


def is_jong(char: str) -> bool:
    return char in JONG_INDEX


def classify(char: str) -> frozenset[JamoCategory]:
    """Return all categories `char` belongs to.

    Returns `{JamoCategory.OTHER}` for anything that is not a table glyph
    (including the empty string and multi-character strings).
    """
    found = set()
    if is_cho(char):
        found.add(JamoCategory.CHO)
    if is_jung(char):
        found.add(JamoCategory.JUNG)
    if is_jong(char):
        found.add(JamoCategory.JONG)
    if not found:
        return _OTHER_ONLY
    return frozenset(found)


__all__ = [
    "JamoCategory",
    "classify",
    "is_cho",
    "is_jong",
    "is_jung",
]
