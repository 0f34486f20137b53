from __future__ import annotations

"""Hangul jamo tables (domain layer).

This module contains *no* I/O and no mutable state.

It centralises:
- Hangul Jamo ordering constants (compatibility jamo)
- The Unicode Hangul Syllables constants used for composition/decomposition

The ordering of each table is the canonical Unicode decomposition order, so a
table index is exactly the L/V/T index used in the syllable formula:

    SBase + (LIndex * VCount + VIndex) * TCount + TIndex
"""

from typing import Final


# -----------------------------------------------------------------------------
# Unicode Hangul syllable constants
# -----------------------------------------------------------------------------

SYLLABLE_BASE: Final[int] = 0xAC00
SYLLABLE_LAST: Final[int] = 0xD7A3

JUNG_COUNT: Final[int] = 21
JONG_COUNT: Final[int] = 28


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

# Leading consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)


# -----------------------------------------------------------------------------
# Lookup maps
# -----------------------------------------------------------------------------

CHO_INDEX: Final[dict[str, int]] = {j: i for i, j in enumerate(CHOSEONG)}
JUNG_INDEX: Final[dict[str, int]] = {j: i for i, j in enumerate(JUNGSEONG)}
# "" is not a glyph; it only marks the absent final at index 0.
JONG_INDEX: Final[dict[str, int]] = {j: i for i, j in enumerate(JONGSEONG) if j}


def is_hangul_syllable(char: str) -> bool:
    """Return True if `char` is a single precomposed Hangul syllable."""
    if len(char) != 1:
        return False
    return SYLLABLE_BASE <= ord(char) <= SYLLABLE_LAST
