"""Text -> typing units.

`disassemble()` scans text left to right and emits one unit per character,
or per two-character escape literal:

  - backslash + "b"  -> Control(ERASE)
  - backslash + "n"  -> Control(BREAK)
  - Hangul syllable  -> Cho, Jung and (if present) Jong
  - anything else    -> Plain

Malformed text never fails; it degrades to Plain units.
"""

from __future__ import annotations

import logging
from typing import Final, Optional

from hangul_typing.domain.errors import InvalidInput
from hangul_typing.domain.jamo_tables import (
    CHOSEONG,
    JONG_COUNT,
    JONGSEONG,
    JUNG_COUNT,
    JUNGSEONG,
    SYLLABLE_BASE,
    is_hangul_syllable,
)
from hangul_typing.domain.units import BREAK, ERASE, Cho, Control, Jong, Jung, Plain, Unit

logger = logging.getLogger(__name__)

_ESCAPE: Final[str] = "\\"
_ESCAPES: Final[dict[str, Control]] = {
    "b": ERASE,
    "n": BREAK,
}


def decompose_syllable(char: str) -> tuple[str, str, str]:
    """Split a precomposed Hangul syllable into (cho, jung, jong).

    `jong` is "" when the syllable has no final consonant.

    Raises:
        ValueError: if `char` is not a single Hangul syllable.
    """
    if not is_hangul_syllable(char):
        raise ValueError("Not a Hangul syllable: %r" % (char,))

    code = ord(char) - SYLLABLE_BASE
    jong_index = code % JONG_COUNT
    jung_index = (code // JONG_COUNT) % JUNG_COUNT
    cho_index = code // JONG_COUNT // JUNG_COUNT
    return CHOSEONG[cho_index], JUNGSEONG[jung_index], JONGSEONG[jong_index]


def disassemble(text: Optional[str]) -> list[Unit]:
    """Decompose `text` into an ordered list of typing units.

    Raises:
        InvalidInput: if `text` is None (or not a string).
    """
    if text is None:
        raise InvalidInput("text must not be None")
    if not isinstance(text, str):
        raise InvalidInput("text must be a str, got %s" % type(text).__name__)

    units: list[Unit] = []
    i = 0
    n = len(text)
    while i < n:
        char = text[i]

        if char == _ESCAPE and i + 1 < n and text[i + 1] in _ESCAPES:
            units.append(_ESCAPES[text[i + 1]])
            i += 2
            continue

        if is_hangul_syllable(char):
            cho, jung, jong = decompose_syllable(char)
            units.append(Cho(cho))
            units.append(Jung(jung))
            if jong:
                units.append(Jong(jong))
        else:
            units.append(Plain(char))
        i += 1

    logger.debug("Disassembled %d characters into %d units", n, len(units))
    return units


__all__ = [
    "decompose_syllable",
    "disassemble",
]
