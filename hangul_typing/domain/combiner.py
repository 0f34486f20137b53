from __future__ import annotations

import logging
from typing import Optional

from hangul_typing.domain.jamo_tables import (
    CHO_INDEX,
    JONG_COUNT,
    JONG_INDEX,
    JUNG_COUNT,
    JUNG_INDEX,
    SYLLABLE_BASE,
)

logger = logging.getLogger(__name__)


def combine(cho: Optional[str] = None, jung: Optional[str] = None, jong: Optional[str] = None) -> str:
    """Render a (possibly partial) syllable as display text.

    Args:
        cho: initial consonant (e.g., "ㄱ") or None
        jung: medial vowel (e.g., "ㅏ") or None
        jong: final consonant (e.g., "ㄴ") or None for no final

    Returns:
        - "" when neither `cho` nor `jung` is given
        - the bare jamo when only one of `cho`/`jung` is given (an
          in-progress syllable); `jong` is not rendered in that case
        - the composed syllable otherwise (e.g., "간")

    Never raises. If a glyph is not in its table the raw glyphs are
    concatenated instead of composing.
    """
    if not cho or not jung:
        return cho or jung or ""

    ci = CHO_INDEX.get(cho)
    vi = JUNG_INDEX.get(jung)
    ti = JONG_INDEX.get(jong) if jong else 0

    if ci is None or vi is None or ti is None:
        logger.debug("Cannot compose cho=%r jung=%r jong=%r; rendering literally", cho, jung, jong)
        return cho + jung + (jong or "")

    return chr(SYLLABLE_BASE + (ci * JUNG_COUNT + vi) * JONG_COUNT + ti)


__all__ = ["combine"]
