from __future__ import annotations

"""Typing units -> display text (domain layer).

This is the stateful half of the transducer. It folds a unit stream into text
one unit at a time, keeping a pending (cho, jung, jong) syllable that is
flushed through `combine()` when the next unit cannot extend it.

A consonant that follows a complete cho+jung pair is ambiguous: it may be
the final consonant of the pending syllable or the initial consonant of the
next one. `step()` resolves it with one unit of lookahead (`next_unit`):
it starts a new syllable only when a vowel follows immediately.

Two ways to run it, always producing the same text for the same prefix:
  - `assemble(units)`: fresh reduction over the whole list
  - `Assembler.feed(unit)`: incremental, for callers that reveal units one
    at a time and redraw after each
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional

from hangul_typing.domain.classifier import JamoCategory, classify
from hangul_typing.domain.combiner import combine
from hangul_typing.domain.units import Control, ControlKind, Plain, Unit

logger = logging.getLogger(__name__)


class _Role(Enum):
    ERASE = "erase"
    CHO = "cho"
    JUNG = "jung"
    JONG = "jong"
    OTHER = "other"


def _role_of(unit: Unit) -> _Role:
    """Resolve the role a unit plays in composition.

    Jamo units are classified by their glyph, with CHO taking precedence over
    JUNG and JUNG over JONG. A Jong unit holding a simple consonant therefore
    behaves like a Cho; only compound finals (ㄳ, ㄺ, ...) act as JONG.
    """
    if isinstance(unit, Control):
        return _Role.ERASE if unit.kind is ControlKind.ERASE else _Role.OTHER
    if isinstance(unit, Plain):
        return _Role.OTHER

    categories = classify(unit.text)
    if JamoCategory.CHO in categories:
        return _Role.CHO
    if JamoCategory.JUNG in categories:
        return _Role.JUNG
    if JamoCategory.JONG in categories:
        return _Role.JONG
    return _Role.OTHER


@dataclass(frozen=True)
class AssemblyState:
    """Rendered output so far plus the pending syllable."""

    output: str = ""
    cho: Optional[str] = None
    jung: Optional[str] = None
    jong: Optional[str] = None

    def has_pending(self) -> bool:
        return bool(self.cho or self.jung or self.jong)

    def flushed(self) -> "AssemblyState":
        """Render the pending syllable into the output and clear it."""
        return AssemblyState(output=self.output + combine(self.cho, self.jung, self.jong))


def _erase_last_rendered(state: AssemblyState) -> AssemblyState:
    """Remove the last *rendered* character and drop the pending syllable.

    The pending syllable is discarded, not flushed: erasing targets text
    already on screen, one display character per marker.
    """
    return AssemblyState(output=state.output[:-1])


def step(state: AssemblyState, unit: Unit, next_unit: Optional[Unit] = None) -> AssemblyState:
    """Apply one unit to `state` and return the new state.

    `next_unit` is the unit that follows `unit` in the stream, or None at the
    end of the (current) stream. It is only consulted to decide whether a
    consonant closes the pending syllable or opens the next one.
    """
    role = _role_of(unit)

    if role is _Role.ERASE:
        return _erase_last_rendered(state)

    if role is _Role.CHO:
        c = unit.text
        if state.cho and state.jung:
            if state.jong:
                return replace(state.flushed(), cho=c)
            if next_unit is not None and _role_of(next_unit) is _Role.JUNG:
                return replace(state.flushed(), cho=c)
            return replace(state, jong=c)
        return replace(state, cho=c)

    if role is _Role.JUNG:
        if state.jung:
            return replace(state.flushed(), jung=unit.text)
        return replace(state, jung=unit.text)

    if role is _Role.JONG:
        g = unit.text
        if state.jung:
            if state.jong:
                return replace(state.flushed(), jong=g)
            return replace(state, jong=g)
        # Compound final with no vowel pending: kept as a stray initial so the
        # glyph still shows up (combine() renders it literally).
        logger.debug("Compound final %r without a vowel; keeping it as an initial", g)
        return replace(state.flushed(), cho=g)

    flushed = state.flushed()
    return replace(flushed, output=flushed.output + unit.text)


def finish(state: AssemblyState) -> str:
    """Return the final text for `state`, flushing any pending syllable."""
    if not state.has_pending():
        return state.output
    return state.flushed().output


def assemble(units: Iterable[Unit]) -> str:
    """Assemble a unit sequence into display text. Never raises."""
    seq = list(units)
    state = AssemblyState()
    for i, unit in enumerate(seq):
        next_unit = seq[i + 1] if i + 1 < len(seq) else None
        state = step(state, unit, next_unit)
    return finish(state)


class Assembler:
    """Incremental assembler.

    Feeding units one at a time yields, after each call, exactly the text
    `assemble()` returns for the same prefix. The most recent unit is held
    back until its successor arrives, because that successor decides how the
    unit is applied; `text` renders it provisionally as if the stream ended.

    An instance is owned by a single caller; it is not thread-safe.
    """

    def __init__(self) -> None:
        self._state: AssemblyState = AssemblyState()
        self._last: Optional[Unit] = None
        self._count: int = 0

    def reset(self) -> None:
        self._state = AssemblyState()
        self._last = None
        self._count = 0

    def feed(self, unit: Unit) -> str:
        """Append one unit and return the text for the prefix so far."""
        if self._last is not None:
            self._state = step(self._state, self._last, unit)
        self._last = unit
        self._count += 1
        return self.text

    def extend(self, units: Iterable[Unit]) -> str:
        for unit in units:
            self.feed(unit)
        return self.text

    @property
    def text(self) -> str:
        if self._last is None:
            return finish(self._state)
        return finish(step(self._state, self._last, None))

    def __len__(self) -> int:
        return self._count


__all__ = [
    "AssemblyState",
    "Assembler",
    "assemble",
    "finish",
    "step",
]
