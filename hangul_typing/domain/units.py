from __future__ import annotations

"""Typing units (domain layer).

A unit is one element of the decomposed stream produced by `disassemble()`
and consumed by `assemble()`:

  - Cho(value)    initial consonant
  - Jung(value)   medial vowel
  - Jong(value)   final consonant
  - Plain(char)   any non-Hangul character, passed through unchanged
  - Control(kind) erase-last / line-break markers

All unit types are frozen dataclasses, so they compare by value and hash.

Persistence:
  - `unit_to_record()` / `unit_from_record()` map units to plain dicts
    (`{"kind": ..., "value": ...}`) that round-trip losslessly through YAML.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Union

from hangul_typing.domain.errors import InvalidUnitRecord


class ControlKind(Enum):
    ERASE = "erase"
    BREAK = "break"


@dataclass(frozen=True)
class Cho:
    value: str

    @property
    def text(self) -> str:
        return self.value


@dataclass(frozen=True)
class Jung:
    value: str

    @property
    def text(self) -> str:
        return self.value


@dataclass(frozen=True)
class Jong:
    value: str

    @property
    def text(self) -> str:
        return self.value


@dataclass(frozen=True)
class Plain:
    char: str

    @property
    def text(self) -> str:
        return self.char


@dataclass(frozen=True)
class Control:
    kind: ControlKind

    @property
    def text(self) -> str:
        """The character this marker stands for in rendered output."""
        return _CONTROL_TEXT[self.kind]


Unit = Union[Cho, Jung, Jong, Plain, Control]

ERASE: Final[Control] = Control(ControlKind.ERASE)
BREAK: Final[Control] = Control(ControlKind.BREAK)

_CONTROL_TEXT: Final[dict[ControlKind, str]] = {
    ControlKind.ERASE: "\b",
    ControlKind.BREAK: "\n",
}


# -----------------------------------------------------------------------------
# Record codec
# -----------------------------------------------------------------------------

_KIND_BY_TYPE: Final[dict[type, str]] = {
    Cho: "cho",
    Jung: "jung",
    Jong: "jong",
    Plain: "plain",
    Control: "control",
}

_JAMO_TYPES: Final[dict[str, type]] = {
    "cho": Cho,
    "jung": Jung,
    "jong": Jong,
}


def unit_to_record(unit: Unit) -> dict[str, str]:
    """Return a plain-dict representation of `unit` (safe for YAML/JSON)."""
    kind = _KIND_BY_TYPE.get(type(unit))
    if kind is None:
        raise TypeError("Not a typing unit: %r" % (unit,))
    if isinstance(unit, Control):
        return {"kind": kind, "value": unit.kind.value}
    return {"kind": kind, "value": unit.text}


def unit_from_record(record: Any) -> Unit:
    """Rebuild a unit from a record produced by `unit_to_record()`.

    Raises:
        InvalidUnitRecord: if the record is not a mapping with a known kind
            and a string value of the right shape.
    """
    if not isinstance(record, dict):
        raise InvalidUnitRecord("Unit record must be a mapping, got %r" % (record,))

    kind = record.get("kind")
    value = record.get("value")
    if not isinstance(value, str):
        raise InvalidUnitRecord("Unit record value must be a string: %r" % (record,))

    if kind == "control":
        try:
            return Control(ControlKind(value))
        except ValueError as e:
            raise InvalidUnitRecord("Unknown control kind: %r" % (value,)) from e

    if kind == "plain":
        if len(value) != 1:
            raise InvalidUnitRecord("Plain unit must hold one character: %r" % (value,))
        return Plain(value)

    cls = _JAMO_TYPES.get(str(kind))
    if cls is None:
        raise InvalidUnitRecord("Unknown unit kind: %r" % (kind,))
    if not value:
        raise InvalidUnitRecord("Jamo unit must not be empty: %r" % (record,))
    return cls(value)


__all__ = [
    "BREAK",
    "Cho",
    "Control",
    "ControlKind",
    "ERASE",
    "Jong",
    "Jung",
    "Plain",
    "Unit",
    "unit_from_record",
    "unit_to_record",
]
