"""
Domain layer: the Hangul <-> typing-unit transducer.

No I/O and no UI dependencies live here.
"""

from .assembler import Assembler, AssemblyState, assemble, finish, step  # noqa: F401
from .classifier import JamoCategory, classify, is_cho, is_jong, is_jung  # noqa: F401
from .combiner import combine  # noqa: F401
from .disassembler import decompose_syllable, disassemble  # noqa: F401
from .errors import InvalidInput, InvalidUnitRecord  # noqa: F401
from .units import (  # noqa: F401
    BREAK,
    ERASE,
    Cho,
    Control,
    ControlKind,
    Jong,
    Jung,
    Plain,
    Unit,
    unit_from_record,
    unit_to_record,
)

__all__ = [
    "Assembler",
    "AssemblyState",
    "BREAK",
    "Cho",
    "Control",
    "ControlKind",
    "ERASE",
    "InvalidInput",
    "InvalidUnitRecord",
    "JamoCategory",
    "Jong",
    "Jung",
    "Plain",
    "Unit",
    "assemble",
    "classify",
    "combine",
    "decompose_syllable",
    "disassemble",
    "finish",
    "is_cho",
    "is_jong",
    "is_jung",
    "step",
    "unit_from_record",
    "unit_to_record",
]
