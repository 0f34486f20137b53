"""
Hangul typing: decompose Hangul text into typing units and reassemble any
prefix of them into the text a typing animation should show at that point.

Stable import surface:
    from hangul_typing import disassemble, assemble
"""

from .domain import (  # noqa: F401
    Assembler,
    InvalidInput,
    Unit,
    assemble,
    combine,
    disassemble,
)

__version__ = "0.1.0"

__all__ = [
    "Assembler",
    "InvalidInput",
    "Unit",
    "assemble",
    "combine",
    "disassemble",
]
