"""
EAN-13 encoder.

The first digit is not drawn; it selects which of the next six digits use
the G (even parity) table instead of the L table. Completing 11/12-digit
input to 13 digits is the dispatch layer's job (see ``dispatch.complete_ean13``).

Callers must pass exactly 13 digits. The encoder still checks the length and
raises ``OutOfAlphabetError`` so a short or long string cannot index past the
parity tables or produce a symbol that is not 95 modules.
"""

from __future__ import annotations

from typing import Final, List, Tuple

from src.model.enums import Symbology
from src.model.symbol import SymbolDescriptor

from .errors import OutOfAlphabetError

__all__ = [
    "EAN13_LENGTH",
    "EAN13_MODULES",
    "L_PATTERNS",
    "G_PATTERNS",
    "R_PATTERNS",
    "PARITY_PATTERNS",
    "START_GUARD",
    "MIDDLE_GUARD",
    "END_GUARD",
    "encode_ean13",
]

EAN13_LENGTH: Final[int] = 13
EAN13_MODULES: Final[int] = 95
DIGIT_WIDTH: Final[int] = 7

L_PATTERNS: Final[Tuple[int, ...]] = (
    0x0D, 0x19, 0x13, 0x3D, 0x23, 0x31, 0x2F, 0x3B, 0x37, 0x0B,
)  # fmt: skip
G_PATTERNS: Final[Tuple[int, ...]] = (
    0x27, 0x33, 0x1B, 0x21, 0x1D, 0x39, 0x05, 0x11, 0x09, 0x17,
)  # fmt: skip
R_PATTERNS: Final[Tuple[int, ...]] = (
    0x72, 0x66, 0x6C, 0x42, 0x5C, 0x4E, 0x50, 0x44, 0x48, 0x74,
)  # fmt: skip

# Bit k (LSB first) set -> digit k+1 of the left half uses G.
PARITY_PATTERNS: Final[Tuple[int, ...]] = (
    0x00, 0x34, 0x2C, 0x1C, 0x32, 0x26, 0x0E, 0x2A, 0x1A, 0x16,
)  # fmt: skip

START_GUARD: Final[Tuple[int, int]] = (0b101, 3)
MIDDLE_GUARD: Final[Tuple[int, int]] = (0b01010, 5)
END_GUARD: Final[Tuple[int, int]] = (0b101, 3)


def _digit(value: str, position: int) -> int:
    ch = value[position]
    if not "0" <= ch <= "9":
        raise OutOfAlphabetError(
            f"Character {ch!r} at position {position} is not valid in EAN-13",
            symbology=Symbology.EAN13,
            position=position,
            value=ch,
        )
    return ord(ch) - 48


def encode_ean13(value: str) -> SymbolDescriptor:
    """
    Encode a 13-digit string as EAN-13 (always 95 modules).

    Raises:
        OutOfAlphabetError: On a non-decimal character or a length other than 13.
    """
    if len(value) != EAN13_LENGTH:
        raise OutOfAlphabetError(
            f"EAN-13 needs exactly {EAN13_LENGTH} digits, got {len(value)}",
            symbology=Symbology.EAN13,
            position=min(len(value), EAN13_LENGTH),
        )
    digits = [_digit(value, position) for position in range(EAN13_LENGTH)]

    parity = PARITY_PATTERNS[digits[0]]
    codewords: List[Tuple[int, int]] = [START_GUARD]
    for digit in digits[1:7]:
        table = G_PATTERNS if parity & 1 else L_PATTERNS
        codewords.append((table[digit], DIGIT_WIDTH))
        parity >>= 1
    codewords.append(MIDDLE_GUARD)
    codewords.extend((R_PATTERNS[digit], DIGIT_WIDTH) for digit in digits[7:])
    codewords.append(END_GUARD)
    return SymbolDescriptor.from_codewords(Symbology.EAN13, codewords)
