"""
Code 128 encoder with automatic subset B / subset C selection.

Mode selection is a length/content rule, not an optimal packer: inputs of
four or more characters made only of decimal digits go to subset C, every
other input goes to subset B. In subset C an odd trailing digit is emitted
after a Code B shift.
"""

from __future__ import annotations

from typing import Final, List, Tuple

from src.model.enums import Symbology
from src.model.symbol import SymbolDescriptor

from .errors import InvalidDigitPairError, OutOfAlphabetError

__all__ = [
    "CODE128_PATTERNS",
    "CODE128_WIDTH",
    "START_A",
    "START_B",
    "START_C",
    "SHIFT_TO_B",
    "STOP_PATTERN",
    "TERMINATOR_PATTERN",
    "encode_code128",
    "uses_subset_c",
]

CODE128_WIDTH: Final[int] = 11
TERMINATOR_WIDTH: Final[int] = 2

# Symbol values 0..105, indexed by value.
CODE128_PATTERNS: Final[Tuple[int, ...]] = (
    0x6CC, 0x66C, 0x666, 0x498, 0x48C, 0x44C, 0x4C8, 0x4C4, 0x464, 0x648,  # 0-9
    0x644, 0x624, 0x59C, 0x4DC, 0x4CE, 0x5CC, 0x4EC, 0x4E6, 0x672, 0x65C,  # 10-19
    0x64E, 0x6E4, 0x674, 0x76E, 0x74C, 0x72C, 0x726, 0x764, 0x734, 0x732,  # 20-29
    0x6D8, 0x6C6, 0x636, 0x518, 0x458, 0x446, 0x588, 0x468, 0x462, 0x688,  # 30-39
    0x628, 0x622, 0x5B8, 0x58E, 0x46E, 0x5D8, 0x5C6, 0x476, 0x776, 0x68E,  # 40-49
    0x62E, 0x6E8, 0x6E2, 0x6EE, 0x758, 0x746, 0x716, 0x768, 0x762, 0x71A,  # 50-59
    0x77A, 0x642, 0x78A, 0x530, 0x50C, 0x4B0, 0x486, 0x42C, 0x426, 0x590,  # 60-69
    0x584, 0x4D0, 0x4C2, 0x434, 0x432, 0x612, 0x650, 0x7BA, 0x614, 0x47A,  # 70-79
    0x53C, 0x4BC, 0x49E, 0x5E4, 0x4F4, 0x4F2, 0x7A4, 0x794, 0x792, 0x6DE,  # 80-89
    0x6F6, 0x7B6, 0x578, 0x51E, 0x45E, 0x5E8, 0x5E2, 0x7A8, 0x7A2, 0x5DE,  # 90-99
    0x5EE, 0x75E, 0x7AE, 0x684, 0x690, 0x69C,  # 100-105
)  # fmt: skip

SHIFT_TO_B: Final[int] = 100  # "Code B" in subset C
START_A: Final[int] = 103
START_B: Final[int] = 104
START_C: Final[int] = 105

STOP_PATTERN: Final[int] = 0x63A
TERMINATOR_PATTERN: Final[int] = 0b11

_CHECKSUM_MODULUS: Final[int] = 103
_SUBSET_B_MAX: Final[int] = 94
_SUBSET_B_DIGITS: Final[Tuple[int, int]] = (16, 25)  # "0".."9" minus 32
_SUBSET_C_MIN_LENGTH: Final[int] = 4


def uses_subset_c(value: str) -> bool:
    return len(value) >= _SUBSET_C_MIN_LENGTH and all("0" <= ch <= "9" for ch in value)


def _subset_b_value(ch: str, position: int) -> int:
    code = ord(ch) - 32
    if code < 0 or code > _SUBSET_B_MAX:
        raise OutOfAlphabetError(
            f"Character {ch!r} at position {position} is not valid in Code 128 subset B",
            symbology=Symbology.CODE128,
            position=position,
            value=ch,
        )
    return code


def _subset_c_values(value: str) -> List[int]:
    """Symbol values after Start C, including the shift for an odd digit."""
    values: List[int] = []
    paired = len(value) - len(value) % 2
    for position in range(0, paired, 2):
        pair = value[position : position + 2]
        if not ("0" <= pair[0] <= "9" and "0" <= pair[1] <= "9"):
            raise InvalidDigitPairError(
                f"Digit pair {pair!r} at position {position} is not 00-99",
                symbology=Symbology.CODE128,
                position=position,
                value=pair,
            )
        values.append(int(pair))
    if paired < len(value):
        ch = value[paired]
        code = ord(ch) - 32
        low, high = _SUBSET_B_DIGITS
        if code < low or code > high:
            raise InvalidDigitPairError(
                f"Trailing character {ch!r} at position {paired} is not a digit",
                symbology=Symbology.CODE128,
                position=paired,
                value=ch,
            )
        values.append(SHIFT_TO_B)
        values.append(code)
    return values


def encode_code128(value: str) -> SymbolDescriptor:
    """
    Encode ``value`` as Code 128.

    Raises:
        OutOfAlphabetError: Subset B character outside ASCII 32..126.
        InvalidDigitPairError: Subset C pair or trailing digit is not decimal.
    """
    if uses_subset_c(value):
        start = START_C
        values = _subset_c_values(value)
    else:
        start = START_B
        values = [_subset_b_value(ch, position) for position, ch in enumerate(value)]

    checksum = start
    for weight, symbol_value in enumerate(values, start=1):
        checksum += symbol_value * weight
    checksum %= _CHECKSUM_MODULUS

    codewords: List[Tuple[int, int]] = [(CODE128_PATTERNS[start], CODE128_WIDTH)]
    codewords.extend((CODE128_PATTERNS[v], CODE128_WIDTH) for v in values)
    codewords.append((CODE128_PATTERNS[checksum], CODE128_WIDTH))
    codewords.append((STOP_PATTERN, CODE128_WIDTH))
    codewords.append((TERMINATOR_PATTERN, TERMINATOR_WIDTH))
    return SymbolDescriptor.from_codewords(Symbology.CODE128, codewords)
