"""
Code 39 encoder.

Each character is 12 modules (3 wide + 6 narrow elements, wide = 2
modules) preceded by a one-module inter-character gap, giving 13-bit
codewords. The symbol is framed by the ``*`` start/stop character.
"""

from __future__ import annotations

from typing import Dict, Final, List, Tuple

from src.model.enums import Symbology
from src.model.symbol import SymbolDescriptor

from .errors import OutOfAlphabetError

__all__ = ["CODE39_ALPHABET", "CODE39_PATTERNS", "CODE39_WIDTH", "encode_code39"]

CODE39_WIDTH: Final[int] = 13

CODE39_ALPHABET: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ* -$%./+"

# Indexed by position in CODE39_ALPHABET.
CODE39_PATTERNS: Final[Tuple[int, ...]] = (
    0xA6D, 0xD2B, 0xB2B, 0xD95, 0xA6B, 0xD35, 0xB35, 0xA5B, 0xD2D, 0xB2D,  # 0-9
    0xD4B, 0xB4B, 0xDA5, 0xACB, 0xD65, 0xB65, 0xA9B, 0xD4D, 0xB4D, 0xACD,  # A-J
    0xD53, 0xB53, 0xDA9, 0xAD3, 0xD69, 0xB69, 0xAB3, 0xD59, 0xB59, 0xAD9,  # K-T
    0xCAB, 0x9AB, 0xCD5, 0x96B, 0xCB5, 0x9B5,  # U-Z
    0x96D, 0x9AD, 0x95B, 0x925, 0xA49, 0xCAD, 0x929, 0x949,  # * space - $ % . / +
)  # fmt: skip

_START_STOP: Final[str] = "*"
_INDEX: Final[Dict[str, int]] = {ch: i for i, ch in enumerate(CODE39_ALPHABET)}


def encode_code39(value: str) -> SymbolDescriptor:
    """
    Encode ``value`` as Code 39 framed by start/stop sentinels.

    Lowercase is not folded; ``*`` is reserved for the sentinels.

    Raises:
        OutOfAlphabetError: On the first character outside the alphabet.
    """
    sentinel = CODE39_PATTERNS[_INDEX[_START_STOP]]
    patterns: List[int] = [sentinel]
    for position, ch in enumerate(value):
        index = _INDEX.get(ch)
        if index is None or ch == _START_STOP:
            raise OutOfAlphabetError(
                f"Character {ch!r} at position {position} is not valid in Code 39",
                symbology=Symbology.CODE39,
                position=position,
                value=ch,
            )
        patterns.append(CODE39_PATTERNS[index])
    patterns.append(sentinel)
    return SymbolDescriptor.from_codewords(
        Symbology.CODE39, ((pattern, CODE39_WIDTH) for pattern in patterns)
    )
