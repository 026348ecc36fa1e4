# RU: Неизменяемое описание штрихкода: последовательность кодовых слов (маска, ширина) и общее число модулей.
# EN: Immutable barcode symbol description: ordered codewords (bitmask, bit width) plus total module count.

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple, Tuple

from .enums import Symbology

__all__ = ["Codeword", "SymbolDescriptor"]


class Codeword(NamedTuple):
    """One lookup-table entry: ``bit_width`` modules, MSB first, 1 = bar."""

    bitmask: int
    bit_width: int

    def modules(self) -> Iterator[int]:
        for shift in range(self.bit_width - 1, -1, -1):
            yield (self.bitmask >> shift) & 1


@dataclass(frozen=True)
class SymbolDescriptor:
    """
    Encoded 1D symbol ready for rasterization.

    Reading every codeword in order, and each codeword from its most
    significant bit down, yields one module per bit: ``1`` is a bar,
    ``0`` is a space. ``total_modules`` is the raster length.

    Examples:
        >>> desc = SymbolDescriptor.from_codewords(
        ...     Symbology.EAN13, [Codeword(0b101, 3)]
        ... )
        >>> desc.total_modules
        3
        >>> desc.to_bitstring()
        '101'
    """

    symbology: Symbology
    codewords: Tuple[Codeword, ...]
    total_modules: int

    def __post_init__(self) -> None:
        total = 0
        for index, (bitmask, bit_width) in enumerate(self.codewords):
            if bit_width < 1:
                raise ValueError(f"Codeword {index} has non-positive width {bit_width}")
            if bitmask < 0 or bitmask >> bit_width:
                raise ValueError(
                    f"Codeword {index} bitmask {bitmask:#x} exceeds {bit_width} bits"
                )
            total += bit_width
        if total != self.total_modules:
            raise ValueError(
                f"total_modules {self.total_modules} != sum of widths {total}"
            )

    @classmethod
    def from_codewords(
        cls, symbology: Symbology, codewords: Iterable[Tuple[int, int]]
    ) -> "SymbolDescriptor":
        words = tuple(Codeword(bitmask, width) for bitmask, width in codewords)
        return cls(
            symbology=symbology,
            codewords=words,
            total_modules=sum(word.bit_width for word in words),
        )

    @property
    def bitmasks(self) -> Tuple[int, ...]:
        return tuple(word.bitmask for word in self.codewords)

    @property
    def bit_widths(self) -> Tuple[int, ...]:
        return tuple(word.bit_width for word in self.codewords)

    def iter_modules(self) -> Iterator[int]:
        """Yield the raster left to right, one 0/1 value per module."""
        for word in self.codewords:
            yield from word.modules()

    def to_bitstring(self) -> str:
        return "".join(str(bit) for bit in self.iter_modules())

    def __len__(self) -> int:
        return len(self.codewords)

    def __str__(self) -> str:
        return (
            f"SymbolDescriptor({self.symbology.value}, "
            f"{len(self.codewords)} codewords, {self.total_modules} modules)"
        )
