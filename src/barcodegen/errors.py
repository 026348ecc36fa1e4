"""
Исключения кодирования штрихкодов.

Иерархия:
    BarcodeGenError (базовое)
    ├── OutOfAlphabetError      (SymbolErrorKind.OUT_OF_ALPHABET)
    ├── InvalidDigitPairError   (SymbolErrorKind.INVALID_DIGIT_PAIR)
    └── SymbolTooLongError      (только рендерер, kind = None)

Example:
    >>> from src.barcodegen.errors import BarcodeGenError
    >>> try:
    ...     encode_code39("abc")
    ... except BarcodeGenError as e:
    ...     print(e.kind, e.position)
    SymbolErrorKind.OUT_OF_ALPHABET 0
"""

from __future__ import annotations

from typing import Optional

from src.model.enums import Symbology, SymbolErrorKind

__all__ = [
    "BarcodeGenError",
    "OutOfAlphabetError",
    "InvalidDigitPairError",
    "SymbolTooLongError",
]


class BarcodeGenError(Exception):
    """
    Base barcode encoding error.

    Attributes:
        message: Human readable message
        kind: Closed error kind, ``None`` for errors outside the encoders
        symbology: Symbology being encoded (optional)
        position: Index of the offending character in the input (optional)
        value: The offending character or digit pair (optional)
    """

    kind: Optional[SymbolErrorKind] = None

    def __init__(
        self,
        message: str,
        *,
        symbology: Optional[Symbology] = None,
        position: Optional[int] = None,
        value: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.symbology = symbology
        self.position = position
        self.value = value

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"symbology={self.symbology!r}, position={self.position!r})"
        )


class OutOfAlphabetError(BarcodeGenError):
    """Input character is not in the target symbology's alphabet."""

    kind = SymbolErrorKind.OUT_OF_ALPHABET


class InvalidDigitPairError(BarcodeGenError):
    """Code 128 subset-C pair or trailing digit is not decimal."""

    kind = SymbolErrorKind.INVALID_DIGIT_PAIR


class SymbolTooLongError(BarcodeGenError):
    """Encoded symbol does not fit the display budget."""

    def __init__(self, total_modules: int, max_modules: int) -> None:
        super().__init__(
            f"Symbol of {total_modules} modules exceeds display budget of {max_modules}"
        )
        self.total_modules = total_modules
        self.max_modules = max_modules
