"""
model/enums.py

(Краткое RU: Перечисления символик штрихкодов и видов ошибок кодирования.)

EN: Domain enums for the barcode card encoder.
NO encoding logic here!

- Only the symbologies the encoders actually implement (Code 39, Code 128, EAN-13).
- AUTO defers the choice to the EAN-13 plausibility rule in the dispatch layer.
- Error kinds form a closed set shared by every encoder.

See Also:
    - src/barcodegen (for the encoders)
"""

from __future__ import annotations

from enum import Enum
from typing import Final, Literal, Mapping, Union

from src import get_logger

_logger: Final = get_logger(__name__)

# Numeric "type" values stored on a card by the settings companion.
SELECTOR_AUTO: Final[int] = 0
SELECTOR_CODE128: Final[int] = 1
SELECTOR_CODE39: Final[int] = 2


class Symbology(str, Enum):
    AUTO = "auto"
    CODE39 = "code39"
    CODE128 = "code128"
    EAN13 = "ean13"

    @property
    def selector(self) -> int:
        """Numeric card selector; EAN-13 is reached through AUTO."""
        mapping = {
            Symbology.AUTO: SELECTOR_AUTO,
            Symbology.CODE128: SELECTOR_CODE128,
            Symbology.CODE39: SELECTOR_CODE39,
            Symbology.EAN13: SELECTOR_AUTO,
        }
        return mapping[self]

    @classmethod
    def from_selector(cls, value: Union["Symbology", str, int, None]) -> "Symbology":
        """
        Resolve a symbology from an enum member, its string value or a
        numeric card selector (0 auto, 1 Code 128, 2 Code 39).

        Unknown numeric selectors resolve to AUTO, like an unset card type.

        Raises:
            ValueError: for an unknown string value.
        """
        if value is None:
            return cls.AUTO
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid symbology selector: {value!r}")
        if isinstance(value, int):
            if value == SELECTOR_CODE128:
                return cls.CODE128
            if value == SELECTOR_CODE39:
                return cls.CODE39
            if value != SELECTOR_AUTO:
                _logger.debug("Unknown numeric selector %r, using AUTO", value)
            return cls.AUTO
        text = str(value).strip().lower()
        if text.isdigit():
            return cls.from_selector(int(text))
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown symbology: {value!r}") from None

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru: Mapping[Symbology, str] = {
            Symbology.AUTO: "Автовыбор",
            Symbology.CODE39: "Code 39",
            Symbology.CODE128: "Code 128",
            Symbology.EAN13: "EAN-13",
        }
        names_en: Mapping[Symbology, str] = {
            Symbology.AUTO: "Automatic",
            Symbology.CODE39: "Code 39",
            Symbology.CODE128: "Code 128",
            Symbology.EAN13: "EAN-13",
        }
        return names_ru[self] if lang == "ru" else names_en[self]


class SymbolErrorKind(str, Enum):
    OUT_OF_ALPHABET = "out_of_alphabet"
    INVALID_DIGIT_PAIR = "invalid_digit_pair"

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            SymbolErrorKind.OUT_OF_ALPHABET: "Символ вне алфавита",
            SymbolErrorKind.INVALID_DIGIT_PAIR: "Недопустимая пара цифр",
        }
        names_en = {
            SymbolErrorKind.OUT_OF_ALPHABET: "Character out of alphabet",
            SymbolErrorKind.INVALID_DIGIT_PAIR: "Invalid digit pair",
        }
        return names_ru[self] if lang == "ru" else names_en[self]


__all__ = [
    "SELECTOR_AUTO",
    "SELECTOR_CODE128",
    "SELECTOR_CODE39",
    "Symbology",
    "SymbolErrorKind",
]
