"""
barcodegen

Кодировщики одномерных штрихкодов с чистыми функциями и неизменяемыми таблицами.

- Code 39, Code 128 (подмножества B/C, mod 103), EAN-13 (чётность по первой цифре).
- Каждый вызов возвращает новый SymbolDescriptor или выбрасывает BarcodeGenError.
- Таблицы только для чтения: вызовы потокобезопасны без блокировок.

Public API:
    - compute_check_digit / is_plausible_ean: контрольная цифра UPC/EAN
    - encode_code39 / encode_code128 / encode_ean13: кодировщики символик
    - complete_ean13 / encode_symbol / encode_many: выбор символики и пакетная обработка
    - RasterRenderer, RenderSettings, RenderResult: растеризация через Pillow
    - BarcodeGenError, OutOfAlphabetError, InvalidDigitPairError, SymbolTooLongError

Примеры:
    >>> from src.barcodegen import encode_symbol, RasterRenderer
    >>> desc = encode_symbol("5901234123457")
    >>> img = RasterRenderer().render_image(desc)

Зависимости:
    Pillow (только RasterRenderer)
"""

from src.barcodegen.check_digit import compute_check_digit, is_plausible_ean
from src.barcodegen.code39 import encode_code39
from src.barcodegen.code128 import encode_code128
from src.barcodegen.dispatch import (
    complete_ean13,
    encode_many,
    encode_symbol,
    resolve_symbology,
)
from src.barcodegen.ean13 import encode_ean13
from src.barcodegen.errors import (
    BarcodeGenError,
    InvalidDigitPairError,
    OutOfAlphabetError,
    SymbolTooLongError,
)
from src.barcodegen.raster_renderer import RasterRenderer, RenderResult, RenderSettings

__all__ = [
    "compute_check_digit",
    "is_plausible_ean",
    "encode_code39",
    "encode_code128",
    "encode_ean13",
    "complete_ean13",
    "encode_symbol",
    "encode_many",
    "resolve_symbology",
    "RasterRenderer",
    "RenderResult",
    "RenderSettings",
    "BarcodeGenError",
    "OutOfAlphabetError",
    "InvalidDigitPairError",
    "SymbolTooLongError",
]
