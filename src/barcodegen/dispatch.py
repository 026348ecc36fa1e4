"""
Symbology dispatch: pick the encoder for a raw code string.

An explicit Code 39 / Code 128 selector is honoured as is. Otherwise a code
that passes the EAN plausibility check is completed to 13 digits and drawn
as EAN-13, and anything else falls back to Code 128.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from src import get_logger
from src.model.enums import Symbology
from src.model.symbol import SymbolDescriptor

from .check_digit import compute_check_digit, is_plausible_ean
from .code39 import encode_code39
from .code128 import encode_code128
from .ean13 import encode_ean13
from .errors import BarcodeGenError, OutOfAlphabetError

logger = get_logger(__name__)

__all__ = ["complete_ean13", "encode_symbol", "encode_many", "resolve_symbology"]

SelectorLike = Union[Symbology, str, int, None]

_ENCODERS: Dict[Symbology, Callable[[str], SymbolDescriptor]] = {
    Symbology.CODE39: encode_code39,
    Symbology.CODE128: encode_code128,
    Symbology.EAN13: encode_ean13,
}


def complete_ean13(value: str) -> str:
    """
    Complete an UPC/EAN candidate to the 13 digits EAN-13 draws.

    11 digits (UPC-A without check digit) get the check digit appended and a
    leading zero; 12 digits (UPC-A) get a leading zero; 13 are returned as is.

    Raises:
        ValueError: For any other length.
    """
    if len(value) == 11:
        return f"0{value}{compute_check_digit(value)}"
    if len(value) == 12:
        return f"0{value}"
    if len(value) == 13:
        return value
    raise ValueError(f"Cannot complete {len(value)} digits to EAN-13")


def resolve_symbology(value: str, symbology: SelectorLike = Symbology.AUTO) -> Symbology:
    """Concrete symbology that ``encode_symbol`` will use for ``value``."""
    selected = Symbology.from_selector(symbology)
    if selected is not Symbology.AUTO:
        return selected
    return Symbology.EAN13 if is_plausible_ean(value) else Symbology.CODE128


def encode_symbol(value: str, symbology: SelectorLike = Symbology.AUTO) -> SymbolDescriptor:
    """
    Encode ``value`` with an explicit or automatically chosen symbology.

    Args:
        value: Raw code string.
        symbology: ``Symbology``, its string value or a numeric card selector.

    Raises:
        OutOfAlphabetError: Input not encodable in the chosen symbology
            (for an explicit EAN-13 request, input failing the EAN check).
        InvalidDigitPairError: Code 128 subset C digit error.
        ValueError: Unknown symbology selector.
    """
    selected = resolve_symbology(value, symbology)
    logger.debug("Encoding %r as %s", value, selected.value)
    if selected is Symbology.EAN13:
        if not is_plausible_ean(value):
            raise OutOfAlphabetError(
                f"{value!r} is not a valid UPC/EAN number",
                symbology=Symbology.EAN13,
            )
        value = complete_ean13(value)
    return _ENCODERS[selected](value)


def encode_many(
    items: Iterable[Union[str, Tuple[str, SelectorLike]]], parallel: bool = False
) -> List[Tuple[Any, Optional[SymbolDescriptor], Optional[BarcodeGenError]]]:
    """
    Batch-encode codes, keeping input order.

    Args:
        items: Code strings or ``(code, symbology)`` pairs.
        parallel: Encode on a thread pool.

    Returns:
        List of ``(item, descriptor, error)``; exactly one of descriptor and
        error is set per item.

    Example:
        >>> encode_many(["5901234123457", ("ABC", Symbology.CODE39)])
    """

    def gen(
        item: Union[str, Tuple[str, SelectorLike]]
    ) -> Tuple[Any, Optional[SymbolDescriptor], Optional[BarcodeGenError]]:
        if isinstance(item, str):
            code, selector = item, Symbology.AUTO
        else:
            code, selector = item
        try:
            return item, encode_symbol(code, selector), None
        except BarcodeGenError as e:
            logger.info("Batch item %r rejected: %s", code, e)
            return item, None, e

    work = list(items)
    if parallel:
        with ThreadPoolExecutor() as pool:
            result = list(pool.map(gen, work))
    else:
        result = [gen(i) for i in work]
    logger.info("Batch barcode encoding complete: %d items", len(work))
    return result
