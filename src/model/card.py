# RU: Карточка штрихкода (имя, код, цвет, символика) с сериализацией в формате настроек приложения.
# EN: Barcode card (name, code, color, symbology) with dict round-trip in the settings payload format.

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import quote, unquote

from src import get_logger
from src.barcodegen.dispatch import encode_symbol, resolve_symbology
from src.model.symbol import SymbolDescriptor

from .enums import Symbology

logger = get_logger(__name__)

DEFAULT_CARD_COLOR = "#12D612"

# Characters encodeURIComponent leaves as is, besides the unreserved set.
_NAME_SAFE = "!*'()"


@dataclass
class Card:
    """
    One entry of the card deck shown on the display.

    ``symbology`` is AUTO unless the user forced Code 39 or Code 128; the
    payload stores it as the numeric ``type`` selector.

    Examples:
        card = Card(name="Library", code="04210000526")
        desc = card.encode()          # EAN-13, completed to 0042100005264
        Card.from_dict(card.to_dict()) == card
    """

    name: str = ""
    code: str = ""
    color: str = DEFAULT_CARD_COLOR
    symbology: Symbology = Symbology.AUTO
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.symbology = Symbology.from_selector(self.symbology)

    @property
    def effective_symbology(self) -> Symbology:
        return resolve_symbology(self.code, self.symbology)

    def encode(self) -> SymbolDescriptor:
        return encode_symbol(self.code, self.symbology)

    def to_dict(self) -> Dict[str, Any]:
        dct: Dict[str, Any] = {
            "name": quote(self.name, safe=_NAME_SAFE),
            "code": self.code,
            "color": self.color,
            "type": self.symbology.selector,
        }
        if self.metadata:
            dct["metadata"] = dict(self.metadata)
        return dct

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Card":
        """Build a card from a settings payload entry; names are stored URL-quoted."""
        d = dict(d)
        name: Optional[str] = d.get("name")
        color: Optional[str] = d.get("color")
        code: Any = d.get("code")
        if not color:
            logger.debug("Card %r has no color, using default", name)
        return cls(
            name=unquote(name) if name else "",
            code="" if code is None else str(code).strip(),
            color=color or DEFAULT_CARD_COLOR,
            symbology=Symbology.from_selector(d.get("type")),
            metadata=dict(d.get("metadata") or {}),
        )

    def __str__(self) -> str:
        codeshow: str = self.code[:16] + ("..." if len(self.code) > 16 else "")
        return f"Card({self.name!r}, code={codeshow}, {self.symbology.value})"
