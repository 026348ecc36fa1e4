"""
Pillow rasterizer for SymbolDescriptor.

Maps every module to ``module_width`` pixels, draws only the bar (``1``)
modules and centres the symbol horizontally. A symbol whose module count
exceeds the display budget is not drawn at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from typing import Any, Dict, Iterator, Mapping, NamedTuple, Optional, Tuple

from PIL import Image, ImageDraw

from src import get_logger, load_config
from src.model.card import Card
from src.model.symbol import SymbolDescriptor

from .errors import BarcodeGenError, SymbolTooLongError

logger = get_logger(__name__)

__all__ = ["RenderSettings", "RenderResult", "RasterRenderer", "TOO_LONG_CAPTION"]

TOO_LONG_CAPTION = "Code too long!"


@dataclass(frozen=True)
class RenderSettings:
    """Display budget and colors used by RasterRenderer."""

    display_width: int = 336
    max_modules: int = 165
    min_module_width: int = 2
    quiet_zone_modules: int = 20
    bar_height: int = 120
    bar_color: str = "#000000"
    card_color: str = "#12D612"

    def __post_init__(self) -> None:
        for name in ("display_width", "max_modules", "min_module_width", "bar_height"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if not isinstance(self.quiet_zone_modules, int) or self.quiet_zone_modules < 0:
            raise ValueError(
                f"quiet_zone_modules must be a non-negative integer, got {self.quiet_zone_modules!r}"
            )

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, Any]] = None) -> "RenderSettings":
        """Pick the rendering keys out of a package config dict (see ``load_config``)."""
        if config is None:
            config = load_config()
        known = cls.__dataclass_fields__.keys()
        kwargs: Dict[str, Any] = {k: config[k] for k in known if k in config}
        return cls(**kwargs)


class RenderResult(NamedTuple):
    """Outcome of drawing one card: image (None if not drawable) and caption text."""

    image: Optional[Image.Image]
    caption: str


class RasterRenderer:
    """
    Rasterize encoded symbols for a fixed-width display.

    Args:
        settings: Display budget and colors; defaults come from ``load_config()``.

    Example:
        >>> renderer = RasterRenderer(RenderSettings(display_width=336))
        >>> img = renderer.render_image(encode_code39("ABC"))
    """

    def __init__(self, settings: Optional[RenderSettings] = None) -> None:
        self.settings = settings if settings is not None else RenderSettings.from_config()

    def fits(self, descriptor: SymbolDescriptor) -> bool:
        s = self.settings
        length = descriptor.total_modules
        if length > s.max_modules:
            return False
        return length * s.min_module_width <= s.display_width - s.quiet_zone_modules

    def module_width(self, descriptor: SymbolDescriptor) -> int:
        s = self.settings
        return max(
            s.min_module_width,
            s.display_width // (descriptor.total_modules + s.quiet_zone_modules),
        )

    def bar_spans(self, descriptor: SymbolDescriptor) -> Iterator[Tuple[int, int]]:
        """
        Yield ``(x0, x1)`` pixel spans of every bar module, x1 exclusive.

        Raises:
            SymbolTooLongError: If the symbol does not fit the display.
        """
        if not self.fits(descriptor):
            raise SymbolTooLongError(descriptor.total_modules, self.settings.max_modules)
        width = self.module_width(descriptor)
        offset = (self.settings.display_width - width * descriptor.total_modules) // 2
        for index, bit in enumerate(descriptor.iter_modules()):
            if bit:
                x0 = offset + index * width
                yield x0, x0 + width

    def render_image(
        self,
        descriptor: SymbolDescriptor,
        background: Optional[str] = None,
    ) -> Image.Image:
        """
        Draw the symbol on a ``display_width`` x ``bar_height`` RGB image.

        Args:
            descriptor: Encoded symbol.
            background: Fill color, defaults to ``settings.card_color``.

        Returns:
            PIL Image (RGB).

        Raises:
            SymbolTooLongError: If the symbol does not fit the display.
        """
        s = self.settings
        img = Image.new("RGB", (s.display_width, s.bar_height), background or s.card_color)
        draw = ImageDraw.Draw(img)
        for x0, x1 in self.bar_spans(descriptor):
            draw.rectangle((x0, 0, x1 - 1, s.bar_height - 1), fill=s.bar_color)
        logger.debug(
            "Rendered %s: %d modules at %d px",
            descriptor.symbology.value,
            descriptor.total_modules,
            self.module_width(descriptor),
        )
        return img

    def render_bytes(self, descriptor: SymbolDescriptor, output_format: str = "PNG") -> bytes:
        img = self.render_image(descriptor)
        buf = BytesIO()
        img.save(buf, format=output_format.upper())
        buf.seek(0)
        logger.debug("Output rendered as %s (%d bytes)", output_format, buf.getbuffer().nbytes)
        return buf.read()

    def render_card(self, card: Card) -> RenderResult:
        """
        Encode and draw a card, turning failures into the caption shown instead.

        Returns:
            RenderResult with the image and the card's code as caption; on an
            encoding error the image is None and the caption is the error
            message; on a too-long symbol the caption is "Code too long!".
        """
        try:
            descriptor = card.encode()
        except BarcodeGenError as e:
            logger.warning("Card %r cannot be encoded: %s", card.name, e)
            return RenderResult(None, str(e))
        if not self.fits(descriptor):
            logger.warning(
                "Card %r: %d modules exceed display budget", card.name, descriptor.total_modules
            )
            return RenderResult(None, TOO_LONG_CAPTION)
        return RenderResult(self.render_image(descriptor, background=card.color), card.code)
