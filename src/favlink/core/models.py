"""Value types passed between the renderer, the style builder and the host."""
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple, Union

from pydantic import BaseModel, ConfigDict, field_validator


class RenderRequest(BaseModel):
    """Shortcode attributes after normalisation against defaults.

    Unknown keys are dropped, missing keys default to ``""`` and every value
    is coerced to text, since hosts hand attributes over untyped.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    url: str = ""
    text: str = ""
    size: str = ""

    @field_validator("url", "text", "size", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, int) and not isinstance(value, bool):
            # str() refuses ints past the digit limit; sizes saturate anyway.
            value = max(-sys.maxsize - 1, min(sys.maxsize, value))
        if isinstance(value, bytes):
            return value.decode("utf-8", errors="replace")
        return str(value)


@dataclass(frozen=True)
class ResolvedIcon:
    """Host of the target URL and the favicon URL derived from it."""

    domain: str
    icon_src: str


@dataclass(frozen=True)
class AutoSize:
    """Icon height follows the surrounding font size (1em)."""

    def dimension_attrs(self) -> str:
        return ""

    def inline_style(self) -> str:
        return ' style="height:1em!important;width:auto!important"'


@dataclass(frozen=True)
class FixedSize:
    """Icon pinned to an explicit square pixel size."""

    pixels: int

    def dimension_attrs(self) -> str:
        return f' width="{self.pixels}" height="{self.pixels}"'

    def inline_style(self) -> str:
        # Inline style wins over !important rules injected by themes/minifiers.
        return f' style="height:{self.pixels}px;width:{self.pixels}px"'


SizeDecision = Union[AutoSize, FixedSize]


class RenderResult(NamedTuple):
    """Markup for one widget plus whether the page now needs the stylesheet."""

    markup: str
    needs_styles: bool


class StyleContext(Enum):
    """Where the stylesheet is injected, valued by its asset handle."""

    FRONTEND = "favlink-style"
    EDITOR = "favlink-editor-style"

    @property
    def handle(self) -> str:
        return self.value

    @property
    def in_editor(self) -> bool:
        return self is StyleContext.EDITOR

    @classmethod
    def from_name(cls, name: str) -> "StyleContext":
        """Look up a context by its short name (``frontend`` / ``editor``)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown style context '{name}'") from None
