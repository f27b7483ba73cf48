"""Core rendering: attributes to markup, context to CSS."""

from favlink.core.models import (
    AutoSize,
    FixedSize,
    RenderRequest,
    RenderResult,
    ResolvedIcon,
    SizeDecision,
    StyleContext,
)
from favlink.core.render import decide_size, parse_size, render, resolve_icon
from favlink.core.styles import PRESETS, build_css, css_rules

__all__ = [
    "AutoSize",
    "FixedSize",
    "PRESETS",
    "RenderRequest",
    "RenderResult",
    "ResolvedIcon",
    "SizeDecision",
    "StyleContext",
    "build_css",
    "css_rules",
    "decide_size",
    "parse_size",
    "render",
    "resolve_icon",
]
