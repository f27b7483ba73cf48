"""Runtime components."""

from favlink.runtime.app import FavlinkApp
from favlink.runtime.assets import StyleRegistry
from favlink.runtime.context import RenderContext, current_context, request_context
from favlink.runtime.page import ContentPage
from favlink.runtime.plugin import Favlink
from favlink.runtime.shortcodes import ShortcodeRegistry

__all__ = [
    "ContentPage",
    "Favlink",
    "FavlinkApp",
    "RenderContext",
    "ShortcodeRegistry",
    "StyleRegistry",
    "current_context",
    "request_context",
]
