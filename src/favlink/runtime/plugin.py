"""Favlink host binding: the shortcode callback and the stylesheet hooks."""
from typing import Any, Mapping, Optional, Union

from favlink import __version__
from favlink.core.models import RenderRequest, RenderResult, StyleContext
from favlink.core.render import render as render_favlink
from favlink.core.styles import build_css
from favlink.runtime.assets import StyleRegistry
from favlink.runtime.context import RenderContext, current_context
from favlink.runtime.shortcodes import ShortcodeRegistry

Attributes = Union[RenderRequest, Mapping[str, Any], None]


class Favlink:
    """
    Two-phase favicon link feature.

    Phase 1 runs ``render`` once per shortcode occurrence while content is
    transformed; phase 2 asks for ``styles`` once per injection context, and
    only when phase 1 rendered something.
    """

    TAG = "favlink"
    # Both stylesheet handles carry the same version; bump them together.
    VERSION = __version__

    @staticmethod
    def render(attrs: Attributes) -> RenderResult:
        return render_favlink(attrs)

    @staticmethod
    def styles(context: StyleContext) -> str:
        return build_css(context.in_editor)

    @classmethod
    def register(cls, shortcodes: ShortcodeRegistry) -> None:
        shortcodes.add(cls.TAG, cls.render_shortcode)

    @classmethod
    def render_shortcode(cls, attrs: Attributes, content: Optional[str] = None, tag: str = TAG) -> str:
        """Shortcode callback: render and flag the active request."""
        return current_context().record(cls.render(attrs)).markup

    @classmethod
    def _enqueue(cls, styles: StyleRegistry, context: RenderContext, style_context: StyleContext) -> bool:
        if not context.needs_css:
            return False
        styles.enqueue(style_context.handle, None, (), cls.VERSION)
        return styles.add_inline(style_context.handle, cls.styles(style_context))

    @classmethod
    def enqueue_styles_if_needed(cls, styles: StyleRegistry, context: Optional[RenderContext] = None) -> bool:
        """Front end: attach the stylesheet once, if a link was rendered."""
        return cls._enqueue(styles, context if context is not None else current_context(), StyleContext.FRONTEND)

    @classmethod
    def enqueue_editor_styles_if_needed(
        cls, styles: StyleRegistry, context: Optional[RenderContext] = None
    ) -> bool:
        """Block editor: same rules, scoped to the editor canvas."""
        return cls._enqueue(styles, context if context is not None else current_context(), StyleContext.EDITOR)
