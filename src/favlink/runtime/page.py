"""Content page rendered through the two request phases."""
import logging
from typing import Optional

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from favlink import __version__
from favlink.core.models import StyleContext
from favlink.runtime.assets import StyleRegistry
from favlink.runtime.context import RenderContext, request_context
from favlink.runtime.plugin import Favlink
from favlink.runtime.shortcodes import ShortcodeRegistry

logger = logging.getLogger(__name__)

_env = Environment(
    loader=PackageLoader("favlink", "templates"),
    autoescape=select_autoescape(["html"]),
)


def default_shortcodes() -> ShortcodeRegistry:
    shortcodes = ShortcodeRegistry()
    Favlink.register(shortcodes)
    return shortcodes


class ContentPage:
    """One request's worth of content: shortcodes first, stylesheets second."""

    def __init__(
        self,
        content: str,
        editor: bool = False,
        title: str = "Favlink",
        shortcodes: Optional[ShortcodeRegistry] = None,
    ) -> None:
        self.content = content
        self.editor = editor
        self.title = title
        self.shortcodes = shortcodes or default_shortcodes()
        self.context = RenderContext()
        self.styles = StyleRegistry()

    @property
    def style_context(self) -> StyleContext:
        return StyleContext.EDITOR if self.editor else StyleContext.FRONTEND

    def transform(self) -> str:
        """Phase 1: expand shortcodes, recording renders on this page's context."""
        with request_context(self.context):
            body = self.shortcodes.do_shortcode(self.content)
        logger.debug("Content transformed (needs_css=%s)", self.context.needs_css)
        return body

    def enqueue_assets(self) -> None:
        """Phase 2: collect stylesheets for the page's injection context."""
        if self.editor:
            Favlink.enqueue_editor_styles_if_needed(self.styles, self.context)
        else:
            Favlink.enqueue_styles_if_needed(self.styles, self.context)

    async def render(self) -> str:
        """Render the full HTML document."""
        body = self.transform()
        self.enqueue_assets()

        html = _env.get_template("page.html").render(
            title=self.title,
            body=Markup(body),
            editor=self.editor,
            version=__version__,
        )

        styles = self.styles.render()
        if styles:
            # Inject into head
            if "</head>" in html:
                html = html.replace("</head>", f"{styles}\n</head>", 1)
            else:
                html = f"{styles}{html}"
        return html
