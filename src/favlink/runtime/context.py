"""Per-request render state."""
import contextvars
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from favlink.core.models import RenderResult


@dataclass
class RenderContext:
    """State shared between the content pass and the asset pass of one request."""

    needs_css: bool = False

    def mark_rendered(self) -> None:
        self.needs_css = True

    def record(self, result: RenderResult) -> RenderResult:
        """Note a render outcome and hand it back unchanged."""
        if result.needs_styles:
            self.mark_rendered()
        return result


# Context variable holding the RenderContext of the request being served.
# Shortcode callbacks only receive attributes, so they find the request here.
render_context_ctx: contextvars.ContextVar[Optional[RenderContext]] = contextvars.ContextVar(
    "render_context_ctx", default=None
)


def current_context() -> RenderContext:
    """Return the active request context.

    Outside a request a detached context is returned, so stray renders never
    flag a later request.
    """
    context = render_context_ctx.get()
    if context is None:
        return RenderContext()
    return context


@contextmanager
def request_context(context: Optional[RenderContext] = None) -> Iterator[RenderContext]:
    """Install a (fresh by default) RenderContext for the duration of a request."""
    context = context if context is not None else RenderContext()
    token = render_context_ctx.set(context)
    try:
        yield context
    finally:
        render_context_ctx.reset(token)
