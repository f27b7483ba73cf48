"""Stylesheet handles collected per request."""
import html
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple


@dataclass
class StyleHandle:
    """A registered stylesheet: an optional external source plus inline CSS."""

    handle: str
    src: Optional[str] = None
    deps: Tuple[str, ...] = ()
    version: Optional[str] = None
    inline: List[str] = field(default_factory=list)


class StyleRegistry:
    """Collects and deduplicates stylesheet handles per request."""

    def __init__(self) -> None:
        self._handles: Dict[str, StyleHandle] = {}  # handle -> registration

    def enqueue(
        self,
        handle: str,
        src: Optional[str] = None,
        deps: Iterable[str] = (),
        version: Optional[str] = None,
    ) -> bool:
        """Register handle. Returns True if new (first occurrence)."""
        if handle in self._handles:
            return False
        self._handles[handle] = StyleHandle(handle=handle, src=src, deps=tuple(deps), version=version)
        return True

    def is_enqueued(self, handle: str) -> bool:
        return handle in self._handles

    def get(self, handle: str) -> Optional[StyleHandle]:
        return self._handles.get(handle)

    def add_inline(self, handle: str, css: str) -> bool:
        """Attach inline CSS to an enqueued handle.

        Returns False when the handle is unknown or the same CSS is already attached.
        """
        registration = self._handles.get(handle)
        if registration is None or css in registration.inline:
            return False
        registration.inline.append(css)
        return True

    def _ordered(self) -> List[StyleHandle]:
        # Dependencies first, otherwise enqueue order. Unknown deps are skipped.
        ordered: List[StyleHandle] = []
        seen = set()

        def visit(name: str) -> None:
            if name in seen or name not in self._handles:
                return
            seen.add(name)
            registration = self._handles[name]
            for dep in registration.deps:
                visit(dep)
            ordered.append(registration)

        for name in self._handles:
            visit(name)
        return ordered

    def render(self) -> str:
        """Render all collected stylesheets as <link>/<style> tags."""
        if not self._handles:
            return ""

        parts = []
        for registration in self._ordered():
            if registration.src:
                href = registration.src
                if registration.version:
                    href = f"{href}?ver={registration.version}"
                parts.append(
                    f'<link rel="stylesheet" id="{html.escape(registration.handle)}-css" '
                    f'href="{html.escape(href)}" />'
                )
            if registration.inline:
                css = "\n".join(registration.inline)
                parts.append(f'<style id="{html.escape(registration.handle)}-inline-css">{css}</style>')
        return "\n".join(parts)
