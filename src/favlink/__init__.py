"""Favlink: favicon-prefixed inline links with font-relative icon sizing."""

__version__ = "1.4.1"

from favlink.core.render import render
from favlink.core.styles import build_css
from favlink.runtime.plugin import Favlink

__all__ = ["Favlink", "build_css", "render", "__version__"]
