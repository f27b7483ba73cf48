"""Favicon link renderer."""
import math
import re
import sys
from typing import Any, Mapping, Optional, Union
from urllib.parse import urlsplit

from favlink.core.escaping import esc_html, esc_url
from favlink.core.models import AutoSize, FixedSize, RenderRequest, RenderResult, ResolvedIcon, SizeDecision

ICON_SERVICE_TEMPLATE = "https://icons.duckduckgo.com/ip3/{domain}.ico"
CSS_CLASS = "favlink"

# Leading numeric prefix: "32px" -> "32", "1.5e1em" -> "1.5e1".
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_MAX = sys.maxsize
_INT_MIN = -sys.maxsize - 1

_EMPTY = RenderResult("", False)


def _host(netloc: str) -> str:
    netloc = netloc.rpartition("@")[2]
    if netloc.startswith("["):
        return netloc[: netloc.find("]") + 1]
    return netloc.partition(":")[0]


def resolve_icon(url: str) -> Optional[ResolvedIcon]:
    """Derive the favicon source from the URL's host, or None without a host.

    The host keeps its case and IPv6 brackets; userinfo and port are dropped.
    """
    try:
        domain = _host(urlsplit(url).netloc)
    except ValueError:
        # e.g. unbalanced IPv6 brackets
        return None
    if not domain:
        return None
    return ResolvedIcon(domain=domain, icon_src=ICON_SERVICE_TEMPLATE.format(domain=domain))


def _cap(number: Union[int, float]) -> int:
    # Out-of-range values saturate; infinities and NaN become 0.
    if isinstance(number, float):
        if not math.isfinite(number):
            return 0
        if number >= _INT_MAX:
            return _INT_MAX
        if number <= _INT_MIN:
            return _INT_MIN
        return int(number)
    return int(max(_INT_MIN, min(_INT_MAX, number)))


def parse_size(value: Any) -> int:
    """
    Integer-cast a size attribute.

    The leading numeric prefix is honoured ("32px" -> 32, "3.9" -> 3,
    "1e3" -> 1000); anything else is 0. Huge values saturate instead of failing.
    """
    if isinstance(value, (bool, int, float)):
        return _cap(value)
    match = _LEADING_NUMBER.match(str(value or ""))
    if not match:
        return 0
    token = match.group(1)
    unsigned = token.lstrip("+-")
    if unsigned.isdigit():
        digits = unsigned.lstrip("0") or "0"
        if len(digits) <= 19:
            return _cap(int(f"-{digits}" if token.startswith("-") else digits))
    return _cap(float(token))


def decide_size(value: Any) -> SizeDecision:
    pixels = parse_size(value)
    if pixels > 0:
        return FixedSize(pixels)
    return AutoSize()


def _normalize(attrs: Union[RenderRequest, Mapping[str, Any], None]) -> RenderRequest:
    if isinstance(attrs, RenderRequest):
        return attrs
    return RenderRequest.model_validate(dict(attrs or {}))


def render(attrs: Union[RenderRequest, Mapping[str, Any], None]) -> RenderResult:
    """
    Render one favicon link.

    Returns an empty result (``markup == ""``, ``needs_styles`` False) when the
    URL has no host; that is the only failure and it is silent.
    """
    request = _normalize(attrs)

    icon = resolve_icon(request.url)
    if icon is None:
        return _EMPTY

    link_text = request.text or icon.domain
    size = decide_size(request.size)

    # decoding="async" and fetchpriority="low" keep the icon off the critical path.
    markup = (
        f'<a href="{esc_url(request.url)}" class="{CSS_CLASS}" rel="noopener noreferrer" target="_blank">'
        f'<img loading="lazy" decoding="async" fetchpriority="low" src="{esc_url(icon.icon_src)}" alt=""'
        f"{size.dimension_attrs()}{size.inline_style()} /> {esc_html(link_text)}"
        "</a>"
    )
    return RenderResult(markup, True)
