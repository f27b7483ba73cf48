"""Shortcode registry and parser.

Content like ``[favlink url="https://example.com" text="Example"]`` is
rewritten by calling the handler registered for the tag with the parsed
attributes. Supported forms::

    [tag a="1" b='2' c=3 positional]
    [tag a="1" /]
    [tag a="1"]inner content[/tag]
    [[tag]]        -> literal "[tag]"
"""
import re
from typing import Callable, Dict, List, Optional

from favlink.exceptions import ShortcodeTagError

ShortcodeHandler = Callable[[Dict[str, str], Optional[str], str], str]

_INVALID_TAG_CHARS = re.compile(r"[<>&/\[\]\x00-\x20=]")

_ATTS_PATTERN = re.compile(
    r"""([\w-]+)\s*=\s*"([^"]*)"(?:\s|$)"""
    r"""|([\w-]+)\s*=\s*'([^']*)'(?:\s|$)"""
    r"""|([\w-]+)\s*=\s*([^\s'"]+)(?:\s|$)"""
    r"""|"([^"]*)"(?:\s|$)"""
    r"""|'([^']*)'(?:\s|$)"""
    r"""|(\S+)(?:\s|$)"""
)
_NBSP = re.compile("[\u00a0\u200b]+")
_BALANCED_HTML = re.compile(r"^[^<]*(?:<[^>]*>[^<]*)*$")


def parse_atts(text: str) -> Dict[str, str]:
    """Parse the attribute part of a shortcode tag.

    Named attributes are lower-cased; bare values are keyed by position
    ("0", "1", ...). Values that open an HTML tag without closing it are
    blanked.
    """
    text = _NBSP.sub(" ", text)
    atts: Dict[str, str] = {}
    position = 0

    for match in _ATTS_PATTERN.finditer(text):
        groups = match.groups()
        for name_idx in (0, 2, 4):
            if groups[name_idx]:
                atts[groups[name_idx].lower()] = groups[name_idx + 1]
                break
        else:
            for value_idx in (6, 7, 8):
                if groups[value_idx]:
                    atts[str(position)] = groups[value_idx]
                    position += 1
                    break

    for key, value in atts.items():
        if "<" in value and not _BALANCED_HTML.match(value):
            atts[key] = ""

    return atts


class ShortcodeRegistry:
    """Maps shortcode tags to handlers and expands them in content."""

    def __init__(self) -> None:
        self._handlers: Dict[str, ShortcodeHandler] = {}
        self._pattern: Optional[re.Pattern[str]] = None

    def add(self, tag: str, handler: ShortcodeHandler) -> None:
        if not tag.strip():
            raise ShortcodeTagError("Invalid shortcode name: empty name given.")
        if _INVALID_TAG_CHARS.search(tag):
            raise ShortcodeTagError(
                "Invalid shortcode name. Do not use spaces or reserved characters: & / < > [ ] =",
                tag=tag,
            )
        self._handlers[tag] = handler
        self._pattern = None

    def remove(self, tag: str) -> None:
        self._handlers.pop(tag, None)
        self._pattern = None

    def has(self, tag: str) -> bool:
        return tag in self._handlers

    @property
    def tags(self) -> List[str]:
        return list(self._handlers)

    def _regex(self) -> re.Pattern[str]:
        if self._pattern is None:
            tag_regexp = "|".join(re.escape(tag) for tag in self._handlers)
            self._pattern = re.compile(
                r"\[(\[?)"                       # 1: [[ escape
                rf"({tag_regexp})(?![\w-])"       # 2: tag
                r"([^\]/]*(?:/(?!\])[^\]/]*)*?)"  # 3: attributes
                r"(?:(/)\]"                      # 4: self-closing
                r"|\](?:([^\[]*(?:\[(?!/\2\])[^\[]*)*)\[/\2\])?)"  # 5: enclosed content
                r"(\]?)",                        # 6: ]] escape
                re.DOTALL,
            )
        return self._pattern

    def _expand(self, match: re.Match) -> str:
        if match.group(1) == "[" and match.group(6) == "]":
            return match.group(0)[1:-1]

        tag = match.group(2)
        handler = self._handlers[tag]
        attrs = parse_atts(match.group(3))
        output = handler(attrs, match.group(5), tag)
        return f"{match.group(1)}{output}{match.group(6)}"

    def do_shortcode(self, content: str) -> str:
        """Expand every registered shortcode in content."""
        if "[" not in content or not self._handlers:
            return content
        if not any(f"[{tag}" in content for tag in self._handlers):
            return content
        return self._regex().sub(self._expand, content)
