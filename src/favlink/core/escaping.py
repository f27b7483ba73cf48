"""Escaping for the two HTML contexts the widget writes into."""
import html
import re

ALLOWED_PROTOCOLS = frozenset(
    {
        "http", "https", "ftp", "ftps", "mailto", "news", "irc", "irc6", "ircs",
        "gopher", "nntp", "feed", "telnet", "mms", "rtsp", "sms", "svn", "tel",
        "fax", "xmpp", "webcal", "urn",
    }
)

_UNSAFE_URL_CHARS = re.compile(r"[^a-z0-9\-~+_.?#=!&;,/:%@$|*'()\[\]\x80-\U0010ffff]", re.IGNORECASE)
_ENCODED_BREAKS = ("%0d", "%0a", "%0D", "%0A", "%00")
_SCHEME = re.compile(r"^([a-z0-9]+):", re.IGNORECASE)
_BARE_AMPERSAND = re.compile(r"&(?!(?:#\d+|#x[0-9a-f]+|[a-z][a-z0-9]*);)", re.IGNORECASE)


def esc_html(text: str) -> str:
    """Escape text for an HTML text node or a quoted attribute."""
    return html.escape(text, quote=True)


def _strip_repeated(needles: tuple, subject: str) -> str:
    # Removing one needle can splice another together ("%0%0dd"), so loop.
    found = True
    while found:
        found = False
        for needle in needles:
            if needle in subject:
                subject = subject.replace(needle, "")
                found = True
    return subject


def esc_url(url: str) -> str:
    """
    Clean a URL for use in an ``href``/``src`` attribute.

    Characters outside the URL-safe set are dropped, encoded line breaks are
    stripped and a missing scheme becomes ``http://``. URLs with a scheme
    outside ALLOWED_PROTOCOLS (``javascript:``, ``data:``...) collapse to "".
    """
    url = url.lstrip().replace(" ", "%20")
    url = _UNSAFE_URL_CHARS.sub("", url)
    if not url:
        return ""

    if not url.lower().startswith("mailto:"):
        url = _strip_repeated(_ENCODED_BREAKS, url)
    url = url.replace(";//", "://")

    if ":" not in url and url[0] not in "/#?" and not re.match(r"^[a-z0-9-]+?\.php", url, re.IGNORECASE):
        url = "http://" + url

    if url[0] != "/":
        match = _SCHEME.match(url)
        if match and match.group(1).lower() not in ALLOWED_PROTOCOLS:
            return ""

    url = _BARE_AMPERSAND.sub("&#038;", url)
    url = url.replace("&amp;", "&#038;")
    return url.replace("'", "&#039;")
