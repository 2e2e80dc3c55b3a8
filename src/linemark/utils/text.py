"""Text escaping helpers shared by the renderer."""

from __future__ import annotations

import html as html_module
import re

# Existing character references are passed through untouched
_BARE_AMPERSAND = re.compile(r"&(?!#[0-9]+;|#[xX][0-9a-fA-F]+;|[A-Za-z][A-Za-z0-9]*;)")


def escape_text(text: str) -> str:
    """Escape text content for HTML output.

    ``<`` and ``>`` are always escaped. ``&`` is escaped unless it starts a
    character reference such as ``&amp;`` or ``&#169;``.

    Examples:
        >>> escape_text("AT&T <b>")
        'AT&amp;T &lt;b&gt;'
        >>> escape_text("&copy; 2011")
        '&copy; 2011'
    """
    if not text:
        return ""
    text = _BARE_AMPERSAND.sub("&amp;", text)
    return text.replace("<", "&lt;").replace(">", "&gt;")


def escape_html(text: str) -> str:
    """Escape text for use inside a double-quoted attribute value.

    Examples:
        >>> escape_html('say "hi"')
        'say &quot;hi&quot;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=True).replace("&#x27;", "'")


def escape_code(text: str) -> str:
    """Escape code for HTML output; every ``&`` is escaped.

    Examples:
        >>> escape_code("a && b < c")
        'a &amp;&amp; b &lt; c'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False)
