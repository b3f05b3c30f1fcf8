"""HTML sanitizer for comment bodies.

Everything is HTML-encoded first, then a fixed allow-list of tags is
decoded back to live markup:

- ``<code>``, ``<i>``, ``<strong>`` are restored without attributes.
- ``<a>`` keeps only ``href`` and ``title``; values are re-encoded and
  script-capable URL schemes are dropped.
- Closing tags never carry attributes.
- Any other tag is removed while the text around it stays.

Tags are not balanced or repaired: ``<a><a>`` stays ``<a><a>``. This is a
whitelist re-encoder over regular expressions, not an HTML parser.
"""

import html
import re

from .base import Service

ALLOWED_TAGS = frozenset({"a", "code", "i", "strong"})
ANCHOR_ATTRIBUTES = ("href", "title")
UNSAFE_URL_SCHEMES = ("javascript:", "vbscript:", "data:")

_ENCODED_TAG = re.compile(
    r"&lt;(/?)([A-Za-z][A-Za-z0-9]*)((?:\s.*?)?)\s*/?&gt;", re.DOTALL
)
_ATTRIBUTE = re.compile(
    r"""([A-Za-z_:][-A-Za-z0-9_:.]*)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))"""
)
_URL_NOISE = re.compile(r"[\x00-\x20]+")


def _is_safe_url(url: str) -> bool:
    normalized = _URL_NOISE.sub("", html.unescape(url)).lower()
    return not normalized.startswith(UNSAFE_URL_SCHEMES)


def _anchor_attributes(raw: str) -> dict[str, str]:
    """Pick href/title out of decoded attribute text, first occurrence wins."""
    kept: dict[str, str] = {}
    for match in _ATTRIBUTE.finditer(raw):
        name = match.group(1).lower()
        if name not in ANCHOR_ATTRIBUTES or name in kept:
            continue
        value = next(v for v in match.group(2, 3, 4) if v is not None)
        if name == "href" and not _is_safe_url(value):
            continue
        kept[name] = value
    return kept


def _rewrite_tag(match: re.Match) -> str:
    closing, name, attributes = match.group(1), match.group(2).lower(), match.group(3)
    if name not in ALLOWED_TAGS:
        return ""
    if closing:
        return f"</{name}>"
    if name != "a":
        return f"<{name}>"

    kept = _anchor_attributes(html.unescape(attributes))
    rendered = "".join(
        f' {attr}="{html.escape(kept[attr], quote=True)}"'
        for attr in ANCHOR_ATTRIBUTES
        if attr in kept
    )
    return f"<a{rendered}>"


def sanitize(text: str) -> str:
    """Return ``text`` as safe HTML limited to a, code, i and strong."""
    encoded = html.escape(text, quote=True)
    return _ENCODED_TAG.sub(_rewrite_tag, encoded)


class HtmlSanitizer(Service):
    """Injectable wrapper around :func:`sanitize`."""

    def sanitize(self, text: str) -> str:
        return sanitize(text)
