"""Locate link-preview fields inside raw HTML without parsing it.

Every lookup finds a literal marker, cuts a bounded window of text around it
and searches backwards inside that window for the start of the enclosing tag.
Attribute order inside the tag does not matter, but a tag whose start lies
outside the window is reported as not found.

Windows are measured in characters. ``str`` indexes by code point, so a
window edge never falls inside a multi-byte character.
"""

from collections.abc import Sequence

META_WINDOW_BEFORE = 200
META_WINDOW_AFTER = 300
LINK_WINDOW_BEFORE = 300
LINK_WINDOW_AFTER = 100

DEFAULT_FAVICON_RELS: tuple[str, ...] = ("icon", "shortcut icon", "apple-touch-icon")

# Applied in order. "&amp;" goes first, so "&amp;lt;" is decoded twice to "<".
_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&apos;", "'"),
)


def decode_entities(text: str) -> str:
    """Decode the handful of entities expected in titles and descriptions.

    Anything else (``&eacute;``, ``&#233;`` ...) is left untouched.
    """
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


def search_window(text: str, index: int, before: int, after: int) -> tuple[int, int]:
    """Return ``(start, end)`` of the window around ``index``, clamped to ``text``."""
    start = max(index - before, 0)
    end = min(index + after, len(text))
    return start, end


def _attribute_value(tag: str, attribute: str) -> str | None:
    marker = f'{attribute}="'
    start = tag.find(marker)
    if start == -1:
        return None
    start += len(marker)
    end = tag.find('"', start)
    if end == -1:
        return None
    return tag[start:end] or None


def _tag_attribute(
    html: str,
    marker: str,
    tag_open: str,
    attribute: str,
    before: int,
    after: int,
) -> str | None:
    """Read ``attribute`` from the ``tag_open`` tag enclosing the first ``marker``."""
    position = html.find(marker)
    if position == -1:
        return None

    start, end = search_window(html, position, before, after)
    window = html[start:end]
    marker_at = position - start
    tag_start = window.rfind(tag_open, 0, marker_at)
    if tag_start == -1:
        return None

    tag = window[tag_start:]
    tag_end = tag.find(">")
    if tag_end != -1:
        # A tag closed before the marker is a neighbour, not the enclosing tag.
        if tag_start + tag_end < marker_at:
            return None
        tag = tag[:tag_end]
    return _attribute_value(tag, attribute)


def find_meta_content(
    html: str,
    name: str,
    before: int = META_WINDOW_BEFORE,
    after: int = META_WINDOW_AFTER,
) -> str | None:
    """Return the decoded ``content`` of the first ``<meta property="name">``."""
    value = _tag_attribute(html, f'property="{name}"', "<meta", "content", before, after)
    if value is None:
        return None
    return decode_entities(value)


def find_title(html: str) -> str | None:
    """Return the stripped, decoded text of the first ``<title>`` element."""
    open_at = html.find("<title")
    if open_at == -1:
        return None
    text_start = html.find(">", open_at)
    if text_start == -1:
        return None
    text_start += 1
    text_end = html.find("</title>", text_start)
    if text_end == -1:
        return None

    title = html[text_start:text_end].strip()
    if not title:
        return None
    return decode_entities(title)


def find_favicon_href(
    html: str,
    rels: Sequence[str] = DEFAULT_FAVICON_RELS,
    before: int = LINK_WINDOW_BEFORE,
    after: int = LINK_WINDOW_AFTER,
) -> str | None:
    """Return the raw ``href`` of the highest-priority icon ``<link>``.

    Each rel value is looked up across the whole document before moving on to
    the next one, so priority beats document order. The href is returned as
    written and may still be relative.
    """
    for rel in rels:
        href = _tag_attribute(html, f'rel="{rel}"', "<link", "href", before, after)
        if href is not None:
            return href
    return None
