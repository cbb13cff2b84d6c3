"""Flattening of mixed text/markup content into plain strings.

Infobox values such as ``Lausanne, <a>Switzerland</a><sup>[1]</sup>`` mix
bare text with links and inline formatting.  :func:`render_mixed` keeps the
readable parts (text, link text, italic text with its own links) and drops
everything else (footnote markers, images, hidden spans).
"""

from __future__ import annotations

from bs4 import Comment, NavigableString, Tag

_ANCHOR = "a"
_ITALIC = "i"


def _normalise(text: str) -> str:
    return " ".join(text.split())


def _is_text(node: object) -> bool:
    # Comments, CDATA, doctype etc. are NavigableString subclasses too.
    return isinstance(node, NavigableString) and type(node) is NavigableString


def text_of(tag: Tag | None) -> str:
    """Return the whitespace-normalised text of *tag* and all its descendants."""
    if tag is None:
        return ""
    return _normalise(tag.get_text())


def own_text(tag: Tag) -> str:
    """Return only the text held directly by *tag*, ignoring child elements."""
    return _normalise("".join(str(child) for child in tag.children if _is_text(child)))


def _fragments(tag: Tag, depth: int) -> list[str]:
    parts: list[str] = []
    for child in tag.children:
        if isinstance(child, Comment):
            continue
        if _is_text(child):
            parts.append(str(child))
        elif isinstance(child, Tag):
            if child.name == _ANCHOR:
                parts.append(child.get_text())
            elif child.name == _ITALIC and depth > 0:
                parts.extend(_fragments(child, depth - 1))
    return parts


def render_mixed(tag: Tag | None) -> str:
    """Concatenate the readable inline content of *tag* in document order.

    Direct text children and direct ``<a>`` children contribute their text.
    A direct ``<i>`` child contributes its own text and ``<a>`` children; the
    walk goes no deeper than that one italic level.
    """
    if tag is None:
        return ""
    return _normalise("".join(_fragments(tag, depth=1)))


def mixed_links(tag: Tag | None) -> list[Tag]:
    """Return the ``<a>`` elements reachable by :func:`render_mixed`.

    That is every direct ``<a>`` child of *tag* plus every ``<a>`` directly
    inside a direct ``<i>`` child, in document order.  Anchors without an
    ``href`` are left out.
    """
    if tag is None:
        return []
    anchors: list[Tag] = []
    for child in tag.children:
        if not isinstance(child, Tag):
            continue
        if child.name == _ANCHOR:
            candidates = [child]
        elif child.name == _ITALIC:
            candidates = child.find_all(_ANCHOR, recursive=False)
        else:
            continue
        anchors.extend(a for a in candidates if a.get("href"))
    return anchors
