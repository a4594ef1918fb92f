from __future__ import annotations

import re

from bs4 import BeautifulSoup, Tag
from markdown.extensions.toc import slugify

DEFAULT_TOC_HEADING = r"toc|(table[ -]of[ -])?contents?|contents"

_HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}


def _text(node) -> str:
    return " ".join(node.get_text(" ", strip=True).split())


def _depth(node: Tag) -> int:
    return int(node.name[1])


def _anchor(node: Tag) -> str:
    anchor = node.get("id")
    if not anchor:
        anchor = slugify(_text(node), "-")
        node["id"] = anchor
    return anchor


def _build_list(soup: BeautifulSoup, entries: list[tuple[int, str, str]], ordered: bool) -> Tag:
    list_tag = "ol" if ordered else "ul"
    base = min(depth for depth, _, _ in entries)
    root = soup.new_tag(list_tag)

    for depth, text, anchor in entries:
        parent = root
        # descend into the last item per level, padding with empty items
        for _ in range(depth - base):
            items = parent.find_all("li", recursive=False)
            if items:
                tail = items[-1]
            else:
                tail = soup.new_tag("li")
                parent.append(tail)
            nested = tail.find(list_tag, recursive=False)
            if nested is None:
                nested = soup.new_tag(list_tag)
                tail.append(nested)
            parent = nested
        item = soup.new_tag("li")
        link = soup.new_tag("a", href=f"#{anchor}")
        link.string = text
        item.append(link)
        parent.append(item)

    return root


def _line_offsets(html: str) -> list[int]:
    return [0] + [match.end() for match in re.finditer("\n", html)]


def _span(html: str, offsets: list[int], node: Tag) -> tuple[int, int]:
    start = offsets[node.sourceline - 1] + node.sourcepos
    close = re.compile(rf"</{node.name}\s*>", re.IGNORECASE).search(html, start)
    if close is None:
        return start, len(html)
    return start, close.end()


def insert_toc(
    html: str,
    *,
    heading: str = DEFAULT_TOC_HEADING,
    max_depth: int = 4,
    ordered: bool = True,
) -> str:
    """Insert a navigation list after the first heading named like ``heading``.

    Only top-level headings are considered. The list links every later
    heading no deeper than ``max_depth`` and replaces whatever sat between the
    toc heading and the next heading. The rest of the fragment is spliced
    back as written; only headings that lacked an ``id`` are re-serialized.
    The input is returned untouched when there is no toc heading or nothing
    to list.
    """
    pattern = re.compile(rf"^(?:{heading})$", re.IGNORECASE)
    soup = BeautifulSoup(html, "html.parser")
    headings = [node for node in soup.children if getattr(node, "name", None) in _HEADING_TAGS]

    opening = next(
        (pos for pos, node in enumerate(headings) if pattern.match(_text(node))),
        None,
    )
    if opening is None:
        return html

    listed = [
        node
        for node in headings[opening + 1 :]
        if _depth(node) <= max_depth and _text(node)
    ]
    if not listed:
        return html

    offsets = _line_offsets(html)
    edits: list[tuple[int, int, str]] = []
    entries = []
    for node in listed:
        had_id = bool(node.get("id"))
        anchor = _anchor(node)
        if not had_id:
            start, end = _span(html, offsets, node)
            edits.append((start, end, str(node)))
        entries.append((_depth(node), _text(node), anchor))

    open_end = _span(html, offsets, headings[opening])[1]
    section_end = _span(html, offsets, headings[opening + 1])[0]
    toc_list = _build_list(soup, entries, ordered)
    edits.append((open_end, section_end, f"\n{toc_list}\n"))

    for start, end, replacement in sorted(edits, reverse=True):
        html = html[:start] + replacement + html[end:]
    return html
