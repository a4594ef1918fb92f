from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

import markdown

from mdsite.toc import DEFAULT_TOC_HEADING, insert_toc

_FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(?:.*?\r?\n)??(?:---|\.\.\.)[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)


@dataclass(frozen=True)
class TocOptions:
    enabled: bool = True
    max_depth: int = 4
    ordered: bool = True
    heading: str = DEFAULT_TOC_HEADING


@dataclass(frozen=True)
class ConverterOptions:
    front_matter: bool = True
    tables: bool = True
    strikethrough: bool = True
    autolinks: bool = True
    tasklists: bool = True
    math: bool = True
    toc: TocOptions = field(default_factory=TocOptions)


def strip_front_matter(text: str) -> str:
    """Drop a leading ``---`` delimited metadata block, if it is closed."""
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return text
    return text[match.end():]


def _extensions(options: ConverterOptions) -> tuple[list[str], dict[str, dict[str, Any]]]:
    extensions = ["fenced_code"]
    configs: dict[str, dict[str, Any]] = {}

    if options.tables:
        extensions.append("tables")
    if options.strikethrough:
        extensions.append("pymdownx.tilde")
        configs["pymdownx.tilde"] = {"subscript": False}
    if options.autolinks:
        extensions.append("pymdownx.magiclink")
    if options.tasklists:
        extensions.append("pymdownx.tasklist")
    if options.toc.enabled:
        # heading ids for the generated navigation; no [TOC] marker
        extensions.append("toc")
        configs["toc"] = {"marker": ""}
    if options.math:
        extensions.append("pymdownx.arithmatex")
        configs["pymdownx.arithmatex"] = {"generic": True}

    return extensions, configs


class MarkdownConverter:
    def __init__(self, options: ConverterOptions):
        self.options = options
        extensions, configs = _extensions(options)
        self._md = markdown.Markdown(
            extensions=extensions,
            extension_configs=configs,
            output_format="html",
        )

    @property
    def extensions(self) -> list[str]:
        return _extensions(self.options)[0]

    def convert(self, text: str) -> str:
        if self.options.front_matter:
            text = strip_front_matter(text)
        self._md.reset()
        fragment = self._md.convert(text)
        toc = self.options.toc
        if toc.enabled:
            fragment = insert_toc(
                fragment,
                heading=toc.heading,
                max_depth=toc.max_depth,
                ordered=toc.ordered,
            )
        return fragment


def build_converter(options: ConverterOptions | None = None) -> MarkdownConverter:
    return MarkdownConverter(options or ConverterOptions())
