from __future__ import annotations

import html
import logging
from pathlib import Path

from mdsite.converter import MarkdownConverter
from mdsite.discover import ConversionJob

LOG = logging.getLogger(__name__)

DEFAULT_STYLESHEET = "style.css"

MATHJAX_SRC = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"

# arithmatex generic output: typeset only its spans and divs
_MATHJAX_HEAD = [
    "\t<script>\n"
    "\twindow.MathJax = {options: {ignoreHtmlClass: '.*|', processHtmlClass: 'arithmatex'}};\n"
    "\t</script>",
    f'\t<script id="MathJax-script" async src="{MATHJAX_SRC}"></script>',
]


def render_page(
    title: str,
    content: str,
    *,
    stylesheet: str | None = DEFAULT_STYLESHEET,
    lang: str = "en",
    math: bool = False,
) -> str:
    head = [
        '\t<meta charset="UTF-8">',
        '\t<meta http-equiv="X-UA-Compatible" content="IE=edge">',
        '\t<meta name="viewport" content="width=device-width, initial-scale=1.0">',
    ]
    if stylesheet:
        head.append(f'\t<link rel="stylesheet" href="{html.escape(stylesheet)}">')
    if math:
        head.extend(_MATHJAX_HEAD)
    head.append(f"\t<title>{html.escape(title, quote=False)}</title>")

    return (
        "<!DOCTYPE html>\n"
        f'<html lang="{html.escape(lang)}">\n'
        "<head>\n"
        + "\n".join(head)
        + "\n</head>\n"
        "<body>\n"
        f"{content}\n"
        "</body>\n"
        "</html>"
    )


def _html_path(path: Path) -> Path:
    if path.name.endswith(".html"):
        return path
    return path.with_name(path.name + ".html")


def build_page(
    job: ConversionJob,
    converter: MarkdownConverter,
    *,
    stylesheet: str | None = DEFAULT_STYLESHEET,
    lang: str = "en",
) -> Path:
    text = job.input_path.read_text(encoding="utf-8")
    fragment = converter.convert(text)
    math = converter.options.math and 'class="arithmatex"' in fragment
    document = render_page(job.title, fragment, stylesheet=stylesheet, lang=lang, math=math)

    out_path = _html_path(job.output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(document, encoding="utf-8")
    LOG.debug("%s -> %s", job.input_path, out_path)
    return out_path
