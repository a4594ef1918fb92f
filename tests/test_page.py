from __future__ import annotations

from pathlib import Path

import pytest

from mdsite.converter import build_converter
from mdsite.discover import ConversionJob
from mdsite.page import MATHJAX_SRC, build_page, render_page


def test_render_page_shell():
    page = render_page("Hello World", "<p>hi</p>")

    assert page.startswith("<!DOCTYPE html>\n<html lang=\"en\">\n<head>\n")
    assert '<meta charset="UTF-8">' in page
    assert '<meta http-equiv="X-UA-Compatible" content="IE=edge">' in page
    assert '<meta name="viewport" content="width=device-width, initial-scale=1.0">' in page
    assert '<link rel="stylesheet" href="style.css">' in page
    assert "<title>Hello World</title>" in page
    assert page.endswith("<body>\n<p>hi</p>\n</body>\n</html>")


def test_render_page_without_stylesheet_and_custom_lang():
    page = render_page("Accueil", "", stylesheet=None, lang="fr")
    assert "<link" not in page
    assert '<html lang="fr">' in page


def test_render_page_escapes_title():
    assert "<title>Q&amp;A <draft></title>" not in render_page("Q&A <draft>", "")
    assert "<title>Q&amp;A &lt;draft&gt;</title>" in render_page("Q&A <draft>", "")


def test_build_page_writes_document(tmp_path: Path) -> None:
    src = tmp_path / "getting_started.md"
    src.write_text("# Start\n\nRun <kbd>make</kbd>.\n", encoding="utf-8")
    job = ConversionJob(
        title="Getting Started",
        input_path=src,
        output_path=tmp_path / "public" / "nested" / "getting_started.html",
    )

    out_path = build_page(job, build_converter())

    assert out_path == job.output_path
    document = out_path.read_text(encoding="utf-8")
    assert "<title>Getting Started</title>" in document
    assert '<h1 id="start">Start</h1>' in document
    assert "<kbd>make</kbd>" in document


def test_build_page_appends_html_suffix(tmp_path: Path) -> None:
    src = tmp_path / "page.md"
    src.write_text("text\n", encoding="utf-8")
    job = ConversionJob(title="Page", input_path=src, output_path=tmp_path / "out" / "page")

    out_path = build_page(job, build_converter(), stylesheet=None)

    assert out_path == tmp_path / "out" / "page.html"
    assert out_path.exists()


def test_build_page_overwrites_existing_output(tmp_path: Path) -> None:
    src = tmp_path / "page.md"
    src.write_text("new\n", encoding="utf-8")
    out = tmp_path / "page.html"
    out.write_text("old", encoding="utf-8")

    build_page(ConversionJob(title="Page", input_path=src, output_path=out), build_converter())

    assert "<p>new</p>" in out.read_text(encoding="utf-8")


def test_build_page_missing_input(tmp_path: Path) -> None:
    job = ConversionJob(title="Gone", input_path=tmp_path / "gone.md", output_path=tmp_path / "gone.html")
    with pytest.raises(FileNotFoundError):
        build_page(job, build_converter())


def test_build_page_rejects_non_utf8(tmp_path: Path) -> None:
    src = tmp_path / "logo.png"
    src.write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe")
    job = ConversionJob(title="Logo", input_path=src, output_path=tmp_path / "logo.html")
    with pytest.raises(UnicodeDecodeError):
        build_page(job, build_converter())
    assert not job.output_path.exists()


def test_build_page_loads_math_renderer(tmp_path: Path) -> None:
    src = tmp_path / "physics.md"
    src.write_text("Energy $E=mc^2$\n\n$$\na+b\n$$\n", encoding="utf-8")
    job = ConversionJob(title="Physics", input_path=src, output_path=tmp_path / "physics.html")

    document = build_page(job, build_converter()).read_text(encoding="utf-8")

    assert f'<script id="MathJax-script" async src="{MATHJAX_SRC}"></script>' in document
    assert "processHtmlClass: 'arithmatex'" in document
    assert r'<span class="arithmatex">\(E=mc^2\)</span>' in document


def test_build_page_without_math_has_no_script(tmp_path: Path) -> None:
    src = tmp_path / "plain.md"
    src.write_text("No formulas here.\n", encoding="utf-8")
    job = ConversionJob(title="Plain", input_path=src, output_path=tmp_path / "plain.html")

    assert "<script" not in build_page(job, build_converter()).read_text(encoding="utf-8")
