from __future__ import annotations

import logging
from pathlib import Path

from mdsite.config import SiteConfig
from mdsite.converter import build_converter
from mdsite.discover import ConversionJob, discover_jobs, job_for_file
from mdsite.page import build_page

LOG = logging.getLogger(__name__)


def _build_jobs(jobs: list[ConversionJob], config: SiteConfig) -> list[Path]:
    converter = build_converter(config.converter)
    LOG.debug("Converter extensions: %s", ", ".join(converter.extensions))
    pages = []
    for job in jobs:
        pages.append(
            build_page(job, converter, stylesheet=config.stylesheet, lang=config.lang)
        )
    return pages


def build_site(config: SiteConfig) -> dict[str, object]:
    """Convert every file under ``config.input_dir`` into ``config.output_dir``.

    Pages are built one at a time in discovery order and the first failure
    propagates, leaving earlier pages written.
    """
    input_dir = Path(config.input_dir)
    output_dir = Path(config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    if input_dir.is_file():
        jobs = [job_for_file(input_dir, output_dir)]
    else:
        jobs = discover_jobs(input_dir, output_dir, sort_entries=config.sort_entries)
    LOG.debug("Discovered %d files under %s", len(jobs), input_dir)

    pages = _build_jobs(jobs, config)
    LOG.info("Built %d pages -> %s", len(pages), output_dir)
    return {
        "status": "ok",
        "input_dir": str(input_dir),
        "output_dir": str(output_dir),
        "page_count": len(pages),
        "pages": [str(page) for page in pages],
    }
