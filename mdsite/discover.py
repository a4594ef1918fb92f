from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from mdsite.titles import format_title, remove_extension


@dataclass(frozen=True)
class ConversionJob:
    title: str
    input_path: Path
    output_path: Path


def _make_job(name: str, rel_dirs: tuple[str, ...], input_dir: Path, output_dir: Path) -> ConversionJob:
    return ConversionJob(
        title=format_title(name),
        input_path=input_dir.joinpath(*rel_dirs, name),
        output_path=output_dir.joinpath(*rel_dirs, remove_extension(name) + ".html"),
    )


def _scan(directory: Path, sort_entries: bool) -> list[os.DirEntry]:
    with os.scandir(directory) as it:
        entries = list(it)
    if sort_entries:
        entries.sort(key=lambda entry: entry.name)
    return entries


def discover_jobs(
    input_dir: Path,
    output_dir: Path,
    *,
    sort_entries: bool = True,
) -> list[ConversionJob]:
    """Collect one job per regular file under ``input_dir``, recursively.

    Files of a directory come before the jobs of its subdirectories. With
    ``sort_entries=False`` the platform listing order is kept. Symlinks and
    special files are skipped; an unlistable directory raises ``OSError``.
    """
    input_dir = Path(input_dir)
    output_dir = Path(output_dir)

    def _walk(rel_dirs: tuple[str, ...]) -> list[ConversionJob]:
        entries = _scan(input_dir.joinpath(*rel_dirs), sort_entries)
        jobs = [
            _make_job(entry.name, rel_dirs, input_dir, output_dir)
            for entry in entries
            if entry.is_file(follow_symlinks=False)
        ]
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                jobs.extend(_walk(rel_dirs + (entry.name,)))
        return jobs

    return _walk(())


def job_for_file(input_path: Path, output_dir: Path) -> ConversionJob:
    input_path = Path(input_path)
    if not input_path.is_file():
        raise FileNotFoundError(f"Markdown file not found: {input_path}")
    return _make_job(input_path.name, (), input_path.parent, Path(output_dir))
