from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from mdsite.config import default_config, load_config
from mdsite.site import build_site


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert a Markdown tree into standalone HTML pages",
        epilog=(
            "Default directories are resolved against the project root when run as "
            "scripts/build_site.py, and against the current directory when run as "
            "mdsite-build."
        ),
    )
    parser.add_argument("input_dir", nargs="?", help="Markdown root directory or a single file (default: <root>/markdown)")
    parser.add_argument("output_dir", nargs="?", help="HTML output directory (default: <root>/public)")
    parser.add_argument("--config", help="YAML build configuration file")
    stylesheet = parser.add_mutually_exclusive_group()
    stylesheet.add_argument("--stylesheet", help="Stylesheet href linked from every page")
    stylesheet.add_argument(
        "--no-stylesheet",
        action="store_true",
        help="Do not link a stylesheet",
    )
    parser.add_argument("--no-math", action="store_true", help="Disable $...$ math rendering")
    parser.add_argument(
        "--unsorted",
        action="store_true",
        help="Keep directory listing order instead of sorting entries by name",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def main(argv: list[str] | None = None, *, root: Path | None = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(
        level=_log_level(args.verbose),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = default_config(root or Path.cwd())
    if args.config:
        config = load_config(Path(args.config), config)

    if args.input_dir:
        config = replace(config, input_dir=Path(args.input_dir).expanduser().resolve())
    if args.output_dir:
        config = replace(config, output_dir=Path(args.output_dir).expanduser().resolve())
    if args.stylesheet:
        config = replace(config, stylesheet=args.stylesheet)
    if args.no_stylesheet:
        config = replace(config, stylesheet=None)
    if args.unsorted:
        config = replace(config, sort_entries=False)
    if args.no_math:
        config = replace(config, converter=replace(config.converter, math=False))

    build_site(config)
    return 0
