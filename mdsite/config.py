from __future__ import annotations

import json
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft7Validator

from mdsite.converter import ConverterOptions, TocOptions
from mdsite.page import DEFAULT_STYLESHEET

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "site_config.schema.json"

_CONVERTER_KEYS = ("front_matter", "tables", "strikethrough", "autolinks", "tasklists", "math")


@dataclass(frozen=True)
class SiteConfig:
    input_dir: Path
    output_dir: Path
    stylesheet: str | None = DEFAULT_STYLESHEET
    lang: str = "en"
    sort_entries: bool = True
    converter: ConverterOptions = field(default_factory=ConverterOptions)


def default_config(root: Path) -> SiteConfig:
    root = Path(root).expanduser().resolve()
    return SiteConfig(input_dir=root / "markdown", output_dir=root / "public")


def _load_schema(schema_path: Path) -> dict:
    return json.loads(schema_path.read_text(encoding="utf-8"))


def validate_config(data: Any, schema_path: Path = SCHEMA_PATH) -> list[str]:
    validator = Draft7Validator(_load_schema(schema_path))
    errors = []
    for err in sorted(validator.iter_errors(data), key=str):
        location = ".".join(str(part) for part in err.absolute_path)
        errors.append(f"{location}: {err.message}" if location else err.message)

    toc = data.get("toc") if isinstance(data, dict) else None
    heading = toc.get("heading") if isinstance(toc, dict) else None
    if isinstance(heading, str):
        try:
            re.compile(heading)
        except re.error as exc:
            errors.append(f"toc.heading: invalid pattern ({exc})")
    return errors


def _resolve(base_dir: Path, value: str) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else (base_dir / path).resolve()


def apply_overrides(base: SiteConfig, data: dict[str, Any], base_dir: Path) -> SiteConfig:
    changes: dict[str, Any] = {}
    if "input_dir" in data:
        changes["input_dir"] = _resolve(base_dir, data["input_dir"])
    if "output_dir" in data:
        changes["output_dir"] = _resolve(base_dir, data["output_dir"])
    for key in ("stylesheet", "lang", "sort_entries"):
        if key in data:
            changes[key] = data[key]

    converter_changes = {key: data[key] for key in _CONVERTER_KEYS if key in data}
    if "toc" in data:
        converter_changes["toc"] = replace(base.converter.toc, **data["toc"])
    if converter_changes:
        changes["converter"] = replace(base.converter, **converter_changes)

    return replace(base, **changes)


def load_config(config_path: Path, base: SiteConfig) -> SiteConfig:
    """Layer a YAML config file over ``base``.

    Relative directories in the file resolve against the file's own
    directory. Raises ``ValueError`` listing every schema violation.
    """
    config_path = Path(config_path).expanduser().resolve()
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    errors = validate_config(data)
    if errors:
        raise ValueError(f"Invalid config {config_path}:\n" + "\n".join(errors))
    return apply_overrides(base, data, config_path.parent)
