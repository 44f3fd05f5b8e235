"""Serialize OpenAPI documents to YAML or JSON."""

import json
from pathlib import Path

import yaml
from openapi_pydantic.v3.v3_0 import OpenAPI

FORMATS = ("yaml", "json")


def detect_format(file_path: Path) -> str:
    """Pick the output format from a file suffix.

    Returns: 'yaml' or 'json'.
    """
    suffix = file_path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return "yaml"
    if suffix == ".json":
        return "json"
    raise ValueError(f"Cannot infer document format from {file_path.name!r}")


def to_dict(document: OpenAPI) -> dict:
    return document.model_dump(mode="json", by_alias=True, exclude_none=True, exclude_unset=True)


def dump_document(document: OpenAPI, fmt: str = "yaml") -> str:
    data = to_dict(document)
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    raise ValueError(f"Unknown document format {fmt!r}, expected one of {FORMATS}")


def write_document(document: OpenAPI, file_path: Path) -> Path:
    """Write `document` to `file_path` in the format its suffix names."""
    text = dump_document(document, detect_format(file_path))
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(text, encoding="utf-8")
    return file_path
