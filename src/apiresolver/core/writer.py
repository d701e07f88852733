"""Module for serializing resolved OpenAPI documents."""

import json
from pathlib import Path

import yaml

from apiresolver.config import FileFormat


class NoAliasDumper(yaml.SafeDumper):
    """
    YAML dumper that never emits anchors or aliases.

    Dereferencing inlines the same schema object in many places, and PyYAML
    would otherwise collapse those repeats into &id001 / *id001 pairs.
    """

    def ignore_aliases(self, data):
        return True


def dump_spec(data: dict, format: FileFormat) -> str:
    """
    Serialize a document to JSON or YAML text.

    Raises:
        ValueError: If an unsupported FileFormat is provided
    """
    if format == FileFormat.JSON:
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"

    if format == FileFormat.YAML:
        return yaml.dump(
            data,
            Dumper=NoAliasDumper,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            indent=2,
        )

    raise ValueError(f"Unsupported file format: {format}")


def write_spec(data: dict, path: Path, format: FileFormat) -> None:
    """
    Write a document to a JSON or YAML file, creating parent directories.

    Raises:
        ValueError: If an unsupported FileFormat is provided
        IOError: If writing to the file fails
    """
    text = dump_spec(data, format)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def format_for_path(path: Path, default: FileFormat) -> FileFormat:
    """Pick the output format from a file suffix, falling back to ``default``."""
    suffix = path.suffix.lower()
    if suffix == ".json":
        return FileFormat.JSON
    if suffix in (".yaml", ".yml"):
        return FileFormat.YAML
    return default
