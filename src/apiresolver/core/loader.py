"""Module for loading OpenAPI specification files and text."""

import json
import logging
from pathlib import Path

import yaml

from apiresolver.config import FileFormat

logger = logging.getLogger(__name__)


def load_spec(path: Path) -> tuple[dict, FileFormat]:
    """
    Load an OpenAPI specification from a JSON or YAML file.

    Args:
        path: Path to the OpenAPI specification file (.json, .yaml, or .yml)

    Returns:
        A tuple of (parsed_dict, FileFormat)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file extension is not supported or the document is not a mapping
        json.JSONDecodeError: If JSON parsing fails
        yaml.YAMLError: If YAML parsing fails
    """
    if not path.exists():
        raise FileNotFoundError(f"OpenAPI file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == ".json":
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        file_format = FileFormat.JSON
    elif suffix in (".yaml", ".yml"):
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        file_format = FileFormat.YAML
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Expected .json, .yaml, or .yml")

    if not isinstance(data, dict):
        raise ValueError(f"OpenAPI document must be a mapping, got {type(data).__name__}")

    return data, file_format


def parse_spec(text: str) -> dict | None:
    """
    Parse an OpenAPI specification from YAML or JSON text.

    JSON is a subset of YAML, so a single safe_load covers both.

    Returns:
        The parsed document, or None if the text cannot be parsed or is not a mapping
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.debug("Could not parse specification text: %s", e)
        return None
    return data if isinstance(data, dict) else None
