"""Configuration constants, enums and the resolver config file."""

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

CONFIG_FILENAME = ".apiresolver.yaml"

SCHEMA_REF_PREFIX = "#/components/schemas/"
CIRCULAR_MARKER = "_circular"


class FileFormat(Enum):
    """Enum representing the format of an OpenAPI specification file."""

    JSON = "json"
    YAML = "yaml"


class ResolverConfig(BaseModel):
    """Configuration model for reference resolution."""

    strict_refs: bool = Field(
        default=False,
        description="Raise instead of keeping references that are missing from the index",
    )
    output_format: FileFormat | None = Field(
        default=None, description="Format of resolved output (defaults to the input format)"
    )
    simplify_schemas: bool = Field(
        default=True, description="Show the compact display form of named schemas"
    )


def get_config_path(target_dir: Path) -> Path:
    """Get the path to the config file in the target directory."""
    return target_dir / CONFIG_FILENAME


def load_config(target_dir: Path) -> ResolverConfig:
    """
    Load configuration from .apiresolver.yaml file.
    Returns default config if file doesn't exist.
    """
    config_path = get_config_path(target_dir)
    if not config_path.exists():
        return ResolverConfig()
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return ResolverConfig(**data)


def save_config(target_dir: Path, config: ResolverConfig) -> bool:
    """
    Save configuration to .apiresolver.yaml file.
    Only writes if file doesn't exist (preserves user edits).
    Returns True if created, False if already existed.
    """
    config_path = get_config_path(target_dir)
    if config_path.exists():
        return False
    config_path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json", exclude_none=True)
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
    return True
