"""Template rendering system using Jinja2.

This module loads Jinja2 templates from the resources directory and renders
them into documentation files.
"""

import json
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader


def get_template_dir() -> Path:
    """Get the path to the templates directory."""
    return Path(__file__).parent.parent / "resources"


def to_pretty_json(value: Any) -> str:
    """Jinja2 filter rendering a value as indented JSON."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def create_jinja_env() -> Environment:
    """Create and configure a Jinja2 environment.

    Returns:
        Configured Jinja2 Environment with the templates directory as loader
        and the ``pretty_json`` filter registered.
    """
    template_dir = get_template_dir()
    env = Environment(
        loader=FileSystemLoader(template_dir),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["pretty_json"] = to_pretty_json
    return env


def render_template(template_name: str, context: dict) -> str:
    """Render a template with the given context.

    Args:
        template_name: Name of the template file (e.g., "catalog.md.j2")
        context: Dictionary of variables to pass to the template

    Returns:
        Rendered template as a string
    """
    env = create_jinja_env()
    template = env.get_template(template_name)
    return template.render(**context)
