"""Manager to orchestrate resolution of a specification file.

This module coordinates the complete resolution pipeline:
1. Load the OpenAPI specification from a file
2. Dereference the whole document
3. Save the resolved specification back to a file
"""

from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from apiresolver.config import FileFormat, ResolverConfig
from apiresolver.core.loader import load_spec
from apiresolver.core.writer import format_for_path, write_spec
from apiresolver.resolver.document import dereference_document
from apiresolver.resolver.walk import ReferenceSite, find_references


@dataclass
class ResolveReport:
    """Outcome of resolving one specification file."""

    output_path: Path
    file_format: FileFormat
    unresolved: list[ReferenceSite] = field(default_factory=list)
    circular: list[ReferenceSite] = field(default_factory=list)

    @property
    def fully_resolved(self) -> bool:
        return not self.unresolved


def resolve_spec(
    input_path: Path,
    output_path: Path,
    config: ResolverConfig | None = None,
    console: Console | None = None,
) -> ResolveReport:
    """
    Load OpenAPI spec, dereference it, and save the result.

    The output format is taken from ``config.output_format`` when set, then
    from the output file suffix, then from the input format.

    Args:
        input_path: Path to the input OpenAPI specification file (.json, .yaml, or .yml)
        output_path: Path where the resolved specification will be written
        config: Resolver settings (defaults when omitted)
        console: Optional Rich Console for progress output

    Returns:
        A ResolveReport listing the references left in the output

    Raises:
        FileNotFoundError: If the input file doesn't exist
        ValueError: If the input file has an unsupported extension or content
        UnresolvedReferenceError: If ``config.strict_refs`` is set and a reference is missing
        json.JSONDecodeError: If JSON parsing fails
        yaml.YAMLError: If YAML parsing fails
        IOError: If writing to output_path fails
    """
    config = config or ResolverConfig()
    spec, input_format = load_spec(input_path)

    if console:
        console.print("  [dim]→ dereferencing paths and components[/dim]")
    resolved = dereference_document(spec, strict=config.strict_refs)

    file_format = config.output_format or format_for_path(output_path, input_format)
    write_spec(resolved, output_path, file_format)

    report = ResolveReport(output_path=output_path, file_format=file_format)
    for site in find_references(resolved):
        if site.circular:
            report.circular.append(site)
        else:
            report.unresolved.append(site)
    return report
