"""Main CLI entry point for the OpenAPI reference resolver."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from apiresolver.config import (
    FileFormat,
    ResolverConfig,
    get_config_path,
    load_config,
    save_config,
)
from apiresolver.core.loader import load_spec
from apiresolver.generators.catalog import write_catalog
from apiresolver.resolver.dereference import UnresolvedReferenceError
from apiresolver.resolver.document import dereference_all_named_schemas, dereference_document
from apiresolver.resolver.endpoints import extract_endpoints
from apiresolver.resolver.manager import resolve_spec
from apiresolver.resolver.simplify import simplify
from apiresolver.resolver.walk import find_references

app = typer.Typer(
    name="apiresolver",
    help="Resolve local $ref references in OpenAPI specifications",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug diagnostics"),
) -> None:
    """Resolve local $ref references in OpenAPI specifications."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def default_output_path(input_path: Path) -> Path:
    """
    Derive the resolved output path next to the input file.

    Args:
        input_path: The source specification path

    Returns:
        ``<stem>.resolved<suffix>`` in the same directory
    """
    return input_path.with_name(f"{input_path.stem}.resolved{input_path.suffix}")


def _load_or_exit(input_path: Path) -> dict:
    try:
        spec, _ = load_spec(input_path)
    except Exception as e:
        console.print(f"[bold red]✗[/bold red] Failed to load spec: {e}")
        raise typer.Exit(1)
    return spec


def _resolve_config(input_path: Path, strict: bool = False) -> ResolverConfig:
    config = load_config(input_path.resolve().parent)
    if strict:
        config.strict_refs = True
    return config


@app.command()
def resolve(
    input_file: Path = typer.Argument(..., help="OpenAPI specification (.yaml, .yml or .json)"),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to write the resolved spec (defaults to <name>.resolved.<ext>)",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on references that cannot be resolved",
    ),
    output_format: FileFormat = typer.Option(
        None, "--format", "-f", help="Output format (defaults to the input format)"
    ),
) -> None:
    """Write a copy of the spec with every schema $ref inlined."""
    input_path = input_file.resolve()
    output_path = (output or default_output_path(input_path)).resolve()
    config = _resolve_config(input_path, strict)
    if output_format is not None:
        config.output_format = output_format

    console.print(f"[bold blue]Resolving[/bold blue] {input_path.name}")

    try:
        report = resolve_spec(input_path, output_path, config=config, console=console)
    except UnresolvedReferenceError as e:
        console.print(f"[bold red]✗[/bold red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[bold red]✗[/bold red] Failed to resolve spec: {e}")
        raise typer.Exit(1)

    console.print(f"[bold green]✓[/bold green] Resolved specification written to: {output_path}")

    if report.circular:
        console.print(f"[bold blue]i[/bold blue] {len(report.circular)} circular reference(s) kept")
    if report.unresolved:
        console.print(
            f"[bold yellow]![/bold yellow] {len(report.unresolved)} reference(s) "
            "could not be resolved"
        )
        for site in report.unresolved:
            console.print(f"  [dim]{site.pointer}[/dim] → {site.ref}")


@app.command()
def schemas(
    input_file: Path = typer.Argument(..., help="OpenAPI specification (.yaml, .yml or .json)"),
    raw: bool = typer.Option(False, "--raw", help="Print full resolved schemas"),
) -> None:
    """Print every named schema, fully resolved."""
    spec = _load_or_exit(input_file)
    config = _resolve_config(input_file)
    show_raw = raw or not config.simplify_schemas

    try:
        resolved = dereference_all_named_schemas(spec, strict=config.strict_refs)
    except UnresolvedReferenceError as e:
        console.print(f"[bold red]✗[/bold red] {e}")
        raise typer.Exit(1)

    if not resolved:
        console.print("[dim]No named schemas found[/dim]")
        return

    for ref, schema in resolved.items():
        console.print(f"[bold]{ref}[/bold]")
        console.print_json(data=schema if show_raw else simplify(schema), default=str)


@app.command()
def endpoints(
    input_file: Path = typer.Argument(..., help="OpenAPI specification (.yaml, .yml or .json)"),
) -> None:
    """List endpoints with their request body in display form."""
    spec = _load_or_exit(input_file)
    found = extract_endpoints(dereference_document(spec))

    if not found:
        console.print("[dim]No endpoints found[/dim]")
        return

    table = Table(title=str((spec.get("info") or {}).get("title") or input_file.name))
    table.add_column("Method", style="bold")
    table.add_column("Path")
    table.add_column("Summary")
    table.add_column("Request")

    for endpoint in found:
        request = endpoint.request_schema()
        table.add_row(
            endpoint.method,
            endpoint.path,
            escape(endpoint.summary),
            escape(str(simplify(request))) if request is not None else "",
        )

    console.print(table)


@app.command()
def check(
    input_file: Path = typer.Argument(..., help="OpenAPI specification (.yaml, .yml or .json)"),
) -> None:
    """Report references that cannot be resolved."""
    spec = _load_or_exit(input_file)
    sites = find_references(dereference_document(spec))

    unresolved = [site for site in sites if not site.circular]
    circular = [site for site in sites if site.circular]

    for site in circular:
        console.print(
            f"[bold blue]i[/bold blue] circular: {site.ref} at [dim]{site.pointer}[/dim]"
        )

    if unresolved:
        for site in unresolved:
            console.print(
                f"[bold red]✗[/bold red] unresolved: {site.ref} at [dim]{site.pointer}[/dim]"
            )
        raise typer.Exit(1)

    console.print("[bold green]✓[/bold green] All references resolve")


@app.command()
def catalog(
    input_file: Path = typer.Argument(..., help="OpenAPI specification (.yaml, .yml or .json)"),
    output: Path = typer.Option(..., "--output", "-o", help="Markdown file to write"),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on references that cannot be resolved",
    ),
) -> None:
    """Write a Markdown catalog of endpoints and resolved schemas."""
    spec = _load_or_exit(input_file)
    config = _resolve_config(input_file, strict)

    try:
        write_catalog(
            spec,
            output,
            simplify_schemas=config.simplify_schemas,
            strict=config.strict_refs,
        )
    except UnresolvedReferenceError as e:
        console.print(f"[bold red]✗[/bold red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[bold red]✗[/bold red] Failed to write catalog: {e}")
        raise typer.Exit(1)

    console.print(f"[bold green]✓[/bold green] Catalog written to: {output}")


@app.command()
def init(
    target_dir: Path = typer.Argument(
        Path("."),
        help="Directory holding the OpenAPI specification",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on references that cannot be resolved",
    ),
    output_format: FileFormat = typer.Option(
        None, "--format", "-f", help="Output format for resolved specs"
    ),
) -> None:
    """Create a .apiresolver.yaml config file with the given settings."""
    target_path = target_dir.resolve()
    config = ResolverConfig(strict_refs=strict, output_format=output_format)

    try:
        created = save_config(target_path, config)
    except Exception as e:
        console.print(f"[bold red]✗[/bold red] Failed to write config: {e}")
        raise typer.Exit(1)

    config_path = get_config_path(target_path)
    if created:
        console.print(f"[bold green]✓[/bold green] Created {config_path.name}")
    else:
        console.print(f"[bold blue]✓[/bold blue] {config_path.name} already exists (preserved)")


if __name__ == "__main__":
    app()
