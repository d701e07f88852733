"""Markdown API catalog generation.

The catalog lists every endpoint with its request and response schemas in
display form, followed by every named schema fully resolved.
"""

from pathlib import Path
from typing import Any

from apiresolver.generators.templates import render_template
from apiresolver.resolver.document import dereference_all_named_schemas, dereference_document
from apiresolver.resolver.endpoints import extract_endpoints
from apiresolver.resolver.index import schema_name_from_ref
from apiresolver.resolver.simplify import simplify


def build_catalog_context(
    document: dict, simplify_schemas: bool = True, strict: bool = False
) -> dict[str, Any]:
    """
    Collect the template context for ``catalog.md.j2``.

    With ``strict`` set, a reference missing from ``components.schemas`` raises
    UnresolvedReferenceError instead of being listed as-is.
    """
    display = simplify if simplify_schemas else (lambda schema: schema)
    resolved = dereference_document(document, strict=strict)
    info = document.get("info") if isinstance(document.get("info"), dict) else {}

    endpoints = []
    for endpoint in extract_endpoints(resolved):
        request = endpoint.request_schema()
        endpoints.append(
            {
                "method": endpoint.method,
                "path": endpoint.path,
                "summary": endpoint.summary,
                "tags": endpoint.tags,
                "request": display(request) if request is not None else None,
                "responses": {
                    status: display(schema)
                    for status, schema in endpoint.response_schemas().items()
                },
            }
        )

    schemas = [
        {"name": schema_name_from_ref(ref) or ref, "ref": ref, "schema": display(schema)}
        for ref, schema in dereference_all_named_schemas(document, strict=strict).items()
    ]

    return {
        "title": info.get("title") or "API",
        "version": info.get("version"),
        "description": info.get("description"),
        "openapi": document.get("openapi"),
        "endpoints": endpoints,
        "schemas": schemas,
    }


def render_catalog(document: dict, simplify_schemas: bool = True, strict: bool = False) -> str:
    """Render the Markdown catalog for a parsed OpenAPI document."""
    context = build_catalog_context(document, simplify_schemas=simplify_schemas, strict=strict)
    return render_template("catalog.md.j2", context)


def write_catalog(
    document: dict, path: Path, simplify_schemas: bool = True, strict: bool = False
) -> None:
    """Render the catalog and write it to ``path``, creating parent directories."""
    content = render_catalog(document, simplify_schemas=simplify_schemas, strict=strict)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
