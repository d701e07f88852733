"""Document-wide dereferencing."""

from typing import Any

from apiresolver.resolver.dereference import dereference
from apiresolver.resolver.index import build_reference_index


def dereference_document(document: Any, *, strict: bool = False) -> Any:
    """
    Return a copy of an OpenAPI document with ``paths`` and ``components`` dereferenced.

    Each subtree starts with a fresh visited set. Every other top-level key
    (``openapi``, ``info``, ``servers``, ...) is passed through untouched.
    A non-dict document is returned unchanged.

    Args:
        document: The parsed OpenAPI document
        strict: Raise UnresolvedReferenceError for references missing from the index

    Returns:
        A new top-level document dictionary
    """
    if not isinstance(document, dict):
        return document

    index = build_reference_index(document)
    resolved = dict(document)

    if "paths" in document:
        resolved["paths"] = dereference(document["paths"], index, strict=strict)
    if document.get("components") is not None:
        resolved["components"] = dereference(document["components"], index, strict=strict)

    return resolved


def dereference_all_named_schemas(document: Any, *, strict: bool = False) -> dict[str, Any]:
    """
    Resolve every named schema on its own.

    Returns:
        Mapping from ``#/components/schemas/<Name>`` to the fully dereferenced
        schema, in the order the schemas are declared
    """
    index = build_reference_index(document)
    return {ref: dereference(schema, index, strict=strict) for ref, schema in index.items()}
