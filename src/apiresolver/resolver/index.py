"""Reference index over ``components.schemas``.

Only the ``schemas`` category is indexed. Parameters, responses, headers and
request bodies under ``components`` cannot be targeted by the resolver, so a
``$ref`` to them is treated like any other missing reference.
"""

from typing import Any

from apiresolver.config import SCHEMA_REF_PREFIX

ReferenceIndex = dict[str, Any]


def schema_ref(name: str) -> str:
    """Return the canonical reference path for a named schema."""
    return f"{SCHEMA_REF_PREFIX}{name}"


def schema_name_from_ref(ref: str) -> str | None:
    """
    Extract the schema name from a ``#/components/schemas/<Name>`` reference.

    Returns None for any other reference form.
    """
    if not isinstance(ref, str) or not ref.startswith(SCHEMA_REF_PREFIX):
        return None
    name = ref[len(SCHEMA_REF_PREFIX) :]
    return name or None


def build_reference_index(document: Any) -> ReferenceIndex:
    """
    Collect every named schema of a document into a reference index.

    The index maps ``#/components/schemas/<Name>`` to the original schema
    node (the same object, not a copy). Missing or malformed ``components``
    yield an empty index.

    Args:
        document: The parsed OpenAPI document (may be None or partial)

    Returns:
        Mapping from reference path to raw schema node, in source order
    """
    index: ReferenceIndex = {}
    if not isinstance(document, dict):
        return index

    components = document.get("components")
    if not isinstance(components, dict):
        return index

    schemas = components.get("schemas")
    if not isinstance(schemas, dict):
        return index

    for name, schema in schemas.items():
        index[schema_ref(name)] = schema

    return index
