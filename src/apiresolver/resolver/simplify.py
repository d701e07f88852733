"""Compact display form of schemas.

Turns a schema into the short shape shown by endpoint and schema browsers:

    {"type": "array", "items": {"type": "string", "format": "uuid"}}  ->  "array of uuid"

References are not followed here. Run the dereferencer first when resolved
output is wanted.
"""

import json
from typing import Any


def _enum_label(values: list) -> str:
    rendered = ", ".join(json.dumps(value, ensure_ascii=False, default=str) for value in values)
    return f"enum ({rendered})"


def _has_items(items: Any) -> bool:
    # empty containers still count as items; False, "", 0 and None do not
    return bool(items) or isinstance(items, (dict, list))


def _wrap_array(simplified: Any) -> Any:
    if isinstance(simplified, str):
        return f"array of {simplified}"
    # complex items keep the array wrapper
    return {"type": "array", "items": simplified}


def _simplify_node(schema: Any) -> Any:
    """Simplify a schema whose display value does not depend on its children."""
    if not schema or not isinstance(schema, dict):
        return schema

    ref = schema.get("$ref")
    if ref:
        return {"$ref": ref}

    schema_type = schema.get("type")

    if schema_type == "string":
        enum = schema.get("enum")
        if isinstance(enum, list):
            return _enum_label(enum)
        if schema.get("format"):
            return schema["format"]
        return "string"

    if schema_type in ("number", "integer"):
        return schema_type

    if schema_type == "boolean":
        return "boolean"

    return schema_type or schema


def simplify(schema: Any) -> Any:
    """
    Simplify a schema into a human-readable display value.

    Strings are checked for ``enum`` first, then ``format``, then fall back to
    the bare type name. Objects become a mapping of property name to display
    value. Anything unrecognised yields its ``type`` or, failing that, the node
    itself. Never raises.

    Args:
        schema: A schema node, dereferenced or not

    Returns:
        A string, a mapping, or the original value

    Example:
        >>> simplify({"type": "string", "enum": ["a", "b"]})
        'enum ("a", "b")'
    """
    root: list[Any] = [None]
    stack: list[tuple[Any, Any, Any]] = [(schema, root, 0)]
    # (parent, key, slot) for arrays, filled in once their items are simplified
    arrays: list[tuple[Any, Any, list]] = []

    while stack:
        node, parent, key = stack.pop()

        if isinstance(node, dict) and node and not node.get("$ref"):
            schema_type = node.get("type")
            properties = node.get("properties")

            if schema_type == "object" and isinstance(properties, dict):
                mapping: dict = dict.fromkeys(properties)
                parent[key] = mapping
                for name, prop in properties.items():
                    stack.append((prop, mapping, name))
                continue

            if schema_type == "array":
                items = node.get("items")
                if not _has_items(items):
                    parent[key] = "array"
                    continue
                slot: list[Any] = [None]
                arrays.append((parent, key, slot))
                stack.append((items, slot, 0))
                continue

        parent[key] = _simplify_node(node)

    # nested arrays were recorded after the arrays that contain them
    for parent, key, slot in reversed(arrays):
        parent[key] = _wrap_array(slot[0])

    return root[0]
