"""Recursive ``$ref`` dereferencing of schema trees.

Every ``{"$ref": ...}`` node is replaced by its recursively resolved target
from a reference index. Cycles end in a circular placeholder
``{"$ref": <path>, "_circular": True}``. The input tree is never mutated.
"""

import logging
from typing import Any

from apiresolver.config import CIRCULAR_MARKER
from apiresolver.resolver.index import ReferenceIndex

logger = logging.getLogger(__name__)


class UnresolvedReferenceError(ValueError):
    """Raised in strict mode when a ``$ref`` has no entry in the reference index."""

    def __init__(self, ref: str):
        self.ref = ref
        super().__init__(f"Unresolved reference: {ref}")


def circular_placeholder(ref: str) -> dict:
    """Return the terminal node emitted for a reference already being expanded."""
    return {"$ref": ref, CIRCULAR_MARKER: True}


def is_circular_placeholder(node: Any) -> bool:
    """Return True if ``node`` is a circular placeholder."""
    return isinstance(node, dict) and node.get(CIRCULAR_MARKER) is True and "$ref" in node



def dereference(
    node: Any,
    index: ReferenceIndex,
    visited: frozenset[str] = frozenset(),
    *,
    strict: bool = False,
) -> Any:
    """
    Return a copy of ``node`` with every ``$ref`` replaced by its target.

    ``visited`` holds the references being expanded on the current path from
    the root. It is extended by value when descending into a target, so a
    reference seen in one branch does not affect its siblings.

    Sibling keys next to a resolved ``$ref`` are dropped. A reference missing
    from the index is returned as a shallow copy of the original node, unless
    ``strict`` is set.

    The tree is walked with an explicit stack instead of recursion, so long
    reference chains are not bounded by the interpreter's recursion limit.

    Args:
        node: Any schema node (dict, list or scalar)
        index: Reference index from ``build_reference_index``
        visited: References currently being expanded
        strict: Raise UnresolvedReferenceError for missing references

    Returns:
        A new tree without ``$ref`` keys, except in circular placeholders
        and unresolved references

    Example:
        >>> index = {"#/components/schemas/Id": {"type": "string", "format": "uuid"}}
        >>> dereference({"properties": {"id": {"$ref": "#/components/schemas/Id"}}}, index)
        {'properties': {'id': {'type': 'string', 'format': 'uuid'}}}
    """
    root: list[Any] = [None]
    # Each frame is (node, visited, parent, key); the copy of node lands in parent[key].
    stack: list[tuple[Any, frozenset[str], Any, Any]] = [(node, visited, root, 0)]

    while stack:
        current, seen, parent, key = stack.pop()

        if isinstance(current, dict):
            ref = current.get("$ref")
            if isinstance(ref, str):
                if ref in seen:
                    logger.debug("Circular reference detected for %s", ref)
                    parent[key] = circular_placeholder(ref)
                    continue

                target = index.get(ref)
                if target is None:
                    if strict:
                        raise UnresolvedReferenceError(ref)
                    logger.warning("Reference not found, keeping as-is: %s", ref)
                    parent[key] = dict(current)
                    continue

                # The target takes the place of the reference node.
                stack.append((target, seen | {ref}, parent, key))
                continue

            copy: dict = dict.fromkeys(current)
            parent[key] = copy
            for child_key, value in reversed(current.items()):
                stack.append((value, seen, copy, child_key))
            continue

        if isinstance(current, list):
            items: list = [None] * len(current)
            parent[key] = items
            for position in reversed(range(len(current))):
                stack.append((current[position], seen, items, position))
            continue

        parent[key] = current

    return root[0]
