"""Read-only traversal helpers for locating ``$ref`` nodes in a tree."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from apiresolver.resolver.dereference import is_circular_placeholder


@dataclass(frozen=True)
class ReferenceSite:
    """A ``$ref`` found in a tree and where it sits."""

    pointer: str
    ref: str
    circular: bool


def _escape(token: str | int) -> str:
    """Escape a JSON pointer reference token (RFC 6901)."""
    return str(token).replace("~", "~0").replace("/", "~1")


def walk(
    data: Any,
    visit: Callable[[Any, str], None],
    pointer: str = "",
) -> None:
    """
    Visit every node of a nested dict/list structure in document order.

    Unlike a transforming walk, nothing is written back: ``visit`` receives
    each node together with its JSON pointer and its return value is ignored.
    Pending nodes are kept on an explicit stack, so depth is not limited by
    the recursion limit.

    Args:
        data: The walk root (dict, list or scalar)
        visit: Callable taking (node, pointer)
        pointer: JSON pointer of ``data`` relative to the walk root

    Example:
        seen = []
        walk({"a": [1]}, lambda node, ptr: seen.append(ptr))
        # seen == ["", "/a", "/a/0"]
    """
    stack: list[tuple[Any, str]] = [(data, pointer)]

    while stack:
        node, location = stack.pop()
        visit(node, location)

        # children are pushed in reverse so they pop in source order
        if isinstance(node, dict):
            for key, value in reversed(node.items()):
                stack.append((value, f"{location}/{_escape(key)}"))
        elif isinstance(node, list):
            for i in reversed(range(len(node))):
                stack.append((node[i], f"{location}/{i}"))


def iter_references(data: Any) -> Iterator[ReferenceSite]:
    """Yield every string-valued ``$ref`` in ``data`` in document order."""
    sites: list[ReferenceSite] = []

    def _collect(node: Any, pointer: str) -> None:
        if isinstance(node, dict) and isinstance(node.get("$ref"), str):
            sites.append(
                ReferenceSite(
                    pointer=f"#{pointer}",
                    ref=node["$ref"],
                    circular=is_circular_placeholder(node),
                )
            )

    walk(data, _collect)
    yield from sites


def find_references(data: Any) -> list[ReferenceSite]:
    """Return every ``$ref`` left in ``data``, circular placeholders included."""
    return list(iter_references(data))


def unresolved_references(data: Any) -> list[ReferenceSite]:
    """Return the ``$ref`` nodes that are not circular placeholders."""
    return [site for site in iter_references(data) if not site.circular]
