"""Shared fixtures for reference chain tests."""

import pytest


@pytest.fixture
def schema_chain():
    """Return a builder for named schemas S0..S<n-1>, each linking to the next.

    The last schema is a plain string, or links back to S0 when ``closed``.
    """

    def _build(length, closed=False):
        schemas = {}
        for i in range(length):
            if i + 1 < length:
                next_ref = f"#/components/schemas/S{i + 1}"
            elif closed:
                next_ref = "#/components/schemas/S0"
            else:
                schemas[f"S{i}"] = {"type": "string"}
                continue
            schemas[f"S{i}"] = {
                "type": "object",
                "properties": {"next": {"$ref": next_ref}},
            }
        return schemas

    return _build


@pytest.fixture
def chain_depth():
    """Return a helper following ``next`` links (resolved or simplified) to the end."""

    def _follow(node):
        depth = 0
        while isinstance(node, dict):
            if "properties" in node:
                node = node["properties"]["next"]
            elif "next" in node:
                node = node["next"]
            else:
                break
            depth += 1
        return depth, node

    return _follow
