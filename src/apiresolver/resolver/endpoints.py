"""Endpoint listing for OpenAPI documents."""

from dataclasses import dataclass, field
from typing import Any

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

JSON_MEDIA_TYPE = "application/json"


@dataclass
class Endpoint:
    """A single operation of an OpenAPI document."""

    method: str
    path: str
    operation: dict[str, Any] = field(default_factory=dict)

    @property
    def summary(self) -> str:
        return self.operation.get("summary") or self.operation.get("description") or ""

    @property
    def tags(self) -> list[str]:
        tags = self.operation.get("tags")
        return list(tags) if isinstance(tags, list) else []

    def request_schema(self, media_type: str = JSON_MEDIA_TYPE) -> Any | None:
        """Return the request body schema for ``media_type``, or None."""
        request_body = self.operation.get("requestBody")
        if not isinstance(request_body, dict):
            return None
        return _content_schema(request_body.get("content"), media_type)

    def response_schemas(self, media_type: str = JSON_MEDIA_TYPE) -> dict[str, Any]:
        """Return response schemas keyed by status code, skipping bodiless responses."""
        responses = self.operation.get("responses")
        if not isinstance(responses, dict):
            return {}
        schemas = {}
        for status, response in responses.items():
            if not isinstance(response, dict):
                continue
            schema = _content_schema(response.get("content"), media_type)
            if schema is not None:
                schemas[str(status)] = schema
        return schemas


def _content_schema(content: Any, media_type: str) -> Any | None:
    if not isinstance(content, dict):
        return None
    media = content.get(media_type)
    if not isinstance(media, dict):
        return None
    return media.get("schema")


def extract_endpoints(document: Any) -> list[Endpoint]:
    """
    List every operation under ``paths``.

    Path-level keys that are not HTTP methods (``parameters``, ``summary``,
    ``servers``, ...) are skipped. Order follows the document: paths first,
    then methods within a path.

    Args:
        document: The parsed OpenAPI document

    Returns:
        Endpoints with upper-cased methods
    """
    if not isinstance(document, dict):
        return []
    paths = document.get("paths")
    if not isinstance(paths, dict):
        return []

    endpoints = []
    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue
        for method, operation in path_item.items():
            if not isinstance(method, str) or method.lower() not in HTTP_METHODS:
                continue
            if not isinstance(operation, dict):
                continue
            endpoints.append(Endpoint(method=method.upper(), path=path, operation=operation))
    return endpoints
