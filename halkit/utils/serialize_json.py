from __future__ import annotations
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel
from pydantic_core import to_json

if TYPE_CHECKING:
    from halkit.models.resource import Resource


def jsonable(value: Any) -> Any:
    """Turn nested Resources, Links and pydantic models into plain JSON values."""
    if hasattr(value, "to_json_value"):
        return value.to_json_value()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, Mapping):
        return {key: jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [jsonable(item) for item in value]
    # 30.0 reads as 30, matching the XML rendering
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def resource_to_json_value(resource: Resource) -> dict[str, Any]:
    """
    Build the HAL JSON tree of a resource.

    Key order is "_links", then "_embedded", then the resource's own
    properties. Embedded relations always map to arrays, even for a single
    resource; consumers rely on that, so it is not collapsed the way links are.
    """
    result: dict[str, Any] = {}

    if resource.links:
        result["_links"] = {
            rel: slot.to_json_value() for rel, slot in resource.links.items()
        }

    if resource.embedded:
        result["_embedded"] = {
            rel: [resource_to_json_value(item) for item in items]
            for rel, items in resource.embedded.items()
        }

    for key, value in resource.properties.items():
        result[key] = jsonable(value)

    return result


def resource_to_json(resource: Resource, indent: Optional[int] = None) -> str:
    return to_json(resource_to_json_value(resource), indent=indent).decode("utf-8")
