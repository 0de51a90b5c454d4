from __future__ import annotations
from collections.abc import Iterable, Mapping
from typing import Any, Union

from pydantic import BaseModel

from halkit.models.link import Link, LinkValue
from halkit.models.resource import Resource


# -----------------------------------------------------------------------------
# Single resource HATEOAS
# -----------------------------------------------------------------------------
def hal_resource(
    model: Union[Mapping[str, Any], BaseModel],
    uri: LinkValue,
    links: Iterable[Link] = (),
) -> Resource:
    """Wrap a read model in a Resource at uri and attach prebuilt links."""
    resource = Resource(model, uri)
    for link in links:
        resource.link(link)
    return resource


# -----------------------------------------------------------------------------
# Collection HATEOAS
# -----------------------------------------------------------------------------
def hal_collection(
    rel: str,
    items: Iterable[Union[Mapping[str, Any], BaseModel, Resource]],
    uri: LinkValue,
    links: Iterable[Link] = (),
    **properties: Any,
) -> Resource:
    """
    Build a collection resource with every item embedded under rel.

    A "count" property holding the number of items is added unless the
    caller passes one.
    """
    embedded = [Resource(item) for item in items]
    properties.setdefault("count", len(embedded))

    collection = hal_resource(properties, uri, links)
    collection.embed(rel, embedded)
    return collection
