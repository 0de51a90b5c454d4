from __future__ import annotations
from collections.abc import Iterable, Mapping
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

from halkit.config.settings import settings
from halkit.errors import ValidationError
from halkit.models.link import Link, LinkValue
from halkit.models.slots import LinkSlot, SingleLink
from halkit.utils.serialize_json import resource_to_json, resource_to_json_value
from halkit.utils.serialize_xml import resource_to_xml

RESERVED_KEYS = ("_links", "_embedded")

Properties = Union[Mapping[str, Any], BaseModel, "Resource", None]


class Resource:
    """
    A node of a HAL resource graph.

    Own properties, links and embedded resources live in three separate
    containers. ``Resource(resource)`` returns ``resource`` itself.
    """

    def __new__(cls, properties: Properties = None, uri: Optional[LinkValue] = None):
        if isinstance(properties, Resource):
            return properties
        return super().__new__(cls)

    def __init__(self, properties: Properties = None, uri: Optional[LinkValue] = None):
        # __init__ runs again on the instance __new__ handed back
        if properties is self:
            return

        self.properties: Dict[str, Any] = {}
        self.links: Dict[str, LinkSlot] = {}
        self.embedded: Dict[str, List[Resource]] = {}

        if isinstance(properties, BaseModel):
            properties = properties.model_dump(mode="json")
        properties = dict(properties or {})

        uri = uri or properties.get("href")
        for key, value in properties.items():
            if key in RESERVED_KEYS:
                continue
            # the href property was consumed by the self link
            if key == "href" and value == uri:
                continue
            self.properties[key] = value

        if uri:
            self.link("self", uri)

    def __repr__(self) -> str:
        return f"Resource(href={self.self_href!r}, properties={self.properties!r})"

    def __str__(self) -> str:
        return self.to_json()

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------
    def link(self, rel_or_link: Union[str, Link], value: Optional[LinkValue] = None) -> Resource:
        """Register a Link, either prebuilt or from (rel, value)."""
        if isinstance(rel_or_link, Link):
            link = rel_or_link
        elif value is None and not isinstance(rel_or_link, str):
            raise ValidationError("href")
        else:
            link = Link(rel_or_link, value)

        slot = self.links.get(link.rel)
        if slot is None:
            self.links[link.rel] = SingleLink(link=link)
        else:
            self.links[link.rel] = slot.append(link)
        return self

    def embed(self, rel: str, resources: Union[Properties, Iterable[Properties]]) -> Resource:
        """Append one or many resources to the embedded list for rel."""
        items = self.embedded.setdefault(rel, [])
        if resources is None or isinstance(resources, (Mapping, BaseModel, Resource)):
            items.append(Resource(resources))
        else:
            items.extend(Resource(item) for item in resources)
        return self

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------
    def get_links(self, rel: str) -> List[Link]:
        slot = self.links.get(rel)
        return list(slot.links) if slot is not None else []

    def get_link(self, rel: str) -> Optional[Link]:
        slot = self.links.get(rel)
        return slot.first if slot is not None else None

    @property
    def self_href(self) -> Optional[str]:
        link = self.get_link("self")
        return link.href if link is not None else None

    # -------------------------------------------------------------------------
    # Serializers
    # -------------------------------------------------------------------------
    def to_json_value(self) -> Dict[str, Any]:
        return resource_to_json_value(self)

    def to_json(self, indent: Optional[int] = None) -> str:
        if indent is None:
            indent = settings.JSON_INDENT
        return resource_to_json(self, indent=indent)

    def to_xml_string(self, indent: Optional[str] = None, pretty: Optional[bool] = None) -> str:
        """
        XML form of the resource.

        Output is a single line unless pretty printing is on and an indent
        string is known; then each element gets its own line.
        """
        if indent is None:
            indent = settings.XML_INDENT
        if pretty is None:
            pretty = settings.XML_PRETTY

        if pretty and indent is not None:
            return resource_to_xml(self, indent=indent, newline="\n")
        return resource_to_xml(self)
