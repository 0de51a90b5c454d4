from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from halkit.utils.escaping import escape_xml, render_scalar, singularize

if TYPE_CHECKING:
    from halkit.models.resource import Resource


def _attribute(name: str, value: object) -> str:
    return f' {name}="{escape_xml(render_scalar(value))}"'


def resource_to_xml(
    resource: Resource,
    rel: Optional[str] = None,
    indent: str = "",
    newline: str = "",
    depth: int = 0,
) -> str:
    """
    Render a resource as a <resource> element.

    The open tag carries rel (never on the root), href and name. Children
    follow in order: links, embedded resources, properties. The self link
    is only written as a <link> when an own "href" property already took
    the href attribute.
    """
    pad = indent * depth
    child_pad = indent * (depth + 1)
    own_href = resource.properties.get("href")
    href = own_href or resource.self_href

    open_tag = "<resource"
    if rel:
        open_tag += _attribute("rel", rel)
    if href:
        open_tag += _attribute("href", href)
    if "name" in resource.properties:
        open_tag += _attribute("name", resource.properties["name"])
    parts = [f"{pad}{open_tag}>{newline}"]

    for link_rel, slot in resource.links.items():
        if link_rel == "self" and not own_href:
            continue
        for link in slot.links:
            parts.append(f"{child_pad}{link.to_xml_string()}{newline}")

    # embedded relations are plural ("orders"), each item is one "order"
    for embedded_rel, items in resource.embedded.items():
        for item in items:
            parts.append(resource_to_xml(
                item,
                rel=singularize(embedded_rel),
                indent=indent,
                newline=newline,
                depth=depth + 1,
            ))

    for key, value in resource.properties.items():
        text = escape_xml(render_scalar(value))
        parts.append(f"{child_pad}<{key}>{text}</{key}>{newline}")

    parts.append(f"{pad}</resource>{newline}")
    return "".join(parts)
