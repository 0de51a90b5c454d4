from halkit.models.link import LINK_ATTRIBUTES, Link
from halkit.models.resource import Resource
from halkit.models.slots import LinkList, LinkSlot, SingleLink

__all__ = ["LINK_ATTRIBUTES", "Link", "LinkList", "LinkSlot", "Resource", "SingleLink"]
