from __future__ import annotations
from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict

from halkit.models.link import Link


# -----------------------------------------------------------------------------
# Link slots: one Link per relation until the relation is registered again
# -----------------------------------------------------------------------------
class SingleLink(BaseModel):
    link: Link

    model_config = ConfigDict(frozen=True)

    @property
    def links(self) -> List[Link]:
        return [self.link]

    @property
    def first(self) -> Link:
        return self.link

    def append(self, link: Link) -> LinkList:
        return LinkList(links=[self.link, link])

    def to_json_value(self) -> dict[str, Any]:
        return self.link.to_json_value(include_rel=False)


class LinkList(BaseModel):
    links: List[Link]

    @property
    def first(self) -> Link:
        return self.links[0]

    def append(self, link: Link) -> LinkList:
        self.links.append(link)
        return self

    def to_json_value(self) -> list[dict[str, Any]]:
        return [link.to_json_value(include_rel=False) for link in self.links]


LinkSlot = Union[SingleLink, LinkList]
