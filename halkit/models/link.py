from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from halkit.errors import ValidationError
from halkit.utils.escaping import escape_xml, render_scalar

LINK_ATTRIBUTES = ("rel", "href", "name", "hreflang", "title", "templated", "icon", "align")

LinkValue = Union[str, int, float, Mapping[str, Any]]


# -----------------------------------------------------------------------------
# Pydantic Model
# -----------------------------------------------------------------------------
class Link(BaseModel):
    """
    One hypermedia relation.

    ``Link(rel, value)`` takes the relation and either a scalar href or a
    mapping of attributes. Attributes outside LINK_ATTRIBUTES are dropped.
    """
    rel: str = Field(
        ...,
        description="Relation identifier (e.g., 'self', 'next', 'find')"
    )
    href: str = Field(
        ...,
        description="Target URI or URI template"
    )
    name: Optional[str] = Field(
        None,
        description="Secondary key for links sharing the same relation"
    )
    hreflang: Optional[str] = Field(
        None,
        description="Language of the target resource"
    )
    title: Optional[str] = Field(
        None,
        description="Human-readable label"
    )
    templated: Optional[bool] = Field(
        None,
        description="True when href is a URI template"
    )
    icon: Optional[str] = Field(
        None,
        description="Icon associated with the link"
    )
    align: Optional[str] = Field(
        None,
        description="Display alignment hint"
    )

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    def __init__(self, rel: str, value: Optional[LinkValue] = None):
        if not rel or not isinstance(rel, str):
            raise ValidationError("rel")

        attributes: dict[str, Any] = {"rel": rel}
        if isinstance(value, Mapping):
            if not value.get("href"):
                raise ValidationError("href")
            attributes.update(
                (key, attr) for key, attr in value.items() if key in LINK_ATTRIBUTES
            )
            # a bag may rename the relation, but never to nothing
            if not attributes["rel"]:
                raise ValidationError("rel")
        else:
            if not value:
                raise ValidationError("href")
            attributes["href"] = render_scalar(value)

        try:
            super().__init__(**attributes)
        except PydanticValidationError as e:
            error = e.errors()[0]
            attribute = str(error["loc"][0]) if error["loc"] else "link"
            raise ValidationError(attribute, f"invalid {attribute}: {error['msg']}") from e

    def to_json_value(self, include_rel: bool = True) -> dict[str, Any]:
        """Present attributes in declaration order, rel optional."""
        return self.model_dump(exclude_none=True, exclude=None if include_rel else {"rel"})

    def to_xml_string(self) -> str:
        attributes = " ".join(
            f'{key}="{escape_xml(render_scalar(value))}"'
            for key, value in self.model_dump(exclude_none=True).items()
        )
        return f"<link {attributes} />"
