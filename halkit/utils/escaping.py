from collections.abc import Mapping
from typing import Any

from pydantic_core import to_json

# Ampersands are left untouched: existing consumers expect "&" verbatim.
_XML_ESCAPES = str.maketrans({
    '"': "&quot;",
    "<": "&lt;",
    ">": "&gt;",
})


def escape_xml(text: str) -> str:
    """Escape double quotes and angle brackets for attribute or element text."""
    return text.translate(_XML_ESCAPES)


def render_scalar(value: Any) -> str:
    """
    Render a property or attribute value the way it reads in a JSON document.

    Booleans become ``true``/``false``, ``None`` becomes ``null`` and
    integral floats lose their fractional part. Containers are written
    as compact JSON.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (Mapping, list, tuple)):
        return to_json(value).decode("utf-8")
    return str(value)


def singularize(rel: str) -> str:
    """Naive singular form of an embedding relation: strip one trailing "s"."""
    if rel.endswith("s"):
        return rel[:-1]
    return rel
