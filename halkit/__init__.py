"""In-memory HAL resource graphs with JSON and XML serializers."""

from halkit.config.settings import settings
from halkit.errors import ValidationError
from halkit.models.link import Link
from halkit.models.resource import Resource
from halkit.utils.hateoas import hal_collection, hal_resource

__all__ = [
    "Link",
    "Resource",
    "ValidationError",
    "hal_collection",
    "hal_resource",
    "settings",
]

__version__ = "0.1.0"
