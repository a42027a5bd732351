from dataclasses import dataclass, field
from typing import Optional

from scimwire.constants import RESOURCE_TYPE_SCHEMA
from scimwire.data.records import Record
from scimwire.resources.base import BaseResource


@dataclass
class SchemaExtension(Record):
    schema: Optional[str] = field(default=None, metadata={"required": True})
    required: Optional[bool] = field(default=None, metadata={"required": True})


@dataclass
class ResourceType(BaseResource):
    """
    Describes a resource type supported by the service provider, e.g. its endpoint and
    the schema extensions it accepts.
    """

    base_schema = RESOURCE_TYPE_SCHEMA
    resource_name = "ResourceType"

    schemas: list[str] = field(
        default_factory=lambda: [RESOURCE_TYPE_SCHEMA], metadata={"required": True}
    )
    id: Optional[str] = None
    name: Optional[str] = field(default=None, metadata={"required": True})
    description: Optional[str] = None
    endpoint: Optional[str] = field(default=None, metadata={"required": True})
    schema: Optional[str] = field(default=None, metadata={"required": True})
    schema_extensions: list[SchemaExtension] = field(default_factory=list)
