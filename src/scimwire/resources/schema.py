from dataclasses import dataclass, field
from typing import ClassVar, Optional

from scimwire.constants import ATTRIBUTE_TYPES, SCHEMA_SCHEMA
from scimwire.data.records import Record
from scimwire.resources.base import BaseResource


@dataclass
class SubAttribute(Record):
    """
    Definition of a sub-attribute of a complex attribute. `mutability`, `returned` and
    `uniqueness` accept the values listed in `scimwire.constants` only.
    """

    canonical_types: ClassVar[Optional[tuple[str, ...]]] = ATTRIBUTE_TYPES

    name: Optional[str] = field(default=None, metadata={"required": True})
    type_: Optional[str] = field(default=None, metadata={"required": True})
    multi_valued: Optional[bool] = field(default=None, metadata={"required": True})
    description: Optional[str] = None
    required: Optional[bool] = None
    canonical_values: list[str] = field(default_factory=list)
    case_exact: Optional[bool] = None
    mutability: Optional[str] = None
    returned: Optional[str] = None
    uniqueness: Optional[str] = None
    reference_types: list[str] = field(default_factory=list)


@dataclass
class Attribute(SubAttribute):
    """Definition of a top-level schema attribute. Only complex ones have `sub_attributes`."""

    sub_attributes: list[SubAttribute] = field(default_factory=list)


@dataclass
class Schema(BaseResource):
    """Describes attributes of a resource or extension schema, identified by its URN `id`."""

    base_schema = SCHEMA_SCHEMA
    resource_name = "Schema"

    schemas: list[str] = field(
        default_factory=lambda: [SCHEMA_SCHEMA], metadata={"required": True}
    )
    id: Optional[str] = field(default=None, metadata={"required": True})
    name: Optional[str] = None
    description: Optional[str] = None
    attributes: list[Attribute] = field(default_factory=list)
