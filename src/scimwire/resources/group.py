from dataclasses import dataclass, field
from typing import ClassVar, Optional

from scimwire.constants import GROUP_SCHEMA, MEMBER_TYPES
from scimwire.data.records import Record
from scimwire.resources.base import Resource


@dataclass
class Member(Record):
    canonical_types: ClassVar[Optional[tuple[str, ...]]] = MEMBER_TYPES

    value: Optional[str] = None
    ref: Optional[str] = None
    display: Optional[str] = None
    type_: Optional[str] = None


@dataclass
class Group(Resource):
    base_schema = GROUP_SCHEMA
    resource_name = "Group"

    schemas: list[str] = field(
        default_factory=lambda: [GROUP_SCHEMA], metadata={"required": True}
    )
    display_name: Optional[str] = field(default=None, metadata={"required": True})
    members: list[Member] = field(default_factory=list)
