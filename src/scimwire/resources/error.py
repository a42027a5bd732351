from dataclasses import dataclass, field
from typing import Optional

from scimwire.constants import ERROR_SCHEMA
from scimwire.data.records import Record


@dataclass
class ErrorResponse(Record):
    """
    Error message as defined in RFC-7644, section 3.12. It is not a resource, but it is
    serialized and deserialized the same way.
    """

    base_schema = ERROR_SCHEMA
    resource_name = "Error"

    schemas: list[str] = field(
        default_factory=lambda: [ERROR_SCHEMA], metadata={"required": True}
    )
    status: Optional[str] = field(default=None, metadata={"required": True})
    scim_type: Optional[str] = None
    detail: Optional[str] = None
