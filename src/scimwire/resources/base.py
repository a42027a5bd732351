from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from scimwire.data.records import Record


@dataclass
class Meta(Record):
    """
    Resource metadata. Timestamps are kept as they appear on the wire, so malformed
    values stay representable and are reported by the validator.
    """

    resource_type: Optional[str] = None
    created: Optional[str] = None
    last_modified: Optional[str] = None
    location: Optional[str] = None
    version: Optional[str] = None


@dataclass
class BaseResource(Record):
    """
    Top-level document with `schemas` and `meta`. Concrete classes declare `base_schema`
    and `resource_name`, and default `schemas` to `[base_schema]`.

    Payloads of extensions the library has no model for are kept in `extensions`, by their
    schema URN. Payloads are opaque JSON values, usually objects.
    """

    base_schema: ClassVar[str]
    resource_name: ClassVar[str]

    schemas: list[str] = field(default_factory=list, metadata={"required": True})
    meta: Optional[Meta] = None
    extensions: dict[str, Any] = field(default_factory=dict, metadata={"wire": False})


@dataclass
class Resource(BaseResource):
    """Resource addressable by the service provider-issued `id`."""

    id: Optional[str] = None
    external_id: Optional[str] = None
