from dataclasses import dataclass, field
from typing import ClassVar, Optional

from scimwire.constants import AUTHENTICATION_SCHEME_TYPES, SERVICE_PROVIDER_CONFIG_SCHEMA
from scimwire.data.records import Record
from scimwire.resources.base import BaseResource

_REQUIRED = {"required": True}


@dataclass
class Supported(Record):
    supported: bool = field(default=False, metadata={"required": True})


@dataclass
class BulkSupport(Supported):
    """`max_operations` and `max_payload_size` are required if bulk is supported."""

    max_operations: Optional[int] = None
    max_payload_size: Optional[int] = None


@dataclass
class FilterSupport(Supported):
    """`max_results` is required if filtering is supported."""

    max_results: Optional[int] = None


@dataclass
class AuthenticationScheme(Record):
    canonical_types: ClassVar[Optional[tuple[str, ...]]] = AUTHENTICATION_SCHEME_TYPES

    type_: Optional[str] = field(default=None, metadata={"required": True})
    name: Optional[str] = field(default=None, metadata={"required": True})
    description: Optional[str] = field(default=None, metadata={"required": True})
    spec_uri: Optional[str] = None
    documentation_uri: Optional[str] = None
    primary: Optional[bool] = None


@dataclass
class ServiceProviderConfig(BaseResource):
    """
    Service provider configuration, as defined in
    [RFC-7643](https://www.rfc-editor.org/rfc/rfc7643#section-5). Every feature defaults
    to "not supported".
    """

    base_schema = SERVICE_PROVIDER_CONFIG_SCHEMA
    resource_name = "ServiceProviderConfig"

    schemas: list[str] = field(
        default_factory=lambda: [SERVICE_PROVIDER_CONFIG_SCHEMA], metadata={"required": True}
    )
    documentation_uri: Optional[str] = None
    patch: Optional[Supported] = field(default_factory=Supported, metadata=_REQUIRED)
    bulk: Optional[BulkSupport] = field(default_factory=BulkSupport, metadata=_REQUIRED)
    filter: Optional[FilterSupport] = field(default_factory=FilterSupport, metadata=_REQUIRED)
    change_password: Optional[Supported] = field(default_factory=Supported, metadata=_REQUIRED)
    sort: Optional[Supported] = field(default_factory=Supported, metadata=_REQUIRED)
    etag: Optional[Supported] = field(default_factory=Supported, metadata=_REQUIRED)
    authentication_schemes: list[AuthenticationScheme] = field(default_factory=list)
