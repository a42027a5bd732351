from typing import Union

from scimwire.resources.base import BaseResource, Meta, Resource
from scimwire.resources.error import ErrorResponse
from scimwire.resources.group import Group, Member
from scimwire.resources.resource_type import ResourceType, SchemaExtension
from scimwire.resources.schema import Attribute, Schema, SubAttribute
from scimwire.resources.service_provider_config import (
    AuthenticationScheme,
    BulkSupport,
    FilterSupport,
    ServiceProviderConfig,
    Supported,
)
from scimwire.resources.user import (
    Address,
    Email,
    EnterpriseUser,
    Entitlement,
    GroupMembership,
    Im,
    Manager,
    MultiValued,
    Name,
    PhoneNumber,
    Photo,
    Role,
    User,
    X509Certificate,
)

Document = Union[BaseResource, ErrorResponse]

RESOURCE_CLASSES: tuple[type, ...] = (
    User,
    Group,
    ResourceType,
    ServiceProviderConfig,
    Schema,
    ErrorResponse,
)

__all__ = [
    "Address",
    "Attribute",
    "AuthenticationScheme",
    "BaseResource",
    "BulkSupport",
    "Document",
    "Email",
    "EnterpriseUser",
    "Entitlement",
    "ErrorResponse",
    "FilterSupport",
    "Group",
    "GroupMembership",
    "Im",
    "Manager",
    "Member",
    "Meta",
    "MultiValued",
    "Name",
    "PhoneNumber",
    "Photo",
    "RESOURCE_CLASSES",
    "Resource",
    "ResourceType",
    "Role",
    "Schema",
    "SchemaExtension",
    "ServiceProviderConfig",
    "Supported",
    "SubAttribute",
    "User",
    "X509Certificate",
]
