"""
Mapping between model field names and SCIM wire attribute names.

Field names of the model follow Python conventions, and attribute names colliding
with keywords or builtins are decorated (`type_` for `type`, `ref` for `$ref`). This
table is the only place where the two naming schemes meet. Both serialization and
deserialization use it, so every model field must have exactly one entry.
"""

from types import MappingProxyType
from typing import Mapping

from scimwire.constants import ENTERPRISE_USER_SCHEMA

WIRE_NAMES: Mapping[str, str] = MappingProxyType(
    {
        # common
        "schemas": "schemas",
        "id": "id",
        "external_id": "externalId",
        "meta": "meta",
        "resource_type": "resourceType",
        "created": "created",
        "last_modified": "lastModified",
        "location": "location",
        "version": "version",
        # multi-valued complex attributes
        "value": "value",
        "display": "display",
        "type_": "type",
        "primary": "primary",
        "ref": "$ref",
        # User
        "user_name": "userName",
        "name": "name",
        "formatted": "formatted",
        "family_name": "familyName",
        "given_name": "givenName",
        "middle_name": "middleName",
        "honorific_prefix": "honorificPrefix",
        "honorific_suffix": "honorificSuffix",
        "display_name": "displayName",
        "nick_name": "nickName",
        "profile_url": "profileUrl",
        "title": "title",
        "user_type": "userType",
        "preferred_language": "preferredLanguage",
        "locale": "locale",
        "timezone": "timezone",
        "active": "active",
        "password": "password",
        "emails": "emails",
        "phone_numbers": "phoneNumbers",
        "ims": "ims",
        "photos": "photos",
        "addresses": "addresses",
        "street_address": "streetAddress",
        "locality": "locality",
        "region": "region",
        "postal_code": "postalCode",
        "country": "country",
        "groups": "groups",
        "entitlements": "entitlements",
        "roles": "roles",
        "x509_certificates": "x509Certificates",
        "enterprise_user": ENTERPRISE_USER_SCHEMA,
        # enterprise User extension
        "employee_number": "employeeNumber",
        "cost_center": "costCenter",
        "organization": "organization",
        "division": "division",
        "department": "department",
        "manager": "manager",
        # Group
        "members": "members",
        # ResourceType
        "description": "description",
        "endpoint": "endpoint",
        "schema": "schema",
        "schema_extensions": "schemaExtensions",
        "required": "required",
        # ServiceProviderConfig
        "documentation_uri": "documentationUri",
        "patch": "patch",
        "bulk": "bulk",
        "filter": "filter",
        "change_password": "changePassword",
        "sort": "sort",
        "etag": "etag",
        "authentication_schemes": "authenticationSchemes",
        "supported": "supported",
        "max_operations": "maxOperations",
        "max_payload_size": "maxPayloadSize",
        "max_results": "maxResults",
        "spec_uri": "specUri",
        # Schema
        "attributes": "attributes",
        "multi_valued": "multiValued",
        "canonical_values": "canonicalValues",
        "case_exact": "caseExact",
        "mutability": "mutability",
        "returned": "returned",
        "uniqueness": "uniqueness",
        "reference_types": "referenceTypes",
        "sub_attributes": "subAttributes",
        # Error
        "status": "status",
        "scim_type": "scimType",
        "detail": "detail",
    }
)

FIELD_NAMES: Mapping[str, str] = MappingProxyType(
    {wire_name: field_name for field_name, wire_name in WIRE_NAMES.items()}
)


def to_wire(field_name: str) -> str:
    """
    Returns wire attribute name for the model `field_name`.

    Raises:
        KeyError: If the field is not known.
    """
    try:
        return WIRE_NAMES[field_name]
    except KeyError:
        raise KeyError(f"no wire name for field {field_name!r}") from None


def from_wire(wire_name: str) -> str:
    """
    Returns model field name for the `wire_name`, which must be spelled canonically.

    Raises:
        KeyError: If the wire name is not known.
    """
    try:
        return FIELD_NAMES[wire_name]
    except KeyError:
        raise KeyError(f"no field for wire name {wire_name!r}") from None
