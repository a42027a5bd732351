from dataclasses import dataclass, field
from typing import ClassVar, Optional

from scimwire.constants import (
    ADDRESS_TYPES,
    EMAIL_TYPES,
    ENTERPRISE_USER_SCHEMA,
    GROUP_MEMBERSHIP_TYPES,
    IM_TYPES,
    PHONE_NUMBER_TYPES,
    PHOTO_TYPES,
    USER_SCHEMA,
)
from scimwire.data.records import Record
from scimwire.resources.base import Resource


@dataclass
class Name(Record):
    formatted: Optional[str] = None
    family_name: Optional[str] = None
    given_name: Optional[str] = None
    middle_name: Optional[str] = None
    honorific_prefix: Optional[str] = None
    honorific_suffix: Optional[str] = None


@dataclass
class MultiValued(Record):
    """
    Item of a multi-valued complex attribute. Subclasses restrict `type_` to
    `canonical_types`, unless it is `None`.
    """

    canonical_types: ClassVar[Optional[tuple[str, ...]]] = None

    value: Optional[str] = None
    display: Optional[str] = None
    type_: Optional[str] = None
    primary: Optional[bool] = None


@dataclass
class Email(MultiValued):
    canonical_types = EMAIL_TYPES


@dataclass
class PhoneNumber(MultiValued):
    canonical_types = PHONE_NUMBER_TYPES


@dataclass
class Im(MultiValued):
    canonical_types = IM_TYPES


@dataclass
class Photo(MultiValued):
    canonical_types = PHOTO_TYPES


@dataclass
class Entitlement(MultiValued):
    pass


@dataclass
class Role(MultiValued):
    pass


@dataclass
class X509Certificate(MultiValued):
    """DER-encoded certificate, in base64."""


@dataclass
class Address(Record):
    canonical_types: ClassVar[Optional[tuple[str, ...]]] = ADDRESS_TYPES

    formatted: Optional[str] = None
    street_address: Optional[str] = None
    locality: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    type_: Optional[str] = None
    primary: Optional[bool] = None


@dataclass
class GroupMembership(Record):
    """Group the user belongs to, either directly or through group nesting."""

    canonical_types: ClassVar[Optional[tuple[str, ...]]] = GROUP_MEMBERSHIP_TYPES

    value: Optional[str] = None
    ref: Optional[str] = None
    display: Optional[str] = None
    type_: Optional[str] = None


@dataclass
class Manager(Record):
    value: Optional[str] = None
    ref: Optional[str] = None
    display_name: Optional[str] = None


@dataclass
class EnterpriseUser(Record):
    """Payload of the enterprise User extension."""

    schema: ClassVar[str] = ENTERPRISE_USER_SCHEMA

    employee_number: Optional[str] = None
    cost_center: Optional[str] = None
    organization: Optional[str] = None
    division: Optional[str] = None
    department: Optional[str] = None
    manager: Optional[Manager] = None


@dataclass
class User(Resource):
    base_schema = USER_SCHEMA
    resource_name = "User"

    schemas: list[str] = field(
        default_factory=lambda: [USER_SCHEMA], metadata={"required": True}
    )
    user_name: Optional[str] = field(default=None, metadata={"required": True})
    name: Optional[Name] = None
    display_name: Optional[str] = None
    nick_name: Optional[str] = None
    profile_url: Optional[str] = None
    title: Optional[str] = None
    user_type: Optional[str] = None
    preferred_language: Optional[str] = None
    locale: Optional[str] = None
    timezone: Optional[str] = None
    active: Optional[bool] = None
    password: Optional[str] = field(default=None, metadata={"returned": "never"})
    emails: list[Email] = field(default_factory=list)
    phone_numbers: list[PhoneNumber] = field(default_factory=list)
    ims: list[Im] = field(default_factory=list)
    photos: list[Photo] = field(default_factory=list)
    addresses: list[Address] = field(default_factory=list)
    groups: list[GroupMembership] = field(default_factory=list)
    entitlements: list[Entitlement] = field(default_factory=list)
    roles: list[Role] = field(default_factory=list)
    x509_certificates: list[X509Certificate] = field(default_factory=list)
    enterprise_user: Optional[EnterpriseUser] = None
