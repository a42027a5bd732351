"""
Structural validation of documents.

Validation reports, it never repairs. All rules are checked independently, so the result
aggregates every violation found. Violations make the document invalid. Warnings are
advisory and are available through `collect_issues` only.
"""

import base64
import binascii
import re
import zoneinfo
from collections import defaultdict
from datetime import datetime, timezone
from typing import Any, Callable, Optional
from urllib.parse import urlparse

import iso3166
import phonenumbers
import precis_i18n

from scimwire.constants import (
    ATTRIBUTE_MUTABILITY,
    ATTRIBUTE_RETURNED,
    ATTRIBUTE_UNIQUENESS,
    ENTERPRISE_USER_SCHEMA,
)
from scimwire.data.records import Record, is_empty_value, record_fields
from scimwire.error import ValidationIssues, ValidationViolation, ValidationWarning
from scimwire.identifiers import SchemaURI, find_schema, is_schema_uri
from scimwire.naming import to_wire
from scimwire.resources import (
    Attribute,
    BulkSupport,
    Document,
    FilterSupport,
    Meta,
    SubAttribute,
    User,
)

_ACCEPT_LANGUAGE_REGEX = re.compile(
    r"\s*([a-z]{2})(?:-[A-Z]{2})?(?:\s*;q=([0-9]\.[0-9]))?(?:\s*,|$)"
)
_LANGUAGE_TAG_REGEX = re.compile(
    "^(((en-GB-oed|i-ami|i-bnn|i-default|i-enochian|i-hak|i-klingon|i-lux|"
    "-mingo|i-navajo|i-pwn|i-tao|i-tay|i-tsu|sgn-BE-FR|sgn-BE-NL|sgn-CH-DE)|(art-lojban|"
    "el-gaulish|no-bok|no-nyn|zh-guoyu|zh-hakka|zh-min|zh-min-nan|zh-xiang))|(("
    "([A-Za-z]{2,3}(-([A-Za-z]{3}(-[A-Za-z]{3}){0,2}))?)|[A-Za-z]{4}|[A-Za-z]{5,8})"
    "(-([A-Za-z]{4}))?(-([A-Za-z]{2}|[0-9]{3}))?(-([A-Za-z0-9]{5,8}"
    "|[0-9][A-Za-z0-9]{3}))*(-([0-9A-WY-Za-wy-z](-[A-Za-z0-9]{2,8})+))*"
    "(-(x(-[A-Za-z0-9]{1,8})+))?)|(x(-[A-Za-z0-9]{1,8})+))$"
)
_EMAIL_REGEX = re.compile(
    r"(?:[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*|\""
    r"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21\x23-\x5b\x5d-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])*\""
    r")@(?:(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?|"
    r"\[(?:(2(5[0-5]|[0-4][0-9])|1[0-9][0-9]|[1-9]?[0-9])\.){3}(?:(2(5[0-5]|[0-4][0-9])"
    r"|1[0-9][0-9]|[1-9]?[0-9])|[a-z0-9-]*[a-z0-9]:"
    r"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21-\x5a\x53-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])+)])",
    flags=re.IGNORECASE,
)
_USERNAME_PROFILE = precis_i18n.get_profile("UsernameCaseMapped")


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def _parse_datetime(value: str) -> Optional[datetime]:
    if len(value) < 11 or value[10] not in "Tt":
        return None
    if value[-1] in "Zz":
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def _is_absolute_url(value: str) -> bool:
    result = urlparse(value)
    return all([result.scheme, result.netloc])


def _validate_single_primary_value(items: list[Record]) -> ValidationIssues:
    issues = ValidationIssues()
    primary_entries = 0
    for item in items:
        if getattr(item, "primary", None) is True:
            primary_entries += 1
    if primary_entries > 1:
        issues.add_error(issue=ValidationViolation.multiple_primary_values())
    return issues


def _validate_type_value_pairs(items: list[Record]) -> ValidationIssues:
    issues = ValidationIssues()
    pairs: dict[tuple[Any, Any], int] = defaultdict(int)
    for item in items:
        type_ = getattr(item, "type_", None)
        value = getattr(item, "value", None)
        if type_ and value:
            pairs[type_, value] += 1
    for count in pairs.values():
        if count > 1:
            issues.add_warning(issue=ValidationWarning.multiple_type_value_pairs())
    return issues


def _validate_multi_valued(items: list[Record]) -> ValidationIssues:
    issues = ValidationIssues()
    for i, item in enumerate(items):
        issues.merge(_validate_record(item), location=(i,))
    fields_ = record_fields(type(items[0]))
    if "primary" in fields_:
        issues.merge(_validate_single_primary_value(items))
    if "type_" in fields_ and "value" in fields_:
        issues.merge(_validate_type_value_pairs(items))
    return issues


def _validate_bulk_support(record: BulkSupport) -> ValidationIssues:
    issues = ValidationIssues()
    if record.supported:
        for name, value in [
            ("max_operations", record.max_operations),
            ("max_payload_size", record.max_payload_size),
        ]:
            if value is None:
                issues.add_error(issue=ValidationViolation.missing(), location=(to_wire(name),))
    return issues


def _validate_filter_support(record: FilterSupport) -> ValidationIssues:
    issues = ValidationIssues()
    if record.supported and record.max_results is None:
        issues.add_error(
            issue=ValidationViolation.missing(), location=(to_wire("max_results"),)
        )
    return issues


def _validate_email(value: str) -> ValidationIssues:
    issues = ValidationIssues()
    if _EMAIL_REGEX.fullmatch(value) is None:
        issues.add_warning(issue=ValidationWarning.unexpected_content("not a valid email address"))
    return issues


def _validate_phone_number(value: str) -> ValidationIssues:
    issues = ValidationIssues()
    try:
        phonenumbers.parse(value, _check_region=False)
    except phonenumbers.NumberParseException:
        issues.add_warning(issue=ValidationWarning.unexpected_content("not a valid phone number"))
    return issues


def _validate_country(value: str) -> ValidationIssues:
    issues = ValidationIssues()
    if iso3166.countries_by_alpha2.get(value) is None:
        issues.add_warning(
            issue=ValidationWarning.unexpected_content("not a valid ISO 3166-1 alpha-2 code")
        )
    return issues


def _validate_timezone(value: str) -> ValidationIssues:
    issues = ValidationIssues()
    try:
        zoneinfo.ZoneInfo(value)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        issues.add_warning(issue=ValidationWarning.unexpected_content("unknown time zone"))
    return issues


def _validate_locale(value: str) -> ValidationIssues:
    issues = ValidationIssues()
    if _LANGUAGE_TAG_REGEX.fullmatch(value) is None:
        issues.add_warning(issue=ValidationWarning.unexpected_content("not a valid language tag"))
    return issues


def _validate_preferred_language(value: str) -> ValidationIssues:
    issues = ValidationIssues()
    if _ACCEPT_LANGUAGE_REGEX.fullmatch(value) is None:
        issues.add_warning(
            issue=ValidationWarning.unexpected_content("not a valid 'Accept-Language' value")
        )
    return issues


def _validate_url(value: str) -> ValidationIssues:
    issues = ValidationIssues()
    if not _is_absolute_url(value):
        issues.add_warning(issue=ValidationWarning.unexpected_content("not an absolute URL"))
    return issues


def _validate_base64(value: str) -> ValidationIssues:
    issues = ValidationIssues()
    try:
        base64.b64decode(value, validate=True)
    except binascii.Error:
        issues.add_warning(issue=ValidationWarning.unexpected_content("not a valid base64 value"))
    return issues


def _validate_user_name(value: str) -> ValidationIssues:
    issues = ValidationIssues()
    try:
        _USERNAME_PROFILE.enforce(value)
    except UnicodeError:
        issues.add_warning(
            issue=ValidationWarning.unexpected_content(
                "not compliant with PRECIS 'UsernameCaseMapped' profile"
            )
        )
    return issues


def _validate_user(user: User) -> ValidationIssues:
    issues = ValidationIssues()
    value_validators: list[tuple[tuple, Optional[str], Callable[[str], ValidationIssues]]] = [
        ((to_wire("user_name"),), user.user_name, _validate_user_name),
        ((to_wire("profile_url"),), user.profile_url, _validate_url),
        ((to_wire("preferred_language"),), user.preferred_language, _validate_preferred_language),
        ((to_wire("locale"),), user.locale, _validate_locale),
        ((to_wire("timezone"),), user.timezone, _validate_timezone),
    ]
    for name, attr, validator in [
        ("emails", "value", _validate_email),
        ("phone_numbers", "value", _validate_phone_number),
        ("photos", "value", _validate_url),
        ("addresses", "country", _validate_country),
        ("x509_certificates", "value", _validate_base64),
    ]:
        for i, item in enumerate(getattr(user, name)):
            value_validators.append(
                ((to_wire(name), i, to_wire(attr)), getattr(item, attr), validator)
            )
    for location, value, validator in value_validators:
        if value:
            issues.merge(validator(value), location=location)

    if user.user_name and user.nick_name and user.user_name == user.nick_name:
        issues.add_warning(
            issue=ValidationWarning.should_not_equal_to(f"{to_wire('user_name')!r} attribute"),
            location=(to_wire("nick_name"),),
        )
    return issues


def _validate_attribute(record: SubAttribute) -> ValidationIssues:
    issues = ValidationIssues()
    for name, allowed in [
        ("mutability", ATTRIBUTE_MUTABILITY),
        ("returned", ATTRIBUTE_RETURNED),
        ("uniqueness", ATTRIBUTE_UNIQUENESS),
    ]:
        value = getattr(record, name)
        if value is not None and value not in allowed:
            issues.add_error(
                issue=ValidationViolation.must_be_one_of(value, allowed),
                location=(to_wire(name),),
            )
    if record.type_ == "string" and record.case_exact is None:
        issues.add_error(issue=ValidationViolation.missing(), location=(to_wire("case_exact"),))
    if isinstance(record, Attribute) and record.type_ == "complex" and not record.sub_attributes:
        issues.add_warning(
            issue=ValidationWarning.missing(), location=(to_wire("sub_attributes"),)
        )
    return issues


_record_validators: dict[type, Callable[[Any], ValidationIssues]] = {
    Attribute: _validate_attribute,
    BulkSupport: _validate_bulk_support,
    FilterSupport: _validate_filter_support,
    SubAttribute: _validate_attribute,
    User: _validate_user,
}


def _validate_record(record: Record) -> ValidationIssues:
    issues = ValidationIssues()
    canonical_types = getattr(record, "canonical_types", None)
    type_ = getattr(record, "type_", None)
    if canonical_types is not None and type_ is not None and type_ not in canonical_types:
        issues.add_error(
            issue=ValidationViolation.must_be_one_of(type_, canonical_types),
            location=("type",),
        )

    for name, (field, _) in record_fields(type(record)).items():
        if not field.metadata.get("wire", True) or name in ("schemas", "meta"):
            continue
        location = (to_wire(name),)
        value = getattr(record, name)
        if field.metadata.get("required") and _is_missing(value):
            issues.add_error(issue=ValidationViolation.missing(), location=location)
        elif isinstance(value, Record):
            issues.merge(_validate_record(value), location=location)
        elif isinstance(value, list) and value and isinstance(value[0], Record):
            issues.merge(_validate_multi_valued(value), location=location)
        elif isinstance(value, int) and not isinstance(value, bool) and value < 0:
            issues.add_error(issue=ValidationViolation.negative(), location=location)

    validator = _record_validators.get(type(record))
    if validator is not None:
        issues.merge(validator(record))
    return issues


def _populated_extensions(document: Document) -> list[str]:
    extensions = [
        key
        for key, payload in getattr(document, "extensions", {}).items()
        if not is_empty_value(payload)
    ]
    if not is_empty_value(getattr(document, "enterprise_user", None)):
        extensions.insert(0, ENTERPRISE_USER_SCHEMA)
    return extensions


def _validate_schemas(document: Document) -> ValidationIssues:
    issues = ValidationIssues()
    schemas = document.schemas
    if not schemas:
        issues.add_error(issue=ValidationViolation.missing(), location=("schemas",))
        return issues

    if find_schema(schemas, document.base_schema) is None:
        issues.add_error(
            issue=ValidationViolation.missing_main_schema(document.base_schema),
            location=("schemas",),
        )
    declared = [SchemaURI(item) if is_schema_uri(item) else item for item in schemas]
    if len(set(declared)) != len(declared):
        issues.add_error(issue=ValidationViolation.duplicated_values(), location=("schemas",))
    for extension in _populated_extensions(document):
        if not is_schema_uri(extension):
            issues.add_error(
                issue=ValidationViolation.invalid_extension_key(extension),
                location=("schemas",),
            )
        elif find_schema(schemas, extension) is None:
            issues.add_error(
                issue=ValidationViolation.missing_schema_extension(extension),
                location=("schemas",),
            )
    return issues


def _validate_meta(meta: Meta, resource_name: str) -> ValidationIssues:
    issues = ValidationIssues()
    if meta.resource_type is not None and meta.resource_type != resource_name:
        issues.add_error(
            issue=ValidationViolation.must_be_equal_to(resource_name),
            location=("resourceType",),
        )

    created, last_modified = None, None
    if meta.created is not None:
        created = _parse_datetime(meta.created)
        if created is None:
            issues.add_error(
                issue=ValidationViolation.bad_value_syntax("xsd:dateTime"),
                location=("created",),
            )
    if meta.last_modified is not None:
        last_modified = _parse_datetime(meta.last_modified)
        if last_modified is None:
            issues.add_error(
                issue=ValidationViolation.bad_value_syntax("xsd:dateTime"),
                location=("lastModified",),
            )
    if created is not None and last_modified is not None and last_modified < created:
        issues.add_error(
            issue=ValidationViolation.earlier_than("created"),
            location=("lastModified",),
        )

    if meta.location is not None and not (
        meta.location.startswith("/") or _is_absolute_url(meta.location)
    ):
        issues.add_error(
            issue=ValidationViolation.bad_value_syntax("absolute URI or path"),
            location=("location",),
        )
    return issues


def collect_issues(document: Document) -> ValidationIssues:
    """
    Validates the `document` and returns both violations and advisory warnings, by locations
    of attributes they relate to. Locations use wire attribute names, e.g.
    `("emails", 1, "type")`, and extension attributes are located under the extension URN.

    Mutability of attributes (e.g. `id` being issued by the service provider) is not checked.
    """
    issues = ValidationIssues()
    issues.merge(_validate_schemas(document))
    issues.merge(_validate_record(document))
    meta = getattr(document, "meta", None)
    if meta is not None:
        issues.merge(_validate_meta(meta, document.resource_name), location=("meta",))
    return issues


def validate(document: Document) -> list[ValidationViolation]:
    """
    Validates the `document` and returns all violations found, or an empty list if the
    document is valid. Violations are located, so `violation.path` names the offending
    attribute, e.g. `emails[1].type`.
    """
    return collect_issues(document).violations
