import pytest

from scimwire.constants import GROUP_SCHEMA, RESOURCE_TYPE_SCHEMA, SCHEMA_SCHEMA, USER_SCHEMA
from scimwire.data.records import is_empty_value
from scimwire.resources import (
    BulkSupport,
    Email,
    EnterpriseUser,
    Group,
    Manager,
    Meta,
    Name,
    ResourceType,
    Schema,
    ServiceProviderConfig,
    Supported,
    User,
)


@pytest.mark.parametrize(
    ("resource_cls", "expected_schemas"),
    (
        (User, [USER_SCHEMA]),
        (Group, [GROUP_SCHEMA]),
        (ResourceType, [RESOURCE_TYPE_SCHEMA]),
        (Schema, [SCHEMA_SCHEMA]),
    ),
)
def test_resource_schemas_default_to_base_schema(resource_cls, expected_schemas):
    assert resource_cls().schemas == expected_schemas


def test_optional_fields_default_to_empty_values():
    user = User()

    assert user.user_name is None
    assert user.name is None
    assert user.emails == []
    assert user.enterprise_user is None
    assert user.extensions == {}


def test_multi_valued_defaults_are_not_shared():
    first, second = User(), User()

    first.emails.append(Email(value="a@example.com"))

    assert second.emails == []


def test_service_provider_config_features_default_to_not_supported():
    config = ServiceProviderConfig()

    assert config.patch == Supported(supported=False)
    assert config.bulk == BulkSupport(supported=False)
    assert config.authentication_schemes == []


def test_assigning_unknown_field_fails():
    user = User()

    with pytest.raises(AttributeError, match="has no field 'nickname'"):
        user.nickname = "Babs"


def test_passing_unknown_field_fails():
    with pytest.raises(TypeError):
        User(nickname="Babs")


@pytest.mark.parametrize(
    ("field_name", "value"),
    (
        ("user_name", 42),
        ("active", "true"),
        ("active", 1),
        ("name", {"givenName": "Barbara"}),
        ("emails", [Name(given_name="Barbara")]),
        ("emails", Email(value="bjensen@example.com")),
        ("schemas", "urn:ietf:params:scim:schemas:core:2.0:User"),
    ),
)
def test_assigning_value_of_bad_type_fails(field_name, value):
    user = User()

    with pytest.raises(TypeError, match=f"User.{field_name} must be"):
        setattr(user, field_name, value)


def test_bad_type_is_rejected_on_construction():
    with pytest.raises(TypeError, match="BulkSupport.max_operations must be"):
        BulkSupport(supported=True, max_operations=True)


def test_nested_records_are_accepted():
    user = User(name=Name(given_name="Barbara"), emails=[Email(value="bjensen@example.com")])

    assert user.name.given_name == "Barbara"
    assert user.emails[0].value == "bjensen@example.com"


@pytest.mark.parametrize(
    ("record", "expected"),
    (
        (Name(), True),
        (Name(given_name="Barbara"), False),
        (Meta(), True),
        (Meta(version='W/"1"'), False),
        (Supported(), True),
        (Supported(supported=True), False),
        (EnterpriseUser(manager=Manager()), True),
        (EnterpriseUser(manager=Manager(display_name="John Smith")), False),
    ),
)
def test_record_emptiness_is_reported(record, expected):
    assert record.is_empty() is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    (
        (None, True),
        ([], True),
        ({}, True),
        (Name(), True),
        ("", False),
        (0, False),
        (False, False),
        ([Name()], False),
        ({"badgeId": "42"}, False),
    ),
)
def test_value_emptiness_is_reported(value, expected):
    assert is_empty_value(value) is expected
