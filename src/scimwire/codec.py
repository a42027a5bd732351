"""
Conversion between records and JSON-compatible dictionaries, implemented with `marshmallow`.

Every record class gets a `marshmallow.Schema` built from its dataclass fields. Field types
are mapped as follows:

    str                 ---> marshmallow.fields.String
    bool                ---> StrictBoolean
    int                 ---> StrictInteger
    Record subclass     ---> marshmallow.fields.Nested
    list[...]           ---> marshmallow.fields.List

Attribute names on the wire come from `scimwire.naming`. Input keys are matched
case-insensitively, and unknown keys are excluded.
"""

from collections.abc import Mapping
from typing import Any, Union, cast, get_args, get_origin

import marshmallow

from scimwire.data.records import Record, is_empty_value, record_fields
from scimwire.error import DeserializationFailure, FailureReason
from scimwire.identifiers import Location, is_schema_uri
from scimwire.naming import to_wire
from scimwire.resources import RESOURCE_CLASSES


class StrictBoolean(marshmallow.fields.Boolean):
    """Accepts JSON booleans only, with no truthy or falsy coercion."""

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, bool):
            raise self.make_error("invalid")
        return value


class StrictInteger(marshmallow.fields.Integer):
    """Accepts JSON integers only. Booleans and numeric strings are rejected."""

    def __init__(self, **kwargs):
        super().__init__(strict=True, **kwargs)

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool):
            raise self.make_error("invalid")
        return super()._deserialize(value, attr, data, **kwargs)


_marshmallow_field_by_type: dict[type, type[marshmallow.fields.Field]] = {
    str: marshmallow.fields.String,
    bool: StrictBoolean,
    int: StrictInteger,
}
_schemas: dict[type, type[marshmallow.Schema]] = {}


def _get_field(hint: Any, **kwargs: Any) -> marshmallow.fields.Field:
    if get_origin(hint) is Union:
        (hint,) = [arg for arg in get_args(hint) if arg is not type(None)]
    if get_origin(hint) is list:
        (item_hint,) = get_args(hint)
        return marshmallow.fields.List(_get_field(item_hint), **kwargs)
    if isinstance(hint, type) and issubclass(hint, Record):
        return marshmallow.fields.Nested(get_schema(hint), **kwargs)
    return _marshmallow_field_by_type[hint](**kwargs)


def wire_names(record_cls: type[Record]) -> list[str]:
    """Returns wire names of the `record_cls` attributes, in declaration order."""
    return [
        to_wire(name)
        for name, (field, _) in record_fields(record_cls).items()
        if field.metadata.get("wire", True)
    ]


def _get_fields(record_cls: type[Record]) -> dict[str, marshmallow.fields.Field]:
    fields_: dict[str, marshmallow.fields.Field] = {}
    for name, (field, hint) in record_fields(record_cls).items():
        if not field.metadata.get("wire", True):
            continue
        fields_[name] = _get_field(
            hint,
            data_key=to_wire(name),
            allow_none=True,
            load_only=field.metadata.get("returned") == "never",
        )
    return fields_


def _collect_extensions(
    canonical_names: Mapping[str, str],
    original_data: Mapping[str, Any],
) -> dict[str, Any]:
    return {
        key: value
        for key, value in original_data.items()
        if is_schema_uri(key) and key.lower() not in canonical_names and value is not None
    }


def _get_processors(record_cls: type[Record]) -> dict[str, Any]:
    wire_order = wire_names(record_cls)
    if "meta" in wire_order:
        wire_order.remove("meta")
        wire_order.append("meta")
    canonical_names = {wire_name.lower(): wire_name for wire_name in wire_order}
    keeps_extensions = "extensions" in record_fields(record_cls)

    def _pre_load(_, data: Any, **__) -> Any:
        if not isinstance(data, Mapping):
            return data
        return {
            (canonical_names.get(key.lower(), key) if isinstance(key, str) else key): value
            for key, value in data.items()
        }

    def _post_load(_, data: dict[str, Any], original_data: Any, **__) -> Record:
        kwargs = {name: value for name, value in data.items() if value is not None}
        if keeps_extensions:
            extensions = _collect_extensions(canonical_names, original_data)
            if extensions:
                kwargs["extensions"] = extensions
        return record_cls(**kwargs)

    def _post_dump(_, data: dict[str, Any], **__) -> dict[str, Any]:
        return {
            key: data[key]
            for key in wire_order
            if key in data and not is_empty_value(data[key])
        }

    return {
        "Meta": type("Meta", (), {"unknown": marshmallow.EXCLUDE, "register": False}),
        "_pre_load": marshmallow.pre_load(_pre_load),
        "_post_load": marshmallow.post_load(_post_load, pass_original=True),
        "_post_dump": marshmallow.post_dump(_post_dump),
    }


def _create_schema(record_cls: type[Record]) -> type[marshmallow.Schema]:
    fields_ = _get_fields(record_cls)
    schema_cls = cast(
        type[marshmallow.Schema],
        marshmallow.Schema.from_dict(fields={**fields_}, name=f"{record_cls.__name__}Base"),
    )
    class_ = type(
        f"{record_cls.__name__}Schema",
        (schema_cls,),
        _get_processors(record_cls),
    )
    return cast(type[marshmallow.Schema], class_)


def get_schema(record_cls: type[Record]) -> type[marshmallow.Schema]:
    """Returns `marshmallow` schema class for the `record_cls`, creating it on first use."""
    if record_cls not in _schemas:
        _schemas[record_cls] = _create_schema(record_cls)
    return _schemas[record_cls]


def flatten_errors(messages: Any, location: Location = ()) -> list[tuple[Location, str]]:
    """
    Flattens nested `marshmallow` error messages to pairs of location and message, e.g.
    `{"emails": {1: {"primary": ["Not a valid boolean."]}}}` becomes
    `[(("emails", 1, "primary"), "Not a valid boolean.")]`.
    """
    if isinstance(messages, dict):
        output = []
        for key, value in messages.items():
            output.extend(
                flatten_errors(value, location if key == "_schema" else location + (key,))
            )
        return output
    if isinstance(messages, list):
        output = []
        for message in messages:
            output.extend(flatten_errors(message, location))
        return output
    return [(location, str(messages))]


def load(record_cls: type[Record], data: Mapping[str, Any]) -> Record:
    """
    Builds `record_cls` instance from JSON-compatible `data`.

    Raises:
        DeserializationFailure: If any value has unexpected type.
    """
    try:
        return get_schema(record_cls)().load(data)
    except marshmallow.ValidationError as error:
        errors = flatten_errors(error.messages)
        location, message = errors[0]
        raise DeserializationFailure(
            reason=FailureReason.WRONG_TYPE,
            detail=message,
            location=location,
            errors=errors,
        ) from error


def dump(record: Record) -> dict[str, Any]:
    """
    Converts the `record` to JSON-compatible dictionary, with empty values omitted.
    Write-only fields are never included.
    """
    return cast(dict[str, Any], get_schema(type(record))().dump(record))


for _resource_cls in RESOURCE_CLASSES:
    get_schema(_resource_cls)
