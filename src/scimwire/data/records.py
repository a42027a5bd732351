from dataclasses import MISSING, Field, dataclass, fields
from functools import lru_cache
from typing import Any, Union, get_args, get_origin, get_type_hints


@lru_cache(maxsize=None)
def record_fields(cls: type) -> dict[str, tuple[Field, Any]]:
    """
    Returns dataclass fields of the record `cls` together with their resolved type hints,
    in declaration order. Class-level attributes (`ClassVar`) are not included.
    """
    hints = get_type_hints(cls)
    return {field.name: (field, hints[field.name]) for field in fields(cls)}


def _matches(value: Any, hint: Any) -> bool:
    if hint is Any:
        return True
    origin = get_origin(hint)
    if origin is Union:
        return any(_matches(value, arg) for arg in get_args(hint))
    if hint is type(None):
        return value is None
    if origin is list:
        (item_hint,) = get_args(hint)
        return isinstance(value, list) and all(_matches(item, item_hint) for item in value)
    if origin is dict:
        key_hint, _ = get_args(hint)
        return isinstance(value, dict) and all(_matches(key, key_hint) for key in value)
    if hint is bool:
        return isinstance(value, bool)
    if hint is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, hint)


def _describe(hint: Any) -> str:
    if isinstance(hint, type):
        return hint.__name__
    return str(hint).replace("typing.", "")


def _default(field: Field) -> Any:
    if field.default is not MISSING:
        return field.default
    if field.default_factory is not MISSING:
        return field.default_factory()
    return MISSING


@dataclass
class Record:
    """
    Base class for every complex value of the model. Subclasses are dataclasses.

    Field names and value types are checked when the record is built and whenever
    a field is assigned, so misspelled names and values of wrong types are rejected
    immediately instead of surfacing later, during serialization.

    "Not provided" and "provided but empty" share the same state: optional scalars
    and complex values default to `None`, and multi-valued attributes default to
    an empty list.
    """

    def __setattr__(self, name: str, value: Any) -> None:
        known = record_fields(type(self))
        if name not in known:
            raise AttributeError(f"{type(self).__name__!r} has no field {name!r}")
        _, hint = known[name]
        if not _matches(value, hint):
            raise TypeError(
                f"{type(self).__name__}.{name} must be {_describe(hint)}, "
                f"got {type(value).__name__}"
            )
        super().__setattr__(name, value)

    def is_empty(self) -> bool:
        """
        Tells whether every field of the record is left at its default value. Nested records
        that are themselves empty count as not provided.
        """
        for name, (field, _) in record_fields(type(self)).items():
            value, default = getattr(self, name), _default(field)
            if value == default:
                continue
            if is_empty_value(value) and is_empty_value(default):
                continue
            return False
        return True


def is_empty_value(value: Any) -> bool:
    """
    Tells whether the `value` is omitted on the wire: `None`, an empty list or mapping,
    or an empty record.
    """
    if isinstance(value, Record):
        return value.is_empty()
    return value is None or value == [] or value == {}
