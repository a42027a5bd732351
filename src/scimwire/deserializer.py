import json
import logging
from collections.abc import Mapping
from typing import Any, Optional, TypeVar, cast

from scimwire import codec
from scimwire.data.records import record_fields
from scimwire.error import DeserializationFailure, FailureReason
from scimwire.identifiers import find_schema, is_schema_uri
from scimwire.naming import FIELD_NAMES, from_wire
from scimwire.resources import RESOURCE_CLASSES, Document

logger = logging.getLogger(__name__)

TDocument = TypeVar("TDocument", bound=Document)


def get_document_class(schemas: list[Any]) -> Optional[type[Document]]:
    """
    Returns document class whose base schema is listed in `schemas`, or `None` if there
    is no such class. Letter case is ignored.
    """
    for document_cls in RESOURCE_CLASSES:
        if find_schema(schemas, document_cls.base_schema) is not None:
            return cast(type[Document], document_cls)
    return None


_wire_names_by_lower = {wire_name.lower(): wire_name for wire_name in FIELD_NAMES}


def _get_field_name(document_cls: type, key: str) -> Optional[str]:
    wire_name = _wire_names_by_lower.get(key.lower())
    if wire_name is None:
        return None
    field_name = from_wire(wire_name)
    return field_name if field_name in record_fields(document_cls) else None


def _log_ignored_keys(document_cls: type, data: Mapping[str, Any]) -> None:
    for key in data:
        if not isinstance(key, str) or _get_field_name(document_cls, key) is not None:
            continue
        if is_schema_uri(key):
            logger.debug("retaining extension %r in %s", key, document_cls.__name__)
        else:
            logger.debug("ignoring unknown attribute %r in %s", key, document_cls.__name__)


def try_parse(
    value: Any,
    resource_type: Optional[type[TDocument]] = None,
) -> TDocument:
    """
    Builds a document from already parsed JSON `value`.

    Any subset of attributes is accepted, since no semantic validation is performed. Unknown
    attributes are ignored, with the exception of top-level keys that look like schema URNs.
    The enterprise User extension is always loaded into `User.enterprise_user`, and other
    extensions are kept verbatim in `extensions`.

    Args:
        value: Parsed JSON document.
        resource_type: Class of the expected document. If not provided, the class is picked
            by the base schema listed in `schemas`.

    Raises:
        DeserializationFailure: If the value is not a JSON object, `schemas` is missing or
            malformed, the document class can not be determined, or any value has
            unexpected type.
    """
    if not isinstance(value, Mapping):
        raise DeserializationFailure(
            reason=FailureReason.NOT_AN_OBJECT,
            detail=f"expected JSON object, got {type(value).__name__}",
        )
    schemas_key = next(
        (key for key in value if isinstance(key, str) and key.lower() == "schemas"), None
    )
    if schemas_key is None:
        raise DeserializationFailure(
            reason=FailureReason.MISSING_ELEMENT,
            detail="'schemas' is missing",
            location=("schemas",),
        )
    schemas = value[schemas_key]
    if not isinstance(schemas, list):
        raise DeserializationFailure(
            reason=FailureReason.WRONG_TYPE,
            detail=f"'schemas' must be an array, got {type(schemas).__name__}",
            location=("schemas",),
        )
    document_cls = resource_type or get_document_class(schemas)
    if document_cls is None:
        raise DeserializationFailure(
            reason=FailureReason.UNKNOWN_RESOURCE,
            detail="no known base schema in 'schemas'",
            location=("schemas",),
        )
    _log_ignored_keys(document_cls, value)
    return cast(TDocument, codec.load(document_cls, value))


def deserialize(
    text: str,
    resource_type: Optional[type[TDocument]] = None,
) -> TDocument:
    """
    Parses JSON `text` and builds a document from it. See `try_parse` for details.

    Raises:
        DeserializationFailure: If the text is not valid JSON, or `try_parse` fails.
    """
    try:
        value = json.loads(text)
    except (TypeError, ValueError) as error:
        raise DeserializationFailure(
            reason=FailureReason.INVALID_JSON,
            detail=f"invalid JSON: {error}",
        ) from error
    return try_parse(value, resource_type=resource_type)

