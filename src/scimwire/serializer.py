import json
import logging
import warnings
from typing import Any

from scimwire import codec
from scimwire.config import DEFAULT_CONFIG, CodecConfig
from scimwire.data.records import is_empty_value
from scimwire.error import SerializationFailure
from scimwire.identifiers import SchemaURI, is_schema_uri
from scimwire.resources import Document
from scimwire.warning import ScimwireUserWarning

logger = logging.getLogger(__name__)


def _extension_payloads(document: Document, data: dict[str, Any]) -> dict[SchemaURI, Any]:
    payloads: dict[SchemaURI, Any] = {}
    for key in [key for key in data if is_schema_uri(key)]:
        payloads[SchemaURI(key)] = data.pop(key)
    for key, payload in getattr(document, "extensions", {}).items():
        if is_empty_value(payload):
            continue
        if not is_schema_uri(key):
            warnings.warn(
                message=f"extension key {key!r} is not a schema URI, so it is not serialized",
                category=ScimwireUserWarning,
            )
            continue
        payloads[SchemaURI(key)] = payload
    return payloads


def to_dict(document: Document) -> dict[str, Any]:
    """
    Converts the `document` to its wire representation, as JSON-compatible dictionary.

    `schemas` goes first, other attributes follow in the order of model declaration, and
    extension payloads are placed last, in order of their appearance in `schemas`.
    Attributes left empty are omitted, and write-only attributes are never included.

    Extension payload is included only if its URN is declared in `schemas`. Populated payload
    of undeclared extension is dropped, and `ScimwireUserWarning` is emitted. The same goes
    for payloads kept under keys that are not schema URIs.
    """
    data = codec.dump(document)
    payloads = _extension_payloads(document, data)
    output = {"schemas": list(document.schemas)}
    output.update((key, value) for key, value in data.items() if key != "schemas")
    for schema in document.schemas:
        payload = payloads.pop(SchemaURI(schema), None) if is_schema_uri(schema) else None
        if payload is not None:
            output[schema] = payload
    for uri in payloads:
        warnings.warn(
            message=(
                f"extension {str(uri)!r} is populated but not declared in 'schemas', "
                "so it is not serialized"
            ),
            category=ScimwireUserWarning,
        )
    return output


def serialize(document: Document, config: CodecConfig = DEFAULT_CONFIG) -> str:
    """
    Serializes the `document` to JSON text. The output is deterministic, so the same
    document always produces the same text. No semantic validation is performed, so
    documents with empty required attributes are serialized as well.

    Raises:
        SerializationFailure: If the document contains values that can not be encoded
            as JSON, e.g. non-finite numbers in extension payloads.
    """
    data = to_dict(document)
    try:
        return json.dumps(
            data,
            indent=config.indent,
            sort_keys=config.sort_keys,
            ensure_ascii=config.ensure_ascii,
            allow_nan=False,
        )
    except (TypeError, ValueError) as error:
        logger.debug("failed to encode %s: %s", type(document).__name__, error)
        raise SerializationFailure(
            f"can not encode {type(document).__name__} as JSON: {error}"
        ) from error
