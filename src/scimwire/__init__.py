from scimwire.config import DEFAULT_CONFIG, CodecConfig
from scimwire.deserializer import deserialize, try_parse
from scimwire.error import (
    DeserializationFailure,
    FailureReason,
    ScimwireError,
    SerializationFailure,
    ValidationIssues,
    ValidationViolation,
    ValidationWarning,
)
from scimwire.resources import (
    ErrorResponse,
    Group,
    ResourceType,
    Schema,
    ServiceProviderConfig,
    User,
)
from scimwire.serializer import serialize, to_dict
from scimwire.validator import collect_issues, validate

__all__ = [
    "CodecConfig",
    "DEFAULT_CONFIG",
    "DeserializationFailure",
    "ErrorResponse",
    "FailureReason",
    "Group",
    "ResourceType",
    "Schema",
    "ScimwireError",
    "SerializationFailure",
    "ServiceProviderConfig",
    "User",
    "ValidationIssues",
    "ValidationViolation",
    "ValidationWarning",
    "collect_issues",
    "deserialize",
    "serialize",
    "to_dict",
    "try_parse",
    "validate",
]
