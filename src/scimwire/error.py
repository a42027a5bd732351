from collections import defaultdict
from copy import copy
from enum import Enum
from typing import Any, Collection, Iterator, Optional, Sequence, TypedDict, Union

from typing_extensions import NotRequired

from scimwire.identifiers import Location, render_location
from scimwire.resources.error import ErrorResponse


class ScimErrorType(str, Enum):
    INVALID_FILTER = "invalidFilter"
    TOO_MANY = "tooMany"
    UNIQUENESS = "uniqueness"
    MUTABILITY = "mutability"
    INVALID_SYNTAX = "invalidSyntax"
    INVALID_PATH = "invalidPath"
    NO_TARGET = "noTarget"
    INVALID_VALUE = "invalidValue"
    INVALID_VERS = "invalidVers"
    SENSITIVE = "sensitive"


class ValidationRule(str, Enum):
    REQUIRED = "required"
    CANONICAL_VALUE = "canonicalValue"
    PRIMARY_UNIQUENESS = "primaryUniqueness"
    SCHEMA_CONSISTENCY = "schemaConsistency"
    FORMAT = "format"


class ValidationViolation:
    """
    Represents a broken structural rule. Uniquely identified by the violation code.

    Pre-formatted messages stored in `message_by_code` can be modified, as long as embedded
    string parameters stay the same.
    """

    message_by_code = {
        1: "bad value syntax, expecting {expected}",
        2: "missing",
        3: "must be equal to {value!r}",
        4: "{value!r} is not one of: {expected_values}",
        5: "contains duplicates, which are not allowed",
        6: "missing main schema {schema!r}",
        7: "missing schema extension {extension!r}",
        8: "'primary' attribute set to 'True' MUST appear no more than once",
        9: "must not be earlier than {other!r}",
        10: "must not be negative",
        11: "extension key {extension!r} is not a schema URI",
    }

    rule_by_code = {
        1: ValidationRule.FORMAT,
        2: ValidationRule.REQUIRED,
        3: ValidationRule.FORMAT,
        4: ValidationRule.CANONICAL_VALUE,
        5: ValidationRule.SCHEMA_CONSISTENCY,
        6: ValidationRule.SCHEMA_CONSISTENCY,
        7: ValidationRule.SCHEMA_CONSISTENCY,
        8: ValidationRule.PRIMARY_UNIQUENESS,
        9: ValidationRule.FORMAT,
        10: ValidationRule.FORMAT,
        11: ValidationRule.SCHEMA_CONSISTENCY,
    }

    def __init__(
        self,
        code: int,
        scim_error: Union[str, ScimErrorType] = ScimErrorType.INVALID_VALUE,
        message: Optional[str] = None,
        location: Location = (),
        **context: Any,
    ):
        """
        Args:
            code: The violation code. One of built-in codes (see `message_by_code`).
            scim_error: SCIM error keyword corresponding to the violation.
            message: Violation message. Replaces built-in message, if provided.
            location: Location of the violating attribute, e.g. `("emails", 0, "type")`.
            **context: Parameters passed to pre-formatted messages.
        """
        if code not in self.message_by_code:
            raise ValueError(f"unknown violation code {code}")
        self.code = code
        if message is None:
            message = self.message_by_code[code].format(**context)
        self.message = message
        self.context = context
        self.scim_error = ScimErrorType(scim_error)
        self.location = tuple(location)

    @property
    def rule(self) -> ValidationRule:
        return self.rule_by_code[self.code]

    @property
    def path(self) -> str:
        """Attribute path of the violation, e.g. `emails[0].type`."""
        return render_location(self.location)

    def at(self, location: Sequence[Union[str, int]]) -> "ValidationViolation":
        """Returns a copy of the violation, bound to the provided `location`."""
        bound = copy(self)
        bound.location = tuple(location)
        return bound

    @classmethod
    def bad_value_syntax(cls, expected: str, scim_error: str = ScimErrorType.INVALID_SYNTAX):
        return cls(code=1, scim_error=scim_error, expected=expected)

    @classmethod
    def missing(cls, scim_error: str = ScimErrorType.INVALID_VALUE):
        return cls(code=2, scim_error=scim_error)

    @classmethod
    def must_be_equal_to(cls, value: Any, scim_error: str = ScimErrorType.INVALID_VALUE):
        return cls(code=3, scim_error=scim_error, value=value)

    @classmethod
    def must_be_one_of(
        cls,
        value: Any,
        expected_values: Collection[Any],
        scim_error: str = ScimErrorType.INVALID_VALUE,
    ):
        return cls(
            code=4,
            scim_error=scim_error,
            value=value,
            expected_values=list(expected_values),
        )

    @classmethod
    def duplicated_values(cls, scim_error: str = ScimErrorType.INVALID_VALUE):
        return cls(code=5, scim_error=scim_error)

    @classmethod
    def missing_main_schema(cls, schema: str, scim_error: str = ScimErrorType.INVALID_VALUE):
        return cls(code=6, scim_error=scim_error, schema=schema)

    @classmethod
    def missing_schema_extension(
        cls,
        extension: str,
        scim_error: str = ScimErrorType.INVALID_VALUE,
    ):
        return cls(code=7, scim_error=scim_error, extension=extension)

    @classmethod
    def multiple_primary_values(cls, scim_error: str = ScimErrorType.INVALID_VALUE):
        return cls(code=8, scim_error=scim_error)

    @classmethod
    def earlier_than(cls, other: str, scim_error: str = ScimErrorType.INVALID_VALUE):
        return cls(code=9, scim_error=scim_error, other=other)

    @classmethod
    def negative(cls, scim_error: str = ScimErrorType.INVALID_VALUE):
        return cls(code=10, scim_error=scim_error)

    @classmethod
    def invalid_extension_key(cls, extension: str, scim_error: str = ScimErrorType.INVALID_VALUE):
        return cls(code=11, scim_error=scim_error, extension=extension)

    def to_error_response(self, status: int = 400) -> ErrorResponse:
        return ErrorResponse(
            status=str(status),
            scim_type=self.scim_error.value,
            detail=f"{self.path or '<root>'}: {self.message}",
        )

    def __eq__(self, other):
        if not isinstance(other, ValidationViolation):
            return False
        return self.code == other.code and self.location == other.location

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.path or '<root>'}: {self.message})"


class ValidationWarning:
    """
    Represents an advisory finding that does not make the resource invalid.
    Uniquely identified by the warning code.
    """

    message_by_code = {
        1: (
            "multi-valued complex attribute should contain a given type-value pair "
            "no more than once"
        ),
        2: "unexpected content, {reason}",
        3: "should not equal to {value}",
        4: "missing",
    }

    def __init__(self, code: int, message: Optional[str] = None, **context: Any):
        if code not in self.message_by_code:
            raise ValueError(f"unknown warning code {code}")
        self.code = code
        if message is None:
            message = self.message_by_code[code].format(**context)
        self.message = message
        self.context = context

    @classmethod
    def multiple_type_value_pairs(cls):
        return cls(code=1)

    @classmethod
    def unexpected_content(cls, reason: str):
        return cls(code=2, reason=reason)

    @classmethod
    def should_not_equal_to(cls, value: Any):
        return cls(code=3, value=value)

    @classmethod
    def missing(cls):
        return cls(code=4)

    def __eq__(self, other):
        if not isinstance(other, ValidationWarning):
            return False
        return self.code == other.code


class ValidationIssueDict(TypedDict):
    code: int
    error: NotRequired[str]
    context: NotRequired[dict]


class ValidationIssues:
    """
    Keeps track of validation violations and warnings, by locations where they were added.
    """

    def __init__(self) -> None:
        self._errors: dict[Location, list[ValidationViolation]] = defaultdict(list)
        self._warnings: dict[Location, list[ValidationWarning]] = defaultdict(list)

    @property
    def errors(self) -> Iterator[tuple[Location, list[ValidationViolation]]]:
        """Violations by locations where they were added."""
        return iter(self._errors.items())

    @property
    def warnings(self) -> Iterator[tuple[Location, list[ValidationWarning]]]:
        """Warnings by locations where they were added."""
        return iter(self._warnings.items())

    @property
    def violations(self) -> list[ValidationViolation]:
        """All violations, flattened and bound to their locations."""
        return [
            violation.at(location)
            for location, violations in self._errors.items()
            for violation in violations
        ]

    def merge(
        self,
        issues: "ValidationIssues",
        location: Optional[Sequence[Union[str, int]]] = None,
    ) -> None:
        """
        Merges provided validation `issues` under specified `location`, if specified, in the
        top-level otherwise.
        """
        location = tuple(location or tuple())
        for other_location, errors in issues._errors.items():
            self._errors[location + other_location].extend(errors)
        for other_location, warnings in issues._warnings.items():
            self._warnings[location + other_location].extend(warnings)

    def add_error(
        self,
        issue: ValidationViolation,
        location: Optional[Sequence[Union[str, int]]] = None,
    ) -> None:
        """Adds a violation under specified `location`, if specified, in the top-level."""
        self._errors[tuple(location or tuple())].append(issue)

    def add_warning(
        self,
        issue: ValidationWarning,
        location: Optional[Sequence[Union[str, int]]] = None,
    ) -> None:
        """Adds a warning under specified `location`, if specified, in the top-level."""
        self._warnings[tuple(location or tuple())].append(issue)

    def get(self, location: Sequence[Union[str, int]]) -> "ValidationIssues":
        """Retrieves issues for the specified `location` and everything nested under it."""
        copy_ = ValidationIssues()
        location = tuple(location)
        for location_, errors in self._errors.items():
            if location_[: len(location)] == location:
                copy_._errors[location_[len(location) :]].extend(errors)
        for location_, warnings in self._warnings.items():
            if location_[: len(location)] == location:
                copy_._warnings[location_[len(location) :]].extend(warnings)
        return copy_

    def has_errors(self, *locations: Sequence[Union[str, int]]) -> bool:
        """
        Returns flag indicating whether any violations have been added under specified
        `locations`, or anywhere, if no location is provided.
        """
        if not locations:
            locations = (tuple(),)

        for location in locations:
            location = tuple(location)
            for issue_location, errors in self._errors.items():
                if errors and issue_location[: len(location)] == location:
                    return True
        return False

    def to_error_response(self, status: int = 400) -> ErrorResponse:
        """
        Summarizes all violations in a single error message. SCIM error keyword is taken
        from the first violation.

        Raises:
            ValueError: If there are no violations.
        """
        violations = self.violations
        if not violations:
            raise ValueError("no violations to report")
        return ErrorResponse(
            status=str(status),
            scim_type=violations[0].scim_error.value,
            detail="; ".join(
                f"{violation.path or '<root>'}: {violation.message}" for violation in violations
            ),
        )

    def to_dict(self, msg: bool = False, ctx: bool = False) -> dict:
        """
        Converts `ValidationIssues` to a dictionary nested by locations.
        """
        output: dict = {}
        self._to_dict("_errors", self._errors, output, msg=msg, ctx=ctx)
        self._to_dict("_warnings", self._warnings, output, msg=msg, ctx=ctx)
        return output

    @staticmethod
    def _to_dict(key: str, structure: dict, output: dict, msg: bool, ctx: bool) -> dict:
        for location, issues in structure.items():
            if not issues:
                continue
            current_level = output
            for part in location:
                current_level = current_level.setdefault(str(part), {})
            current_level[key] = [
                ValidationIssues._issue_to_dict(issue, msg=msg, ctx=ctx) for issue in issues
            ]
        return output

    @staticmethod
    def _issue_to_dict(
        issue: Union[ValidationViolation, ValidationWarning],
        msg: bool = False,
        ctx: bool = False,
    ) -> ValidationIssueDict:
        output: ValidationIssueDict = {"code": issue.code}
        if msg:
            output["error"] = issue.message
        if ctx:
            output["context"] = issue.context
        return output


class ScimwireError(Exception):
    """Base class for failures raised by the library."""


class SerializationFailure(ScimwireError):
    """
    Raised when a resource can not be encoded as JSON, e.g. because of non-representable
    numeric value. Never raised because of semantic problems with the resource.
    """


class FailureReason(str, Enum):
    INVALID_JSON = "invalidJson"
    NOT_AN_OBJECT = "notAnObject"
    WRONG_TYPE = "wrongType"
    MISSING_ELEMENT = "missingElement"
    UNKNOWN_RESOURCE = "unknownResource"


class DeserializationFailure(ScimwireError):
    """
    Raised when a document can not be turned into a resource.

    Attributes:
        reason: What kind of problem was found.
        location: Location of the first offending element, empty for the whole document.
        errors: All offending elements found, as pairs of location and explanation.
    """

    def __init__(
        self,
        reason: FailureReason,
        detail: str,
        location: Sequence[Union[str, int]] = (),
        errors: Optional[Sequence[tuple[Location, str]]] = None,
    ):
        self.reason = FailureReason(reason)
        self.detail = detail
        self.location = tuple(location)
        self.errors = list(errors or [(self.location, detail)])
        super().__init__(f"{self.path or '<document>'}: {detail}")

    @property
    def path(self) -> str:
        return render_location(self.location)

    @property
    def scim_error(self) -> ScimErrorType:
        if self.reason == FailureReason.WRONG_TYPE:
            return ScimErrorType.INVALID_VALUE
        return ScimErrorType.INVALID_SYNTAX

    def to_error_response(self, status: int = 400) -> ErrorResponse:
        return ErrorResponse(
            status=str(status),
            scim_type=self.scim_error.value,
            detail=str(self),
        )
