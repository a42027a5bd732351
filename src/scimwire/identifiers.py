import re
from typing import Any, Iterable, Optional, Sequence, Union, cast

_URN = re.compile(r"urn:[a-z0-9][a-z0-9-]{0,31}:\S+", flags=re.IGNORECASE)

Location = tuple[Union[str, int], ...]


class SchemaURI(str):
    """
    Schema identifier. URNs are compared case-insensitively, so `SchemaURI` instances
    are equal to any string that differs only by letter case.
    """

    def __new__(cls, value: str) -> "SchemaURI":
        if not isinstance(value, SchemaURI) and not is_schema_uri(value):
            raise ValueError(f"{value!r} is not a valid schema URI")
        return cast(SchemaURI, str.__new__(cls, value))

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, str):
            other = other.lower()
        return self.lower() == other

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.lower())


def is_schema_uri(value: Any) -> bool:
    """Tells whether the `value` looks like a schema URN, e.g. a top-level extension key."""
    return isinstance(value, str) and _URN.fullmatch(value) is not None


def find_schema(schemas: Iterable[Any], schema: str) -> Optional[str]:
    """
    Returns the item of `schemas` equal to `schema` (ignoring letter case), or `None`.
    Non-string items are skipped.
    """
    wanted = SchemaURI(schema)
    for item in schemas:
        if isinstance(item, str) and wanted == item:
            return item
    return None


def render_location(location: Sequence[Union[str, int]]) -> str:
    """
    Renders a location tuple as attribute path, e.g. `("emails", 1, "type")` becomes
    `emails[1].type`. Schema URNs are joined with a colon, as in attribute notation.
    """
    output = ""
    for i, part in enumerate(location):
        if isinstance(part, int):
            output += f"[{part}]"
        elif i == 0:
            output = part
        elif i == 1 and is_schema_uri(location[0]):
            output += f":{part}"
        else:
            output += f".{part}"
    return output
