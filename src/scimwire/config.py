from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CodecConfig:
    """
    JSON encoding options used by the serializer. Attribute order follows the model
    declaration, unless `sort_keys` is set, in which case keys are sorted alphabetically.
    In both cases the output is deterministic.
    """

    indent: Optional[int] = None
    sort_keys: bool = False
    ensure_ascii: bool = False

    def __post_init__(self):
        if self.indent is not None and self.indent < 0:
            raise ValueError("'indent' must not be negative")


DEFAULT_CONFIG = CodecConfig()
