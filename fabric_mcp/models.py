"""Request and response values passed across the dispatcher boundary."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ToolInvocation:
    """One inbound tool call.

    Attributes:
        name: Operation name.
        arguments: Read-only argument mapping. Absent fields are missing
            from the mapping, never present as None.
    """

    name: str
    arguments: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def create(cls, name: str, arguments: Optional[Mapping[str, Any]] = None) -> "ToolInvocation":
        """Normalize raw host input: drop nulls, stringify scalars."""
        normalized = {}
        for key, value in (arguments or {}).items():
            if value is None:
                continue
            normalized[str(key)] = value if isinstance(value, str) else str(value)
        return cls(name=name, arguments=MappingProxyType(normalized))


@dataclass(frozen=True)
class ToolResponse:
    """The text payload and error flag returned to the host."""

    text: str
    is_error: bool = False
