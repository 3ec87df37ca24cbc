"""Declarative query fields.

A parameter object lists its query fields in a class-level table. Each field
knows the attribute it reads, the wire key it writes and how the value is
validated and rendered. Rendering returns ``None`` when the fragment should be
left out of the query string.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Literal

from transifex_client.exceptions import InvalidEnumValueError, InvalidRangeError, MissingParameterError

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def is_absent(value: Any) -> bool:
    """None, empty strings and empty collections all mean "not set"."""
    if value is None:
        return True
    if isinstance(value, str | list | tuple | set | frozenset):
        return len(value) == 0
    return False


@dataclass(frozen=True)
class QueryField(ABC):
    name: str
    key: str

    @abstractmethod
    def render_value(self, value: Any) -> str | None:
        """Render a value that is set. Returns None to omit the fragment."""
        raise NotImplementedError()

    def render(self, value: Any) -> str | None:
        if is_absent(value):
            return None
        rendered = self.render_value(value)
        if rendered is None:
            return None
        return f"{self.key}={rendered}"


@dataclass(frozen=True)
class RequiredFilter(QueryField):
    def render(self, value: Any) -> str | None:
        if is_absent(value):
            raise MissingParameterError(self.name)
        return super().render(value)

    def render_value(self, value: Any) -> str | None:
        return str(value)


@dataclass(frozen=True)
class StringFilter(QueryField):
    def render_value(self, value: Any) -> str | None:
        return str(value)


@dataclass(frozen=True)
class EnumFilter(QueryField):
    allowed: tuple[str, ...]
    case: Literal["lower", "upper"] = "lower"

    def render_value(self, value: Any) -> str | None:
        if isinstance(value, bool):
            value = str(value)
        text = str(value)
        canonical = text.lower() if self.case == "lower" else text.upper()
        if canonical not in self.allowed:
            raise InvalidEnumValueError(self.name, text, self.allowed)
        return canonical


@dataclass(frozen=True)
class DateTimeFilter(QueryField):
    def render_value(self, value: Any) -> str | None:
        if not isinstance(value, datetime):
            raise TypeError(f"{self.name} must be a datetime, got {type(value).__name__}")
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class TagsFilter(QueryField):
    def render_value(self, value: Any) -> str | None:
        if isinstance(value, str):
            return value
        return ",".join(value)


@dataclass(frozen=True)
class CursorField(QueryField):
    """The value must come from the pagination links of a previous response."""

    key: str = "page[cursor]"

    def render_value(self, value: Any) -> str | None:
        return str(value)


@dataclass(frozen=True)
class LimitField(QueryField):
    key: str = "limit"
    default: int = 150
    minimum: int = 150
    maximum: int = 1000

    def render(self, value: Any) -> str | None:
        if is_absent(value):
            return f"{self.key}={self.default}"
        return super().render(value)

    def render_value(self, value: Any) -> str | None:
        if isinstance(value, str):
            digits = value[1:] if value[:1] in ("+", "-") else value
            if not (digits.isascii() and digits.isdigit()):
                raise InvalidRangeError(self.name, value, self.minimum, self.maximum)
        elif not isinstance(value, int) or isinstance(value, bool):
            raise InvalidRangeError(self.name, value, self.minimum, self.maximum)
        number = int(value)
        if not self.minimum <= number <= self.maximum:
            raise InvalidRangeError(self.name, value, self.minimum, self.maximum)
        return str(number)


@dataclass(frozen=True)
class IncludeField(QueryField):
    allowed: str = ""
    key: str = "include"

    def render_value(self, value: Any) -> str | None:
        if value != self.allowed:
            raise InvalidEnumValueError(self.name, str(value), (self.allowed,))
        return self.allowed


@dataclass(frozen=True)
class PathParameter(QueryField):
    """A mandatory value that goes into the URL path, not the query string."""

    key: str = ""

    def render(self, value: Any) -> str | None:
        if is_absent(value):
            raise MissingParameterError(self.name)
        return None

    def render_value(self, value: Any) -> str | None:
        return None


def build_query_string(fragments: Sequence[str]) -> str:
    if not fragments:
        return ""
    return "?" + "&".join(fragments)
