from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from .query import QueryField, build_query_string


class QueryParameters(BaseModel):
    """Base class for the parameters of a single operation.

    Subclasses declare their fields as pydantic fields and list them, in wire
    order, in ``query_fields``. All fields are optional when the object is
    created; mandatory ones are checked when the query string is built.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    query_fields: ClassVar[tuple[QueryField, ...]] = ()

    def query_fragments(self) -> list[str]:
        fragments: list[str] = []
        for field in self.query_fields:
            rendered = field.render(getattr(self, field.name))
            if rendered is not None:
                fragments.append(rendered)
        return fragments

    def as_query_string(self) -> str:
        """Validate the parameters and render them as a URL query string.

        Returns:
            str: The query string, starting with "?", or an empty string when there is nothing to send.

        Raises:
            TransifexValidationError: If a mandatory field is missing or a value is not allowed.
        """
        return build_query_string(self.query_fragments())

    def dump(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_defaults=True)
