from typing import Any, Generic, TypeVar
from urllib.parse import unquote

import httpx
from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator

from transifex_client.client._resource_base import ResourceIdentifier

T = TypeVar("T", bound=BaseModel)
T_Included = TypeVar("T_Included", bound=BaseModel)

CURSOR_PARAMETERS = ("page[cursor]", "cursor")


def extract_cursor(link: str | None) -> str | None:
    """Return the opaque pagination cursor carried by a pagination link.

    The cursor is returned exactly as it appears in the link, percent-encoding
    included, so that it can be put back into a query string unchanged.
    """
    if not link:
        return None
    query = httpx.URL(link).query.decode("ascii")
    for fragment in query.split("&"):
        key, sep, value = fragment.partition("=")
        if sep and value and unquote(key) in CURSOR_PARAMETERS:
            return value
    return None


class PaginationLinks(BaseModel):
    """Links of a collection response. An absent link is always None."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    self_: str | None = Field(default=None, alias="self")
    next: str | None = None
    previous: str | None = None

    @field_validator("self_", "next", "previous", mode="before")
    @classmethod
    def _empty_as_none(cls, value: Any) -> Any:
        if value == "":
            return None
        return value


class PagedResponse(BaseModel, Generic[T]):
    """A single page of a collection.

    Attributes:
        data: The items in this page.
        links: The pagination links of this page.
        included: Related resources side-loaded with the page.
    """

    data: list[T]
    links: PaginationLinks = Field(default_factory=PaginationLinks)
    included: list[dict[str, JsonValue]] = Field(default_factory=list)

    @property
    def next_cursor(self) -> str | None:
        """The cursor to pass to the same list operation to get the next page."""
        return extract_cursor(self.links.next)

    @property
    def previous_cursor(self) -> str | None:
        return extract_cursor(self.links.previous)


class IncludedPagedResponse(PagedResponse[T], Generic[T, T_Included]):
    included: list[T_Included] = Field(default_factory=list)  # type: ignore[assignment]


class ItemResponse(BaseModel, Generic[T]):
    data: T


class IncludedItemResponse(ItemResponse[T], Generic[T, T_Included]):
    included: list[T_Included] = Field(default_factory=list)


class RelationshipsResponse(BaseModel):
    data: list[ResourceIdentifier]
    links: PaginationLinks = Field(default_factory=PaginationLinks)

    @property
    def next_cursor(self) -> str | None:
        return extract_cursor(self.links.next)


class RelationshipResponse(BaseModel):
    data: ResourceIdentifier | None
    links: dict[str, JsonValue] | None = None
