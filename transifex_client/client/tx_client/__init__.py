from .api import Endpoint, TXResourceAPI
from .responses import (
    IncludedItemResponse,
    IncludedPagedResponse,
    ItemResponse,
    PagedResponse,
    PaginationLinks,
    RelationshipResponse,
    RelationshipsResponse,
    extract_cursor,
)

__all__ = [
    "Endpoint",
    "IncludedItemResponse",
    "IncludedPagedResponse",
    "ItemResponse",
    "PagedResponse",
    "PaginationLinks",
    "RelationshipResponse",
    "RelationshipsResponse",
    "TXResourceAPI",
    "extract_cursor",
]
