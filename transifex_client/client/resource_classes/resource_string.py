from datetime import datetime

from transifex_client.client._resource_base import BaseModelObject, ResourceObject, ToOneRelationship


class ResourceStringAttributes(BaseModelObject):
    key: str | None = None
    context: str | None = None
    strings: dict[str, str | None] | None = None
    string_hash: str | None = None
    pluralized: bool | None = None
    appearance_order: int | None = None
    character_limit: int | None = None
    developer_comment: str | None = None
    instructions: str | None = None
    occurrences: str | None = None
    tags: list[str] | None = None
    datetime_created: datetime | None = None
    metadata_datetime_modified: datetime | None = None
    strings_datetime_modified: datetime | None = None


class ResourceStringRelationships(BaseModelObject):
    resource: ToOneRelationship | None = None
    language: ToOneRelationship | None = None
    committer: ToOneRelationship | None = None


class ResourceString(ResourceObject[ResourceStringAttributes, ResourceStringRelationships]): ...


class ResourceStringRevisionAttributes(BaseModelObject):
    strings: dict[str, str | None] | None = None
    datetime_created: datetime | None = None


class ResourceStringRevisionRelationships(BaseModelObject):
    resource_string: ToOneRelationship | None = None


class ResourceStringRevision(ResourceObject[ResourceStringRevisionAttributes, ResourceStringRevisionRelationships]):
    """A previous version of the source strings of a resource string."""
