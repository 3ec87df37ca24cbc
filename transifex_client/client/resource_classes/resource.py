from datetime import datetime

from pydantic import JsonValue

from transifex_client.client._resource_base import BaseModelObject, ResourceObject, ToOneRelationship


class ResourceAttributes(BaseModelObject):
    slug: str | None = None
    name: str | None = None
    priority: str | None = None
    i18n_type: str | None = None
    i18n_version: int | None = None
    accept_translations: bool | None = None
    string_count: int | None = None
    word_count: int | None = None
    datetime_created: datetime | None = None
    datetime_modified: datetime | None = None
    categories: list[str] | None = None
    i18n_options: dict[str, JsonValue] | None = None
    mp4_url: str | None = None
    ogg_url: str | None = None
    youtube_url: str | None = None
    webm_url: str | None = None


class ResourceRelationships(BaseModelObject):
    project: ToOneRelationship | None = None
    i18n_format: ToOneRelationship | None = None
    base: ToOneRelationship | None = None


class Resource(ResourceObject[ResourceAttributes, ResourceRelationships]): ...
