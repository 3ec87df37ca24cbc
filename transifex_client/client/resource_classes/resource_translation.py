from datetime import datetime

from transifex_client.client._resource_base import BaseModelObject, ResourceObject, ToOneRelationship


class ResourceTranslationAttributes(BaseModelObject):
    # None when the string has not been translated yet.
    strings: dict[str, str | None] | None = None
    reviewed: bool | None = None
    proofread: bool | None = None
    finalized: bool | None = None
    origin: str | None = None
    datetime_created: datetime | None = None
    datetime_translated: datetime | None = None
    datetime_reviewed: datetime | None = None
    datetime_proofread: datetime | None = None


class ResourceTranslationRelationships(BaseModelObject):
    resource: ToOneRelationship | None = None
    language: ToOneRelationship | None = None
    resource_string: ToOneRelationship | None = None
    translator: ToOneRelationship | None = None
    reviewer: ToOneRelationship | None = None
    proofreader: ToOneRelationship | None = None


class ResourceTranslation(ResourceObject[ResourceTranslationAttributes, ResourceTranslationRelationships]): ...
