from datetime import datetime

from transifex_client.client._resource_base import BaseModelObject, ResourceObject, ToOneRelationship


class ResourceLanguageStatsAttributes(BaseModelObject):
    last_update: datetime | None = None
    last_translation_update: datetime | None = None
    last_review_update: datetime | None = None
    last_proofread_update: datetime | None = None
    total_strings: int | None = None
    total_words: int | None = None
    translated_strings: int | None = None
    translated_words: int | None = None
    untranslated_strings: int | None = None
    untranslated_words: int | None = None
    reviewed_strings: int | None = None
    reviewed_words: int | None = None
    proofread_strings: int | None = None
    proofread_words: int | None = None


class ResourceLanguageStatsRelationships(BaseModelObject):
    resource: ToOneRelationship | None = None
    language: ToOneRelationship | None = None


class ResourceLanguageStats(ResourceObject[ResourceLanguageStatsAttributes, ResourceLanguageStatsRelationships]):
    """Translation progress of one resource in one language."""
