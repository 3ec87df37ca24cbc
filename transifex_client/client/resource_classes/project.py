from datetime import datetime

from transifex_client.client._resource_base import (
    BaseModelObject,
    ResourceObject,
    ToManyRelationship,
    ToOneRelationship,
)


class ProjectAttributes(BaseModelObject):
    slug: str | None = None
    name: str | None = None
    type: str | None = None
    description: str | None = None
    long_description: str | None = None
    datetime_created: datetime | None = None
    datetime_modified: datetime | None = None
    tags: list[str] | None = None
    private: bool | None = None
    archived: bool | None = None
    translation_memory_fillup: bool | None = None
    machine_translation_fillup: bool | None = None
    homepage_url: str | None = None
    repository_url: str | None = None
    instructions_url: str | None = None
    license: str | None = None
    logo_url: str | None = None


class ProjectRelationships(BaseModelObject):
    organization: ToOneRelationship | None = None
    source_language: ToOneRelationship | None = None
    languages: ToManyRelationship | None = None
    team: ToOneRelationship | None = None
    maintainers: ToManyRelationship | None = None
    resources: ToManyRelationship | None = None


class Project(ResourceObject[ProjectAttributes, ProjectRelationships]): ...
