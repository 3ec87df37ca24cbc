from datetime import datetime

from transifex_client.client._resource_base import (
    BaseModelObject,
    ResourceObject,
    ToManyRelationship,
    ToOneRelationship,
)


class TeamAttributes(BaseModelObject):
    name: str | None = None
    slug: str | None = None
    auto_join: bool | None = None
    cla_required: bool | None = None
    cla: str | None = None
    datetime_created: datetime | None = None


class TeamRelationships(BaseModelObject):
    organization: ToOneRelationship | None = None
    managers: ToManyRelationship | None = None


class Team(ResourceObject[TeamAttributes, TeamRelationships]): ...


class TeamMembershipAttributes(BaseModelObject):
    role: str | None = None


class TeamMembershipRelationships(BaseModelObject):
    team: ToOneRelationship | None = None
    language: ToOneRelationship | None = None
    user: ToOneRelationship | None = None


class TeamMembership(ResourceObject[TeamMembershipAttributes, TeamMembershipRelationships]): ...
