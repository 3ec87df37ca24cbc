from transifex_client.client._resource_base import BaseModelObject, ResourceObject, ToManyRelationship


class OrganizationAttributes(BaseModelObject):
    name: str | None = None
    slug: str | None = None
    logo_url: str | None = None
    private: bool | None = None


class OrganizationRelationships(BaseModelObject):
    projects: ToManyRelationship | None = None
    teams: ToManyRelationship | None = None


class Organization(ResourceObject[OrganizationAttributes, OrganizationRelationships]): ...
