from datetime import datetime

from transifex_client.client._resource_base import BaseModelObject, ResourceObject, ToOneRelationship


class ResourceStringCommentAttributes(BaseModelObject):
    category: str | None = None
    message: str | None = None
    priority: str | None = None
    status: str | None = None
    type: str | None = None
    datetime_created: datetime | None = None
    datetime_modified: datetime | None = None
    datetime_resolved: datetime | None = None


class ResourceStringCommentRelationships(BaseModelObject):
    author: ToOneRelationship | None = None
    language: ToOneRelationship | None = None
    resolver: ToOneRelationship | None = None
    resource: ToOneRelationship | None = None
    resource_string: ToOneRelationship | None = None


class ResourceStringComment(ResourceObject[ResourceStringCommentAttributes, ResourceStringCommentRelationships]): ...
