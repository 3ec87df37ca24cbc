from transifex_client.client._resource_base import BaseModelObject, EmptyRelationships, ResourceObject


class UserAttributes(BaseModelObject):
    username: str | None = None


class User(ResourceObject[UserAttributes, EmptyRelationships]): ...


class Maintainer(User):
    """A user that maintains a project."""
