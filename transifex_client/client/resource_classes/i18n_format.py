from transifex_client.client._resource_base import BaseModelObject, EmptyRelationships, ResourceObject


class I18nFormatAttributes(BaseModelObject):
    name: str | None = None
    media_type: str | None = None
    file_extensions: list[str] | None = None
    description: str | None = None


class I18nFormat(ResourceObject[I18nFormatAttributes, EmptyRelationships]): ...
