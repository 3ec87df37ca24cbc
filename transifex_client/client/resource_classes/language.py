from transifex_client.client._resource_base import BaseModelObject, EmptyRelationships, ResourceObject


class PluralRules(BaseModelObject):
    zero: str | None = None
    one: str | None = None
    two: str | None = None
    few: str | None = None
    many: str | None = None
    other: str | None = None


class LanguageAttributes(BaseModelObject):
    code: str | None = None
    name: str | None = None
    rtl: bool | None = None
    plural_equation: str | None = None
    plural_rules: PluralRules | None = None


class Language(ResourceObject[LanguageAttributes, EmptyRelationships]): ...
