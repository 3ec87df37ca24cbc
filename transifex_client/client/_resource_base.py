"""Base classes for Transifex resources and relationships."""

from typing import Any, Generic, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class BaseModelObject(BaseModel):
    """Base class for all objects. This includes resources and nested objects."""

    # We allow extra fields to support forward compatibility.
    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    def dump(self, exclude_extra: bool = False) -> dict[str, Any]:
        """Dump the object to a dictionary with the keys used on the wire.

        Args:
            exclude_extra (bool): Whether to exclude extra fields not defined in the model. Default is False.

        """
        if exclude_extra:
            return self.model_dump(
                mode="json",
                by_alias=True,
                exclude_unset=True,
                exclude=set(self.__pydantic_extra__) if self.__pydantic_extra__ else None,
            )
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def dump_yaml(self, exclude_extra: bool = False) -> str:
        """Dump the object to a YAML string."""
        return yaml.safe_dump(self.dump(exclude_extra=exclude_extra), sort_keys=False, allow_unicode=True)


class ResourceIdentifier(BaseModelObject):
    """The type and id of a related resource."""

    type: str
    id: str

    def __str__(self) -> str:
        return f"{self.type}:{self.id}"


class Links(BaseModelObject):
    self_: str | None = Field(default=None, alias="self")
    related: str | None = None

    @field_validator("self_", "related", mode="before")
    @classmethod
    def _empty_as_none(cls, value: Any) -> Any:
        if value == "":
            return None
        return value


class ToOneRelationship(BaseModelObject):
    data: ResourceIdentifier | None = None
    links: Links | None = None


class ToManyRelationship(BaseModelObject):
    data: list[ResourceIdentifier] | None = None
    links: Links | None = None


T_Attributes = TypeVar("T_Attributes", bound=BaseModelObject)
T_Relationships = TypeVar("T_Relationships", bound=BaseModelObject)


class EmptyRelationships(BaseModelObject): ...


class ResourceObject(BaseModelObject, Generic[T_Attributes, T_Relationships]):
    """A single JSON:API resource object as returned by the service."""

    id: str
    type: str
    attributes: T_Attributes
    relationships: T_Relationships | None = None
    links: Links | None = None

    def as_identifier(self) -> ResourceIdentifier:
        return ResourceIdentifier(type=self.type, id=self.id)

    def __str__(self) -> str:
        return f"{self.type}:{self.id}"


T_ResourceObject = TypeVar("T_ResourceObject", bound=ResourceObject)
