from transifex_client.client._resource_base import (
    Links,
    ResourceIdentifier,
    ResourceObject,
    ToManyRelationship,
    ToOneRelationship,
)

from .i18n_format import I18nFormat
from .language import Language
from .organization import Organization
from .project import Project
from .resource import Resource
from .resource_string import ResourceString, ResourceStringRevision
from .resource_string_comment import ResourceStringComment
from .resource_translation import ResourceTranslation
from .statistics import ResourceLanguageStats
from .team import Team, TeamMembership
from .user import Maintainer, User

__all__ = [
    "I18nFormat",
    "Language",
    "Links",
    "Maintainer",
    "Organization",
    "Project",
    "Resource",
    "ResourceIdentifier",
    "ResourceLanguageStats",
    "ResourceObject",
    "ResourceString",
    "ResourceStringComment",
    "ResourceStringRevision",
    "ResourceTranslation",
    "Team",
    "TeamMembership",
    "ToManyRelationship",
    "ToOneRelationship",
    "User",
]
