from .base import QueryParameters
from .parameters import (
    CursorParameters,
    I18nFormatListParameters,
    ProjectListParameters,
    ResourceLanguageStatsListParameters,
    ResourceListParameters,
    ResourceStringCommentListParameters,
    ResourceStringListParameters,
    ResourceStringRevisionListParameters,
    ResourceTranslationListParameters,
    ResourceTranslationRetrieveParameters,
    TeamListParameters,
    TeamMembershipListParameters,
    TeamMembershipRetrieveParameters,
)

__all__ = [
    "CursorParameters",
    "I18nFormatListParameters",
    "ProjectListParameters",
    "QueryParameters",
    "ResourceLanguageStatsListParameters",
    "ResourceListParameters",
    "ResourceStringCommentListParameters",
    "ResourceStringListParameters",
    "ResourceStringRevisionListParameters",
    "ResourceTranslationListParameters",
    "ResourceTranslationRetrieveParameters",
    "TeamListParameters",
    "TeamMembershipListParameters",
    "TeamMembershipRetrieveParameters",
]
