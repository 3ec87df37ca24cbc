from datetime import datetime
from typing import ClassVar

from .base import QueryParameters
from .query import (
    CursorField,
    DateTimeFilter,
    EnumFilter,
    IncludeField,
    LimitField,
    PathParameter,
    QueryField,
    RequiredFilter,
    StringFilter,
    TagsFilter,
)

BOOLEAN_VALUES = ("true", "false")
COMMENT_PRIORITIES = ("low", "normal", "high", "critical", "blocker")
COMMENT_STATUSES = ("open", "resolved")
COMMENT_TYPES = ("issue", "comment")
TEAM_ROLES = ("coordinator", "translator", "reviewer")
TRANSLATION_ORIGINS = (
    "API",
    "EDITOR",
    "UPLOAD",
    "TM",
    "VENDORS:GENGO",
    "VENDORS:TEXTMASTER",
    "VENDORS:E2F",
    "MT:GOOGLE",
    "MT:MICROSOFT",
    "MT:AMAZON",
    "MT:DEEPL",
    "AUTOFETCH",
    "TX:AUTOMATED",
    "TX:NATIVE_MIGRATION",
    "TX:PROPAGATED",
    "TX:MERGED",
)


class CursorParameters(QueryParameters):
    """Parameters of the list operations that take nothing but the page cursor."""

    cursor: str | None = None

    query_fields: ClassVar[tuple[QueryField, ...]] = (CursorField("cursor"),)


class ProjectListParameters(QueryParameters):
    organization: str | None = None
    slug: str | None = None
    cursor: str | None = None

    query_fields: ClassVar[tuple[QueryField, ...]] = (
        RequiredFilter("organization", "filter[organization]"),
        StringFilter("slug", "filter[slug]"),
        CursorField("cursor"),
    )


class ResourceListParameters(QueryParameters):
    project: str | None = None
    slug: str | None = None
    cursor: str | None = None

    query_fields: ClassVar[tuple[QueryField, ...]] = (
        RequiredFilter("project", "filter[project]"),
        StringFilter("slug", "filter[slug]"),
        CursorField("cursor"),
    )


class ResourceStringListParameters(QueryParameters):
    resource: str | None = None
    cursor: str | None = None
    created_after: datetime | None = None
    created_before: datetime | None = None
    # Exact, case sensitive match on the string key.
    key: str | None = None
    tags: list[str] | None = None
    limit: int | str | None = None

    query_fields: ClassVar[tuple[QueryField, ...]] = (
        RequiredFilter("resource", "filter[resource]"),
        CursorField("cursor"),
        DateTimeFilter("created_after", "filter[datetime_created][gte]"),
        DateTimeFilter("created_before", "filter[datetime_created][lt]"),
        StringFilter("key", "filter[key]"),
        TagsFilter("tags", "filter[tags][all]"),
        LimitField("limit"),
    )


class ResourceStringRevisionListParameters(QueryParameters):
    resource: str | None = None
    key: str | None = None
    tags: list[str] | None = None
    cursor: str | None = None
    limit: int | str | None = None

    query_fields: ClassVar[tuple[QueryField, ...]] = (
        RequiredFilter("resource", "filter[resource_string][resource]"),
        CursorField("cursor"),
        StringFilter("key", "filter[resource_string][key]"),
        TagsFilter("tags", "filter[resource_string][tags][all]"),
        LimitField("limit"),
    )


class ResourceStringCommentListParameters(QueryParameters):
    organization: str | None = None
    project: str | None = None
    cursor: str | None = None
    category: str | None = None
    author: str | None = None
    created_after: datetime | None = None
    created_before: datetime | None = None
    priority: str | None = None
    resource: str | None = None
    resource_string: str | None = None
    status: str | None = None
    type: str | None = None

    query_fields: ClassVar[tuple[QueryField, ...]] = (
        RequiredFilter("organization", "filter[organization]"),
        CursorField("cursor"),
        StringFilter("project", "filter[project]"),
        StringFilter("category", "filter[category]"),
        StringFilter("author", "filter[author]"),
        DateTimeFilter("created_after", "filter[datetime_created][gte]"),
        DateTimeFilter("created_before", "filter[datetime_created][lt]"),
        EnumFilter("priority", "filter[priority]", COMMENT_PRIORITIES),
        StringFilter("resource", "filter[resource]"),
        StringFilter("resource_string", "filter[resource_string]"),
        EnumFilter("status", "filter[status]", COMMENT_STATUSES),
        EnumFilter("type", "filter[type]", COMMENT_TYPES),
    )


class ResourceTranslationListParameters(QueryParameters):
    resource: str | None = None
    language: str | None = None
    cursor: str | None = None
    translated_after: datetime | None = None
    translated_before: datetime | None = None
    key: str | None = None
    modified_after: datetime | None = None
    modified_before: datetime | None = None
    translated: bool | str | None = None
    reviewed: bool | str | None = None
    proofread: bool | str | None = None
    finalized: bool | str | None = None
    origin: str | None = None
    include: str | None = None
    tags: list[str] | None = None
    limit: int | str | None = None

    query_fields: ClassVar[tuple[QueryField, ...]] = (
        RequiredFilter("resource", "filter[resource]"),
        RequiredFilter("language", "filter[language]"),
        CursorField("cursor"),
        DateTimeFilter("translated_after", "filter[date_translated][gt]"),
        DateTimeFilter("translated_before", "filter[date_translated][lt]"),
        StringFilter("key", "filter[resource_string][key]"),
        DateTimeFilter("modified_after", "filter[resource_string][date_modified][gte]"),
        DateTimeFilter("modified_before", "filter[resource_string][date_modified][lte]"),
        EnumFilter("translated", "filter[translated]", BOOLEAN_VALUES),
        EnumFilter("reviewed", "filter[reviewed]", BOOLEAN_VALUES),
        EnumFilter("proofread", "filter[proofread]", BOOLEAN_VALUES),
        EnumFilter("finalized", "filter[finalized]", BOOLEAN_VALUES),
        EnumFilter("origin", "filter[origin]", TRANSLATION_ORIGINS, case="upper"),
        IncludeField("include", allowed="resource_string"),
        TagsFilter("tags", "filter[resource_string][tags][all]"),
        LimitField("limit"),
    )


class ResourceTranslationRetrieveParameters(QueryParameters):
    resource_translation: str | None = None
    include: str | None = None

    query_fields: ClassVar[tuple[QueryField, ...]] = (
        PathParameter("resource_translation"),
        IncludeField("include", allowed="resource_string"),
    )


class TeamListParameters(QueryParameters):
    organization: str | None = None
    slug: str | None = None
    cursor: str | None = None

    query_fields: ClassVar[tuple[QueryField, ...]] = (
        RequiredFilter("organization", "filter[organization]"),
        StringFilter("slug", "filter[slug]"),
        CursorField("cursor"),
    )


class TeamMembershipListParameters(QueryParameters):
    organization: str | None = None
    team: str | None = None
    language: str | None = None
    user: str | None = None
    role: str | None = None
    cursor: str | None = None
    include: str | None = None

    query_fields: ClassVar[tuple[QueryField, ...]] = (
        RequiredFilter("organization", "filter[organization]"),
        StringFilter("team", "filter[team]"),
        StringFilter("language", "filter[language]"),
        StringFilter("user", "filter[user]"),
        EnumFilter("role", "filter[role]", TEAM_ROLES),
        CursorField("cursor"),
        IncludeField("include", allowed="user"),
    )


class TeamMembershipRetrieveParameters(QueryParameters):
    team_membership: str | None = None
    include: str | None = None

    query_fields: ClassVar[tuple[QueryField, ...]] = (
        PathParameter("team_membership"),
        IncludeField("include", allowed="user"),
    )


class ResourceLanguageStatsListParameters(QueryParameters):
    project: str | None = None
    resource: str | None = None
    language: str | None = None
    cursor: str | None = None

    query_fields: ClassVar[tuple[QueryField, ...]] = (
        RequiredFilter("project", "filter[project]"),
        StringFilter("resource", "filter[resource]"),
        StringFilter("language", "filter[language]"),
        CursorField("cursor"),
    )


class I18nFormatListParameters(QueryParameters):
    organization: str | None = None
    cursor: str | None = None

    query_fields: ClassVar[tuple[QueryField, ...]] = (
        RequiredFilter("organization", "filter[organization]"),
        CursorField("cursor"),
    )
