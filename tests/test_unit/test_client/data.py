from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import pytest

from transifex_client.client.api.i18n_formats import I18nFormatsAPI
from transifex_client.client.api.languages import LanguagesAPI
from transifex_client.client.api.organizations import OrganizationsAPI
from transifex_client.client.api.projects import ProjectsAPI
from transifex_client.client.api.resource_string_comments import ResourceStringCommentsAPI
from transifex_client.client.api.resource_strings import ResourceStringsAPI
from transifex_client.client.api.resource_translations import ResourceTranslationsAPI
from transifex_client.client.api.resources import ResourcesAPI
from transifex_client.client.api.statistics import StatisticsAPI
from transifex_client.client.api.team_memberships import TeamMembershipsAPI
from transifex_client.client.api.teams import TeamsAPI
from transifex_client.client.api.users import UsersAPI
from transifex_client.client.request_classes import (
    I18nFormatListParameters,
    ProjectListParameters,
    ResourceLanguageStatsListParameters,
    ResourceListParameters,
    ResourceStringCommentListParameters,
    ResourceStringListParameters,
    ResourceTranslationListParameters,
    ResourceTranslationRetrieveParameters,
    TeamListParameters,
    TeamMembershipListParameters,
    TeamMembershipRetrieveParameters,
)
from transifex_client.client.tx_client import TXResourceAPI

ORGANIZATION = "o:acme"
PROJECT = "o:acme:p:demo"
RESOURCE = "o:acme:p:demo:r:strings"
RESOURCE_STRING = "o:acme:p:demo:r:strings:s:5b2ee8e6d3b4fcd1e1b2ea3b7e3a3d4f"
TEAM = "o:acme:t:core"


def _relationship(type_: str, id_: str, related: str | None = None) -> dict[str, Any]:
    relationship: dict[str, Any] = {"data": {"type": type_, "id": id_}}
    if related:
        relationship["links"] = {"related": related}
    return relationship


ORGANIZATION_DATA: dict[str, Any] = {
    "id": ORGANIZATION,
    "type": "organizations",
    "attributes": {"name": "Acme", "slug": "acme", "logo_url": None, "private": False},
    "relationships": {
        "projects": {"links": {"related": "https://rest.api.transifex.com/projects?filter[organization]=o:acme"}},
    },
    "links": {"self": "https://rest.api.transifex.com/organizations/o:acme"},
}

PROJECT_DATA: dict[str, Any] = {
    "id": PROJECT,
    "type": "projects",
    "attributes": {
        "slug": "demo",
        "name": "Demo",
        "type": "file",
        "datetime_created": "2023-05-04T08:09:10Z",
        "tags": ["web"],
        "private": True,
        "archived": False,
        "license": "proprietary",
    },
    "relationships": {
        "organization": _relationship("organizations", ORGANIZATION),
        "source_language": _relationship("languages", "l:en"),
        "team": _relationship("teams", TEAM),
    },
    "links": {"self": f"https://rest.api.transifex.com/projects/{PROJECT}"},
}

RESOURCE_DATA: dict[str, Any] = {
    "id": RESOURCE,
    "type": "resources",
    "attributes": {
        "slug": "strings",
        "name": "strings.json",
        "priority": "normal",
        "i18n_version": 2,
        "accept_translations": True,
        "string_count": 42,
        "word_count": 180,
        "categories": ["frontend"],
        "i18n_options": {"allow_duplicate_strings": True},
    },
    "relationships": {
        "project": _relationship("projects", PROJECT),
        "i18n_format": _relationship("i18n_formats", "KEYVALUEJSON"),
    },
}

LANGUAGE_DATA: dict[str, Any] = {
    "id": "l:fr",
    "type": "languages",
    "attributes": {
        "code": "fr",
        "name": "French",
        "rtl": False,
        "plural_equation": "(n > 1)",
        "plural_rules": {"one": "n in 0..1", "other": "everything else"},
    },
}

RESOURCE_STRING_DATA: dict[str, Any] = {
    "id": RESOURCE_STRING,
    "type": "resource_strings",
    "attributes": {
        "key": "greeting",
        "context": "",
        "strings": {"other": "Hello"},
        "pluralized": False,
        "appearance_order": 0,
        "character_limit": None,
        "tags": ["ui"],
        "datetime_created": "2024-01-02T03:04:05Z",
    },
    "relationships": {"resource": _relationship("resources", RESOURCE)},
}

REVISION_DATA: dict[str, Any] = {
    "id": f"{RESOURCE_STRING}:r:1",
    "type": "resource_strings_revisions",
    "attributes": {"strings": {"other": "Hi"}, "datetime_created": "2023-12-01T00:00:00Z"},
    "relationships": {"resource_string": _relationship("resource_strings", RESOURCE_STRING)},
}

COMMENT_DATA: dict[str, Any] = {
    "id": "4d8e7b1c-7f0a-4f4e-a1d5-0a7dd0c4b1f2",
    "type": "resource_string_comments",
    "attributes": {
        "category": "grammar",
        "message": "Should this be formal?",
        "priority": "normal",
        "status": "open",
        "type": "issue",
        "datetime_created": "2024-02-03T10:00:00Z",
        "datetime_resolved": None,
    },
    "relationships": {
        "author": _relationship("users", "u:jane"),
        "resource_string": _relationship("resource_strings", RESOURCE_STRING),
    },
}

TRANSLATION_DATA: dict[str, Any] = {
    "id": f"{RESOURCE_STRING}:l:fr",
    "type": "resource_translations",
    "attributes": {
        "strings": {"other": "Bonjour"},
        "reviewed": True,
        "proofread": False,
        "finalized": False,
        "origin": "EDITOR",
        "datetime_translated": "2024-02-04T11:12:13Z",
    },
    "relationships": {
        "resource_string": _relationship("resource_strings", RESOURCE_STRING),
        "language": _relationship("languages", "l:fr"),
        "translator": _relationship("users", "u:jane"),
    },
}

UNTRANSLATED_DATA: dict[str, Any] = {
    "id": f"{RESOURCE_STRING}:l:de",
    "type": "resource_translations",
    "attributes": {"strings": None, "reviewed": False, "proofread": False, "finalized": False},
}

TEAM_DATA: dict[str, Any] = {
    "id": TEAM,
    "type": "teams",
    "attributes": {"name": "Core", "slug": "core", "auto_join": False, "cla_required": False},
    "relationships": {"organization": _relationship("organizations", ORGANIZATION)},
}

MEMBERSHIP_DATA: dict[str, Any] = {
    "id": f"{TEAM}:l:fr:u:jane",
    "type": "team_memberships",
    "attributes": {"role": "translator"},
    "relationships": {
        "team": _relationship("teams", TEAM),
        "language": _relationship("languages", "l:fr"),
        "user": _relationship("users", "u:jane"),
    },
}

USER_DATA: dict[str, Any] = {"id": "u:jane", "type": "users", "attributes": {"username": "jane"}}

STATS_DATA: dict[str, Any] = {
    "id": f"{RESOURCE}:l:fr",
    "type": "resource_language_stats",
    "attributes": {
        "last_update": "2024-02-05T00:00:00Z",
        "total_strings": 42,
        "total_words": 180,
        "translated_strings": 40,
        "translated_words": 170,
        "untranslated_strings": 2,
        "untranslated_words": 10,
        "reviewed_strings": 30,
        "reviewed_words": 120,
        "proofread_strings": 0,
        "proofread_words": 0,
    },
    "relationships": {
        "resource": _relationship("resources", RESOURCE),
        "language": _relationship("languages", "l:fr"),
    },
}

I18N_FORMAT_DATA: dict[str, Any] = {
    "id": "KEYVALUEJSON",
    "type": "i18n_formats",
    "attributes": {
        "name": "KEYVALUEJSON",
        "media_type": "application/json",
        "file_extensions": [".json"],
        "description": "JSON (Key-Value)",
    },
}


@dataclass
class TXResource:
    api_class: Callable[..., TXResourceAPI]
    example_data: dict[str, Any]
    list_call: Callable[[Any], Any] | None = None
    retrieve_call: Callable[[Any], Any] | None = None
    expected_query: str = ""
    retrieve_path: str | None = None


def iterate_tx_resources() -> Iterable[Any]:
    yield pytest.param(
        TXResource(
            api_class=OrganizationsAPI,
            example_data=ORGANIZATION_DATA,
            list_call=lambda api: api.list(),
            retrieve_call=lambda api: api.retrieve(ORGANIZATION),
            retrieve_path=f"/organizations/{ORGANIZATION}",
        ),
        id="organizations",
    )
    yield pytest.param(
        TXResource(
            api_class=ProjectsAPI,
            example_data=PROJECT_DATA,
            list_call=lambda api: api.list(ProjectListParameters(organization=ORGANIZATION, slug="demo")),
            retrieve_call=lambda api: api.retrieve(PROJECT),
            expected_query=f"filter[organization]={ORGANIZATION}&filter[slug]=demo",
            retrieve_path=f"/projects/{PROJECT}",
        ),
        id="projects",
    )
    yield pytest.param(
        TXResource(
            api_class=ResourcesAPI,
            example_data=RESOURCE_DATA,
            list_call=lambda api: api.list(ResourceListParameters(project=PROJECT)),
            retrieve_call=lambda api: api.retrieve(RESOURCE),
            expected_query=f"filter[project]={PROJECT}",
            retrieve_path=f"/resources/{RESOURCE}",
        ),
        id="resources",
    )
    yield pytest.param(
        TXResource(
            api_class=LanguagesAPI,
            example_data=LANGUAGE_DATA,
            list_call=lambda api: api.list(),
            retrieve_call=lambda api: api.retrieve("l:fr"),
            retrieve_path="/languages/l:fr",
        ),
        id="languages",
    )
    yield pytest.param(
        TXResource(
            api_class=ResourceStringsAPI,
            example_data=RESOURCE_STRING_DATA,
            list_call=lambda api: api.list(ResourceStringListParameters(resource=RESOURCE, tags=["ui"])),
            retrieve_call=lambda api: api.retrieve(RESOURCE_STRING),
            expected_query=f"filter[resource]={RESOURCE}&filter[tags][all]=ui&limit=150",
            retrieve_path=f"/resource_strings/{RESOURCE_STRING}",
        ),
        id="resource_strings",
    )
    yield pytest.param(
        TXResource(
            api_class=ResourceStringCommentsAPI,
            example_data=COMMENT_DATA,
            list_call=lambda api: api.list(
                ResourceStringCommentListParameters(organization=ORGANIZATION, status="OPEN")
            ),
            retrieve_call=lambda api: api.retrieve(COMMENT_DATA["id"]),
            expected_query=f"filter[organization]={ORGANIZATION}&filter[status]=open",
            retrieve_path=f"/resource_string_comments/{COMMENT_DATA['id']}",
        ),
        id="resource_string_comments",
    )
    yield pytest.param(
        TXResource(
            api_class=ResourceTranslationsAPI,
            example_data=TRANSLATION_DATA,
            list_call=lambda api: api.list(ResourceTranslationListParameters(resource=RESOURCE, language="l:fr")),
            retrieve_call=lambda api: api.retrieve(
                ResourceTranslationRetrieveParameters(resource_translation=TRANSLATION_DATA["id"])
            ),
            expected_query=f"filter[resource]={RESOURCE}&filter[language]=l:fr&limit=150",
            retrieve_path=f"/resource_translations/{TRANSLATION_DATA['id']}",
        ),
        id="resource_translations",
    )
    yield pytest.param(
        TXResource(
            api_class=TeamsAPI,
            example_data=TEAM_DATA,
            list_call=lambda api: api.list(TeamListParameters(organization=ORGANIZATION)),
            retrieve_call=lambda api: api.retrieve(TEAM),
            expected_query=f"filter[organization]={ORGANIZATION}",
            retrieve_path=f"/teams/{TEAM}",
        ),
        id="teams",
    )
    yield pytest.param(
        TXResource(
            api_class=TeamMembershipsAPI,
            example_data=MEMBERSHIP_DATA,
            list_call=lambda api: api.list(TeamMembershipListParameters(organization=ORGANIZATION, role="translator")),
            retrieve_call=lambda api: api.retrieve(
                TeamMembershipRetrieveParameters(team_membership=MEMBERSHIP_DATA["id"])
            ),
            expected_query=f"filter[organization]={ORGANIZATION}&filter[role]=translator",
            retrieve_path=f"/team_memberships/{MEMBERSHIP_DATA['id']}",
        ),
        id="team_memberships",
    )
    yield pytest.param(
        TXResource(
            api_class=StatisticsAPI,
            example_data=STATS_DATA,
            list_call=lambda api: api.list(ResourceLanguageStatsListParameters(project=PROJECT, language="l:fr")),
            retrieve_call=lambda api: api.retrieve(STATS_DATA["id"]),
            expected_query=f"filter[project]={PROJECT}&filter[language]=l:fr",
            retrieve_path=f"/resource_language_stats/{STATS_DATA['id']}",
        ),
        id="statistics",
    )
    yield pytest.param(
        TXResource(
            api_class=I18nFormatsAPI,
            example_data=I18N_FORMAT_DATA,
            list_call=lambda api: api.list(I18nFormatListParameters(organization=ORGANIZATION)),
            expected_query=f"filter[organization]={ORGANIZATION}",
        ),
        id="i18n_formats",
    )
    yield pytest.param(
        TXResource(
            api_class=UsersAPI,
            example_data=USER_DATA,
            retrieve_call=lambda api: api.retrieve("u:jane"),
            retrieve_path="/users/u:jane",
        ),
        id="users",
    )
