# The Typer parameters get mixed up if we use the __future__ import annotations in this file.
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer
from dotenv import load_dotenv
from rich import print
from rich.console import Console
from rich.markup import escape

from transifex_client._version import __version__ as current_version
from transifex_client.client import TransifexClient
from transifex_client.client._resource_base import BaseModelObject
from transifex_client.client.request_classes import (
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
from transifex_client.client.tx_client import PagedResponse
from transifex_client.exceptions import TransifexConfigError, TransifexError
from transifex_client.printing import print_resource, print_resources

err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    text = "text"
    json = "json"
    yaml = "yaml"


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="How to print the entities. Supported formats: text, json, yaml."),
]
CursorOption = Annotated[
    str | None,
    typer.Option("--cursor", help="Cursor of the page to get, as printed after the previous page."),
]
LimitOption = Annotated[
    int | None,
    typer.Option("--limit", help="Number of items per page, between 150 and 1000. Defaults to 150."),
]


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"transifex-client version: {current_version}.")
        raise typer.Exit()


@contextmanager
def _handle_errors() -> Iterator[None]:
    try:
        yield
    except TransifexError as err:
        print(f"  [bold red]ERROR ([/][red]{type(err).__name__}[/][bold red]):[/] {err}")
        raise typer.Exit(1)


def _show_item(item: BaseModelObject | None, output_format: OutputFormat) -> None:
    if item is None:
        print("  [bold yellow]WARNING:[/] Nothing found.")
        return
    print_resource(item, output_format.value)


def _show_page(page: PagedResponse[Any], output_format: OutputFormat) -> None:
    print_resources(page.data, output_format.value)
    if page.included:
        err_console.print(f"{len(page.included)} included resource(s) not shown.")
    if cursor := page.next_cursor:
        err_console.print(f"More results are available. Use [bold]--cursor {escape(cursor)}[/] to get the next page.")


class TransifexApp(typer.Typer):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.callback(invoke_without_command=True)(self.common)
        self.command("organizations")(self.organizations)
        self.command("projects")(self.projects)
        self.command("resources")(self.resources)
        self.command("languages")(self.languages)
        self.command("strings")(self.strings)
        self.command("revisions")(self.revisions)
        self.command("comments")(self.comments)
        self.command("translations")(self.translations)
        self.command("teams")(self.teams)
        self.command("memberships")(self.memberships)
        self.command("stats")(self.stats)
        self.command("formats")(self.formats)
        self.command("user")(self.user)

    @staticmethod
    def common(
        ctx: typer.Context,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every request.")] = False,
        env_path: Annotated[
            Path | None,
            typer.Option(help="Path to .env file to load. Defaults to .env in the current directory."),
        ] = None,
        override_env: Annotated[
            bool,
            typer.Option(help="Let the values in the .env file override currently set environment variables."),
        ] = False,
        version: Annotated[
            bool,
            typer.Option("--version", help="See which version of the client is installed.", callback=_version_callback),
        ] = False,
    ) -> None:
        """Read organizations, projects, strings and translations from the Transifex REST API.

        The API token is read from the TX_TOKEN environment variable.
        """
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        if ctx.invoked_subcommand is None:
            print("Use [bold yellow]transifex-client --help[/] for more information.")
            return
        dotenv_file = env_path if env_path is not None else Path.cwd() / ".env"
        if env_path is not None and not dotenv_file.is_file():
            print(f"  [bold red]ERROR:[/] {dotenv_file.as_posix()!r} does not exist.")
            raise typer.Exit(1)
        if dotenv_file.is_file():
            if override_env:
                print("  [bold yellow]WARNING:[/] Overriding environment variables with values from .env file...")
            load_dotenv(dotenv_file, override=override_env)

    @staticmethod
    def _create_client() -> TransifexClient:
        try:
            return TransifexClient()
        except TransifexConfigError as err:
            print(f"  [bold red]ERROR:[/] {err}. Set it in the environment or in a .env file.")
            raise typer.Exit(1)

    @staticmethod
    def organizations(
        id: Annotated[str | None, typer.Option("--id", help="Get one organization, e.g. o:my-org.")] = None,
        cursor: CursorOption = None,
        output_format: FormatOption = OutputFormat.text,
    ) -> None:
        """List the organizations the token has access to."""
        with TransifexApp._create_client() as client, _handle_errors():
            if id is not None:
                _show_item(client.organizations.retrieve(id), output_format)
            else:
                _show_page(client.organizations.list(cursor=cursor), output_format)

    @staticmethod
    def projects(
        organization: Annotated[str | None, typer.Option("--organization", "-o", help="e.g. o:my-org")] = None,
        slug: Annotated[str | None, typer.Option("--slug", help="Only the project with this slug.")] = None,
        id: Annotated[str | None, typer.Option("--id", help="Get one project, e.g. o:my-org:p:my-project.")] = None,
        languages: Annotated[bool, typer.Option("--languages", help="With --id, list the project languages.")] = False,
        cursor: CursorOption = None,
        output_format: FormatOption = OutputFormat.text,
    ) -> None:
        """List the projects of an organization."""
        with TransifexApp._create_client() as client, _handle_errors():
            if id is not None and languages:
                _show_page(client.projects.list_languages(id, cursor=cursor), output_format)
            elif id is not None:
                _show_item(client.projects.retrieve(id), output_format)
            else:
                parameters = ProjectListParameters(organization=organization, slug=slug, cursor=cursor)
                _show_page(client.projects.list(parameters), output_format)

    @staticmethod
    def resources(
        project: Annotated[str | None, typer.Option("--project", "-p", help="e.g. o:my-org:p:my-project")] = None,
        slug: Annotated[str | None, typer.Option("--slug", help="Only the resource with this slug.")] = None,
        id: Annotated[str | None, typer.Option("--id", help="Get one resource.")] = None,
        cursor: CursorOption = None,
        output_format: FormatOption = OutputFormat.text,
    ) -> None:
        """List the resources of a project."""
        with TransifexApp._create_client() as client, _handle_errors():
            if id is not None:
                _show_item(client.resources.retrieve(id), output_format)
            else:
                parameters = ResourceListParameters(project=project, slug=slug, cursor=cursor)
                _show_page(client.resources.list(parameters), output_format)

    @staticmethod
    def languages(
        id: Annotated[str | None, typer.Option("--id", help="Get one language, e.g. l:en.")] = None,
        cursor: CursorOption = None,
        output_format: FormatOption = OutputFormat.text,
    ) -> None:
        """List the languages supported by Transifex."""
        with TransifexApp._create_client() as client, _handle_errors():
            if id is not None:
                _show_item(client.languages.retrieve(id), output_format)
            else:
                _show_page(client.languages.list(cursor=cursor), output_format)

    @staticmethod
    def strings(
        resource: Annotated[str | None, typer.Option("--resource", "-r", help="The resource of the strings.")] = None,
        key: Annotated[str | None, typer.Option("--key", help="Only the string with this key.")] = None,
        tag: Annotated[list[str] | None, typer.Option("--tag", help="Only strings with all these tags.")] = None,
        id: Annotated[str | None, typer.Option("--id", help="Get one resource string.")] = None,
        cursor: CursorOption = None,
        limit: LimitOption = None,
        output_format: FormatOption = OutputFormat.text,
    ) -> None:
        """List the source strings of a resource."""
        with TransifexApp._create_client() as client, _handle_errors():
            if id is not None:
                _show_item(client.resource_strings.retrieve(id), output_format)
            else:
                parameters = ResourceStringListParameters(
                    resource=resource, key=key, tags=tag, cursor=cursor, limit=limit
                )
                _show_page(client.resource_strings.list(parameters), output_format)

    @staticmethod
    def revisions(
        resource: Annotated[str | None, typer.Option("--resource", "-r", help="The resource of the strings.")] = None,
        key: Annotated[str | None, typer.Option("--key", help="Only revisions of the string with this key.")] = None,
        tag: Annotated[list[str] | None, typer.Option("--tag", help="Only strings with all these tags.")] = None,
        cursor: CursorOption = None,
        limit: LimitOption = None,
        output_format: FormatOption = OutputFormat.text,
    ) -> None:
        """List the revisions of the source strings of a resource."""
        with TransifexApp._create_client() as client, _handle_errors():
            parameters = ResourceStringRevisionListParameters(
                resource=resource, key=key, tags=tag, cursor=cursor, limit=limit
            )
            _show_page(client.resource_strings.list_revisions(parameters), output_format)

    @staticmethod
    def comments(
        organization: Annotated[str | None, typer.Option("--organization", "-o", help="e.g. o:my-org")] = None,
        project: Annotated[str | None, typer.Option("--project", "-p", help="Only comments in this project.")] = None,
        status: Annotated[str | None, typer.Option("--status", help="open or resolved")] = None,
        priority: Annotated[
            str | None, typer.Option("--priority", help="low, normal, high, critical or blocker")
        ] = None,
        type: Annotated[str | None, typer.Option("--type", help="issue or comment")] = None,
        id: Annotated[str | None, typer.Option("--id", help="Get one comment.")] = None,
        cursor: CursorOption = None,
        output_format: FormatOption = OutputFormat.text,
    ) -> None:
        """List the comments and issues on the strings of an organization."""
        with TransifexApp._create_client() as client, _handle_errors():
            if id is not None:
                _show_item(client.resource_string_comments.retrieve(id), output_format)
            else:
                parameters = ResourceStringCommentListParameters(
                    organization=organization,
                    project=project,
                    status=status,
                    priority=priority,
                    type=type,
                    cursor=cursor,
                )
                _show_page(client.resource_string_comments.list(parameters), output_format)

    @staticmethod
    def translations(
        resource: Annotated[str | None, typer.Option("--resource", "-r", help="The resource of the strings.")] = None,
        language: Annotated[str | None, typer.Option("--language", "-l", help="e.g. l:fr")] = None,
        origin: Annotated[str | None, typer.Option("--origin", help="e.g. EDITOR or MT:DEEPL")] = None,
        reviewed: Annotated[str | None, typer.Option("--reviewed", help="true or false")] = None,
        include: Annotated[str | None, typer.Option("--include", help="resource_string")] = None,
        id: Annotated[str | None, typer.Option("--id", help="Get one translation.")] = None,
        cursor: CursorOption = None,
        limit: LimitOption = None,
        output_format: FormatOption = OutputFormat.text,
    ) -> None:
        """List the translations of a resource in one language."""
        with TransifexApp._create_client() as client, _handle_errors():
            if id is not None:
                retrieve = ResourceTranslationRetrieveParameters(resource_translation=id, include=include)
                _show_item(client.resource_translations.retrieve(retrieve), output_format)
            else:
                parameters = ResourceTranslationListParameters(
                    resource=resource,
                    language=language,
                    origin=origin,
                    reviewed=reviewed,
                    include=include,
                    cursor=cursor,
                    limit=limit,
                )
                _show_page(client.resource_translations.list(parameters), output_format)

    @staticmethod
    def teams(
        organization: Annotated[str | None, typer.Option("--organization", "-o", help="e.g. o:my-org")] = None,
        slug: Annotated[str | None, typer.Option("--slug", help="Only the team with this slug.")] = None,
        id: Annotated[str | None, typer.Option("--id", help="Get one team.")] = None,
        managers: Annotated[bool, typer.Option("--managers", help="With --id, list the team managers.")] = False,
        cursor: CursorOption = None,
        output_format: FormatOption = OutputFormat.text,
    ) -> None:
        """List the teams of an organization."""
        with TransifexApp._create_client() as client, _handle_errors():
            if id is not None and managers:
                _show_page(client.teams.list_managers(id, cursor=cursor), output_format)
            elif id is not None:
                _show_item(client.teams.retrieve(id), output_format)
            else:
                parameters = TeamListParameters(organization=organization, slug=slug, cursor=cursor)
                _show_page(client.teams.list(parameters), output_format)

    @staticmethod
    def memberships(
        organization: Annotated[str | None, typer.Option("--organization", "-o", help="e.g. o:my-org")] = None,
        team: Annotated[str | None, typer.Option("--team", help="Only members of this team.")] = None,
        language: Annotated[
            str | None, typer.Option("--language", "-l", help="Only members for this language.")
        ] = None,
        role: Annotated[str | None, typer.Option("--role", help="coordinator, translator or reviewer")] = None,
        include: Annotated[str | None, typer.Option("--include", help="user")] = None,
        id: Annotated[str | None, typer.Option("--id", help="Get one team membership.")] = None,
        cursor: CursorOption = None,
        output_format: FormatOption = OutputFormat.text,
    ) -> None:
        """List the team memberships of an organization."""
        with TransifexApp._create_client() as client, _handle_errors():
            if id is not None:
                retrieve = TeamMembershipRetrieveParameters(team_membership=id, include=include)
                _show_item(client.team_memberships.retrieve(retrieve), output_format)
            else:
                parameters = TeamMembershipListParameters(
                    organization=organization,
                    team=team,
                    language=language,
                    role=role,
                    include=include,
                    cursor=cursor,
                )
                _show_page(client.team_memberships.list(parameters), output_format)

    @staticmethod
    def stats(
        project: Annotated[str | None, typer.Option("--project", "-p", help="e.g. o:my-org:p:my-project")] = None,
        resource: Annotated[str | None, typer.Option("--resource", "-r", help="Only this resource.")] = None,
        language: Annotated[str | None, typer.Option("--language", "-l", help="Only this language.")] = None,
        id: Annotated[str | None, typer.Option("--id", help="Get the statistics of one resource language.")] = None,
        cursor: CursorOption = None,
        output_format: FormatOption = OutputFormat.text,
    ) -> None:
        """Show the translation progress of a project."""
        with TransifexApp._create_client() as client, _handle_errors():
            if id is not None:
                _show_item(client.statistics.retrieve(id), output_format)
            else:
                parameters = ResourceLanguageStatsListParameters(
                    project=project, resource=resource, language=language, cursor=cursor
                )
                _show_page(client.statistics.list(parameters), output_format)

    @staticmethod
    def formats(
        organization: Annotated[str | None, typer.Option("--organization", "-o", help="e.g. o:my-org")] = None,
        cursor: CursorOption = None,
        output_format: FormatOption = OutputFormat.text,
    ) -> None:
        """List the file formats supported for an organization."""
        with TransifexApp._create_client() as client, _handle_errors():
            parameters = I18nFormatListParameters(organization=organization, cursor=cursor)
            _show_page(client.i18n_formats.list(parameters), output_format)

    @staticmethod
    def user(
        id: Annotated[str, typer.Argument(help="The user to get, e.g. u:username.")],
        output_format: FormatOption = OutputFormat.text,
    ) -> None:
        """Show the details of a user."""
        with TransifexApp._create_client() as client, _handle_errors():
            _show_item(client.users.retrieve(id), output_format)


default_typer_kws: dict[str, Any] = dict(
    pretty_exceptions_short=False,
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
)

_app = TransifexApp(**default_typer_kws)


def app() -> NoReturn:
    _app()
    raise SystemExit(0)
