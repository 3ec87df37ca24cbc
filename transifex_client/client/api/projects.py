from transifex_client.client._resource_base import ResourceIdentifier
from transifex_client.client.http_client import HTTPClient
from transifex_client.client.request_classes import ProjectListParameters
from transifex_client.client.resource_classes.language import Language
from transifex_client.client.resource_classes.project import Project
from transifex_client.client.resource_classes.user import Maintainer
from transifex_client.client.tx_client import Endpoint, PagedResponse, RelationshipsResponse, TXResourceAPI


class ProjectsAPI(TXResourceAPI[Project]):
    def __init__(self, http_client: HTTPClient) -> None:
        super().__init__(
            http_client,
            method_endpoint_map={
                "list": Endpoint("/projects"),
                "retrieve": Endpoint("/projects/{id}"),
            },
            resource_cls=Project,
        )
        self._languages_endpoint = Endpoint("/projects/{id}/languages")
        self._language_relationships_endpoint = Endpoint("/projects/{id}/relationships/languages")
        self._maintainers_endpoint = Endpoint("/projects/{id}/maintainers")
        self._maintainer_relationships_endpoint = Endpoint("/projects/{id}/relationships/maintainers")
        self._team_relationship_endpoint = Endpoint("/projects/{id}/relationships/team")

    def list(self, parameters: ProjectListParameters) -> PagedResponse[Project]:
        """List the projects of an organization.

        Args:
            parameters: The organization is required. The cursor selects the page.

        Returns:
            PagedResponse of Project objects.
        """
        return self._paginate(parameters)

    def retrieve(self, project_id: str) -> Project:
        """Get the details of a project."""
        return self._retrieve(project_id, name="project_id")

    def list_languages(self, project_id: str, cursor: str | None = None) -> PagedResponse[Language]:
        """Get the target languages of a project."""
        return self._list_related(self._languages_endpoint, project_id, Language, name="project_id", cursor=cursor)

    def list_language_relationships(self, project_id: str, cursor: str | None = None) -> RelationshipsResponse:
        return self._list_relationships(
            self._language_relationships_endpoint, project_id, name="project_id", cursor=cursor
        )

    def list_maintainers(self, project_id: str, cursor: str | None = None) -> PagedResponse[Maintainer]:
        """Get the users that maintain a project."""
        return self._list_related(self._maintainers_endpoint, project_id, Maintainer, name="project_id", cursor=cursor)

    def list_maintainer_relationships(self, project_id: str, cursor: str | None = None) -> RelationshipsResponse:
        return self._list_relationships(
            self._maintainer_relationships_endpoint, project_id, name="project_id", cursor=cursor
        )

    def retrieve_team_relationship(self, project_id: str) -> ResourceIdentifier | None:
        """Get the team assigned to a project, or None when the project has no team."""
        return self._retrieve_relationship(self._team_relationship_endpoint, project_id, name="project_id")
