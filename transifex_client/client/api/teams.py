from transifex_client.client.http_client import HTTPClient
from transifex_client.client.request_classes import TeamListParameters
from transifex_client.client.resource_classes.team import Team
from transifex_client.client.resource_classes.user import User
from transifex_client.client.tx_client import Endpoint, PagedResponse, RelationshipsResponse, TXResourceAPI


class TeamsAPI(TXResourceAPI[Team]):
    def __init__(self, http_client: HTTPClient) -> None:
        super().__init__(
            http_client,
            method_endpoint_map={
                "list": Endpoint("/teams"),
                "retrieve": Endpoint("/teams/{id}"),
            },
            resource_cls=Team,
        )
        self._managers_endpoint = Endpoint("/teams/{id}/managers")
        self._manager_relationships_endpoint = Endpoint("/teams/{id}/relationships/managers")

    def list(self, parameters: TeamListParameters) -> PagedResponse[Team]:
        """List the teams of an organization.

        Args:
            parameters: The organization is required. The cursor selects the page.

        Returns:
            PagedResponse of Team objects.
        """
        return self._paginate(parameters)

    def retrieve(self, team_id: str) -> Team:
        return self._retrieve(team_id, name="team_id")

    def list_managers(self, team_id: str, cursor: str | None = None) -> PagedResponse[User]:
        """Get the users that manage a team."""
        return self._list_related(self._managers_endpoint, team_id, User, name="team_id", cursor=cursor)

    def list_manager_relationships(self, team_id: str, cursor: str | None = None) -> RelationshipsResponse:
        return self._list_relationships(self._manager_relationships_endpoint, team_id, name="team_id", cursor=cursor)
