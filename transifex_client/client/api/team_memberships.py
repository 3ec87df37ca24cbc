from transifex_client.client.http_client import HTTPClient
from transifex_client.client.request_classes import TeamMembershipListParameters, TeamMembershipRetrieveParameters
from transifex_client.client.resource_classes.team import TeamMembership
from transifex_client.client.resource_classes.user import User
from transifex_client.client.tx_client import Endpoint, IncludedItemResponse, IncludedPagedResponse, TXResourceAPI


class TeamMembershipsAPI(TXResourceAPI[TeamMembership]):
    def __init__(self, http_client: HTTPClient) -> None:
        super().__init__(
            http_client,
            method_endpoint_map={
                "list": Endpoint("/team_memberships"),
                "retrieve": Endpoint("/team_memberships/{id}"),
            },
            resource_cls=TeamMembership,
        )

    def list(self, parameters: TeamMembershipListParameters) -> IncludedPagedResponse[TeamMembership, User]:
        """List the team memberships of an organization.

        Args:
            parameters: The organization is required. Use ``include="user"`` to side-load the users.

        Returns:
            IncludedPagedResponse of TeamMembership objects, with the users when included.
        """
        return self._paginate(  # type: ignore[return-value]
            parameters,
            envelope=IncludedPagedResponse[TeamMembership, User],  # type: ignore[arg-type]
        )

    def retrieve(self, parameters: TeamMembershipRetrieveParameters) -> TeamMembership:
        return self.retrieve_with_included(parameters).data

    def retrieve_with_included(
        self, parameters: TeamMembershipRetrieveParameters
    ) -> IncludedItemResponse[TeamMembership, User]:
        return self._retrieve_envelope(
            parameters.team_membership,
            IncludedItemResponse[TeamMembership, User],
            parameters,
            name="team_membership",
        )
