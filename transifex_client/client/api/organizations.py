from transifex_client.client.http_client import HTTPClient
from transifex_client.client.request_classes import CursorParameters
from transifex_client.client.resource_classes.organization import Organization
from transifex_client.client.tx_client import Endpoint, PagedResponse, TXResourceAPI


class OrganizationsAPI(TXResourceAPI[Organization]):
    def __init__(self, http_client: HTTPClient) -> None:
        super().__init__(
            http_client,
            method_endpoint_map={
                "list": Endpoint("/organizations"),
                "retrieve": Endpoint("/organizations/{id}"),
            },
            resource_cls=Organization,
        )

    def list(self, cursor: str | None = None) -> PagedResponse[Organization]:
        """List the organizations the user belongs to.

        Args:
            cursor: Cursor of the page to fetch, taken from a previous response.

        Returns:
            PagedResponse of Organization objects.
        """
        return self._paginate(CursorParameters(cursor=cursor))

    def retrieve(self, organization_id: str) -> Organization:
        """Get the details of an organization."""
        return self._retrieve(organization_id, name="organization_id")
