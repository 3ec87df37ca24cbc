from transifex_client.client.http_client import HTTPClient
from transifex_client.client.request_classes import ResourceListParameters
from transifex_client.client.resource_classes.resource import Resource
from transifex_client.client.tx_client import Endpoint, PagedResponse, TXResourceAPI


class ResourcesAPI(TXResourceAPI[Resource]):
    def __init__(self, http_client: HTTPClient) -> None:
        super().__init__(
            http_client,
            method_endpoint_map={
                "list": Endpoint("/resources"),
                "retrieve": Endpoint("/resources/{id}"),
            },
            resource_cls=Resource,
        )

    def list(self, parameters: ResourceListParameters) -> PagedResponse[Resource]:
        """List the resources of a project.

        Args:
            parameters: The project is required. The cursor selects the page.

        Returns:
            PagedResponse of Resource objects.
        """
        return self._paginate(parameters)

    def retrieve(self, resource_id: str) -> Resource:
        return self._retrieve(resource_id, name="resource_id")
