from transifex_client.client.http_client import HTTPClient
from transifex_client.client.request_classes import (
    ResourceStringListParameters,
    ResourceStringRevisionListParameters,
)
from transifex_client.client.resource_classes.resource_string import ResourceString, ResourceStringRevision
from transifex_client.client.tx_client import Endpoint, PagedResponse, TXResourceAPI


class ResourceStringsAPI(TXResourceAPI[ResourceString]):
    def __init__(self, http_client: HTTPClient) -> None:
        super().__init__(
            http_client,
            method_endpoint_map={
                "list": Endpoint("/resource_strings"),
                "retrieve": Endpoint("/resource_strings/{id}"),
            },
            resource_cls=ResourceString,
        )
        self._revisions_endpoint = Endpoint("/resource_strings_revisions")

    def list(self, parameters: ResourceStringListParameters) -> PagedResponse[ResourceString]:
        """List the source strings of a resource.

        Args:
            parameters: The resource is required. The page size defaults to 150.

        Returns:
            PagedResponse of ResourceString objects.
        """
        return self._paginate(parameters)

    def retrieve(self, resource_string_id: str) -> ResourceString:
        return self._retrieve(resource_string_id, name="resource_string_id")

    def list_revisions(self, parameters: ResourceStringRevisionListParameters) -> PagedResponse[ResourceStringRevision]:
        """List the previous versions of the source strings of a resource.

        Args:
            parameters: The resource is required. The page size defaults to 150.

        Returns:
            PagedResponse of ResourceStringRevision objects.
        """
        return self._paginate(
            parameters,
            endpoint_path=self._revisions_endpoint.path,
            envelope=PagedResponse[ResourceStringRevision],  # type: ignore[arg-type]
        )
