from transifex_client.client.http_client import HTTPClient
from transifex_client.client.request_classes import ResourceStringCommentListParameters
from transifex_client.client.resource_classes.resource_string_comment import ResourceStringComment
from transifex_client.client.tx_client import Endpoint, PagedResponse, TXResourceAPI


class ResourceStringCommentsAPI(TXResourceAPI[ResourceStringComment]):
    def __init__(self, http_client: HTTPClient) -> None:
        super().__init__(
            http_client,
            method_endpoint_map={
                "list": Endpoint("/resource_string_comments"),
                "retrieve": Endpoint("/resource_string_comments/{id}"),
            },
            resource_cls=ResourceStringComment,
        )

    def list(self, parameters: ResourceStringCommentListParameters) -> PagedResponse[ResourceStringComment]:
        """List the comments and issues on the strings of an organization.

        Args:
            parameters: The organization is required. The other filters narrow down the list.

        Returns:
            PagedResponse of ResourceStringComment objects.
        """
        return self._paginate(parameters)

    def retrieve(self, comment_id: str) -> ResourceStringComment:
        return self._retrieve(comment_id, name="comment_id")
