import logging
from dataclasses import dataclass
from typing import Generic, Literal, TypeAlias, TypeVar

from pydantic import BaseModel, ValidationError

from transifex_client.client._resource_base import ResourceIdentifier, T_ResourceObject
from transifex_client.client.http_client import HTTPClient, RequestMessage, ResponseMessage
from transifex_client.client.request_classes import CursorParameters, QueryParameters
from transifex_client.exceptions import MissingParameterError, TransifexDecodeError

from .responses import ItemResponse, PagedResponse, RelationshipResponse, RelationshipsResponse

logger = logging.getLogger(__name__)

_T_BaseModel = TypeVar("_T_BaseModel", bound=BaseModel)


@dataclass(frozen=True)
class Endpoint:
    """An endpoint of a resource collection.

    The path may contain an ``{id}`` placeholder for the identifier of the resource.
    """

    path: str
    method: Literal["GET"] = "GET"


APIMethod: TypeAlias = Literal["list", "retrieve"]


class TXResourceAPI(Generic[T_ResourceObject]):
    """Generic resource API for Transifex collections.

    A subclass maps "list" and "retrieve" to endpoints and gives the entity
    class. Each call builds the query string from a parameter object, sends a
    single GET request and decodes the JSON:API envelope. Pagination is left to
    the caller: pass the cursor of the previous page to get the next one.
    """

    def __init__(
        self,
        http_client: HTTPClient,
        method_endpoint_map: dict[APIMethod, Endpoint],
        resource_cls: type[T_ResourceObject],
    ) -> None:
        """Initialize the resource API.

        Args:
            http_client: The HTTP client to use for API requests.
            method_endpoint_map: A mapping of API methods to their endpoints.
            resource_cls: The entity class the responses are decoded into.
        """
        self._http_client = http_client
        self._method_endpoint_map = method_endpoint_map
        self._resource_cls = resource_cls

    def _make_url(self, path: str = "", query: str = "") -> str:
        """Create the full URL for this resource endpoint."""
        return f"{self._http_client.config.create_api_url(path)}{query}"

    @classmethod
    def _endpoint_path(cls, endpoint: Endpoint, identifier: str | None = None, name: str = "id") -> str:
        if "{id}" not in endpoint.path:
            return endpoint.path
        if not identifier:
            raise MissingParameterError(name)
        return endpoint.path.format(id=identifier)

    def _get(self, path: str, query: str = "") -> ResponseMessage:
        request = RequestMessage(endpoint_url=self._make_url(path, query))
        return self._http_client.request_single(request).get_response_or_raise()

    def _decode(self, response: ResponseMessage, envelope: type[_T_BaseModel]) -> _T_BaseModel:
        """Decode the response body into the expected envelope.

        Raises:
            TransifexAPIError: If the body is a JSON:API error document.
            TransifexDecodeError: If the body is not JSON or does not match the envelope.
        """
        try:
            return envelope.model_validate_json(response.body)
        except ValidationError as e:
            response.raise_if_error_document()
            logger.warning(
                "Could not decode %s from response with status code %d", envelope.__name__, response.status_code
            )
            raise TransifexDecodeError(
                f"Unexpected response with status code {response.status_code}: {e!s}", body=response.body
            ) from e

    def _paginate(
        self,
        parameters: QueryParameters | None = None,
        endpoint_path: str | None = None,
        envelope: type[PagedResponse[T_ResourceObject]] | None = None,
    ) -> PagedResponse[T_ResourceObject]:
        """Fetch a single page of resources.

        Args:
            parameters: The filters of the operation. They are validated before any request is sent.
            endpoint_path: Optional override for the path of the list endpoint.
            envelope: Optional override for the response class, used when side-loaded
                resources should be decoded.

        Returns:
            The page, with the links to the previous and next pages.
        """
        query = parameters.as_query_string() if parameters is not None else ""
        path = endpoint_path or self._method_endpoint_map["list"].path
        response = self._get(path, query)
        return self._decode(response, envelope or PagedResponse[self._resource_cls])  # type: ignore[name-defined]

    def _retrieve(
        self,
        identifier: str | None,
        parameters: QueryParameters | None = None,
        name: str = "id",
    ) -> T_ResourceObject:
        """Fetch a single resource by its identifier."""
        path = self._endpoint_path(self._method_endpoint_map["retrieve"], identifier, name)
        query = parameters.as_query_string() if parameters is not None else ""
        response = self._get(path, query)
        return self._decode(response, ItemResponse[self._resource_cls]).data  # type: ignore[name-defined]

    def _retrieve_envelope(
        self, identifier: str | None, envelope: type[_T_BaseModel], parameters: QueryParameters, name: str
    ) -> _T_BaseModel:
        path = self._endpoint_path(self._method_endpoint_map["retrieve"], identifier, name)
        return self._decode(self._get(path, parameters.as_query_string()), envelope)

    def _list_related(
        self,
        endpoint: Endpoint,
        identifier: str | None,
        related_cls: type[_T_BaseModel],
        name: str = "id",
        cursor: str | None = None,
    ) -> PagedResponse[_T_BaseModel]:
        """Fetch a page of the related resources of one resource, e.g. the languages of a project."""
        path = self._endpoint_path(endpoint, identifier, name)
        query = CursorParameters(cursor=cursor).as_query_string()
        return self._decode(self._get(path, query), PagedResponse[related_cls])  # type: ignore[valid-type]

    def _list_relationships(
        self, endpoint: Endpoint, identifier: str | None, name: str = "id", cursor: str | None = None
    ) -> RelationshipsResponse:
        path = self._endpoint_path(endpoint, identifier, name)
        query = CursorParameters(cursor=cursor).as_query_string()
        return self._decode(self._get(path, query), RelationshipsResponse)

    def _retrieve_relationship(
        self, endpoint: Endpoint, identifier: str | None, name: str = "id"
    ) -> ResourceIdentifier | None:
        path = self._endpoint_path(endpoint, identifier, name)
        return self._decode(self._get(path), RelationshipResponse).data
