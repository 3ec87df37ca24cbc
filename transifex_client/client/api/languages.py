from transifex_client.client.http_client import HTTPClient
from transifex_client.client.request_classes import CursorParameters
from transifex_client.client.resource_classes.language import Language
from transifex_client.client.tx_client import Endpoint, PagedResponse, TXResourceAPI


class LanguagesAPI(TXResourceAPI[Language]):
    def __init__(self, http_client: HTTPClient) -> None:
        super().__init__(
            http_client,
            method_endpoint_map={
                "list": Endpoint("/languages"),
                "retrieve": Endpoint("/languages/{id}"),
            },
            resource_cls=Language,
        )

    def list(self, cursor: str | None = None) -> PagedResponse[Language]:
        """Get all the languages supported by Transifex."""
        return self._paginate(CursorParameters(cursor=cursor))

    def retrieve(self, language_id: str) -> Language:
        """Get a language, e.g. "l:en_US"."""
        return self._retrieve(language_id, name="language_id")
