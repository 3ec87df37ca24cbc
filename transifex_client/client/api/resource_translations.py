from transifex_client.client.http_client import HTTPClient
from transifex_client.client.request_classes import (
    ResourceTranslationListParameters,
    ResourceTranslationRetrieveParameters,
)
from transifex_client.client.resource_classes.resource_string import ResourceString
from transifex_client.client.resource_classes.resource_translation import ResourceTranslation
from transifex_client.client.tx_client import (
    Endpoint,
    IncludedItemResponse,
    IncludedPagedResponse,
    TXResourceAPI,
)


class ResourceTranslationsAPI(TXResourceAPI[ResourceTranslation]):
    """Translations of resource strings.

    With ``include="resource_string"`` the source strings are side-loaded and
    decoded into the ``included`` list of the response.
    """

    def __init__(self, http_client: HTTPClient) -> None:
        super().__init__(
            http_client,
            method_endpoint_map={
                "list": Endpoint("/resource_translations"),
                "retrieve": Endpoint("/resource_translations/{id}"),
            },
            resource_cls=ResourceTranslation,
        )

    def list(
        self, parameters: ResourceTranslationListParameters
    ) -> IncludedPagedResponse[ResourceTranslation, ResourceString]:
        """List the translations of a resource in one language.

        Args:
            parameters: The resource and the language are required. The page size defaults to 150.

        Returns:
            IncludedPagedResponse of ResourceTranslation objects, with the source strings when included.
        """
        return self._paginate(  # type: ignore[return-value]
            parameters,
            envelope=IncludedPagedResponse[ResourceTranslation, ResourceString],  # type: ignore[arg-type]
        )

    def retrieve(self, parameters: ResourceTranslationRetrieveParameters) -> ResourceTranslation:
        return self.retrieve_with_included(parameters).data

    def retrieve_with_included(
        self, parameters: ResourceTranslationRetrieveParameters
    ) -> IncludedItemResponse[ResourceTranslation, ResourceString]:
        """Get a translation together with its side-loaded source string."""
        return self._retrieve_envelope(
            parameters.resource_translation,
            IncludedItemResponse[ResourceTranslation, ResourceString],
            parameters,
            name="resource_translation",
        )
