from transifex_client.client.http_client import HTTPClient
from transifex_client.client.request_classes import I18nFormatListParameters
from transifex_client.client.resource_classes.i18n_format import I18nFormat
from transifex_client.client.tx_client import Endpoint, PagedResponse, TXResourceAPI


class I18nFormatsAPI(TXResourceAPI[I18nFormat]):
    """The file formats that resources of an organization can be uploaded in."""

    def __init__(self, http_client: HTTPClient) -> None:
        super().__init__(
            http_client,
            method_endpoint_map={"list": Endpoint("/i18n_formats")},
            resource_cls=I18nFormat,
        )

    def list(self, parameters: I18nFormatListParameters) -> PagedResponse[I18nFormat]:
        return self._paginate(parameters)
