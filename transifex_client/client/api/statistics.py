from transifex_client.client.http_client import HTTPClient
from transifex_client.client.request_classes import ResourceLanguageStatsListParameters
from transifex_client.client.resource_classes.statistics import ResourceLanguageStats
from transifex_client.client.tx_client import Endpoint, PagedResponse, TXResourceAPI


class StatisticsAPI(TXResourceAPI[ResourceLanguageStats]):
    def __init__(self, http_client: HTTPClient) -> None:
        super().__init__(
            http_client,
            method_endpoint_map={
                "list": Endpoint("/resource_language_stats"),
                "retrieve": Endpoint("/resource_language_stats/{id}"),
            },
            resource_cls=ResourceLanguageStats,
        )

    def list(self, parameters: ResourceLanguageStatsListParameters) -> PagedResponse[ResourceLanguageStats]:
        """Get the statistics of a project, optionally narrowed down to a resource or a language.

        Args:
            parameters: The project is required.

        Returns:
            PagedResponse of ResourceLanguageStats objects.
        """
        return self._paginate(parameters)

    def retrieve(self, stats_id: str) -> ResourceLanguageStats:
        """Get the statistics of one resource in one language, e.g. "o:org:p:proj:r:res:l:en"."""
        return self._retrieve(stats_id, name="stats_id")
