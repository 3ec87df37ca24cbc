import sys
from typing import Literal

import httpx

from .api.i18n_formats import I18nFormatsAPI
from .api.languages import LanguagesAPI
from .api.organizations import OrganizationsAPI
from .api.projects import ProjectsAPI
from .api.resource_string_comments import ResourceStringCommentsAPI
from .api.resource_strings import ResourceStringsAPI
from .api.resource_translations import ResourceTranslationsAPI
from .api.resources import ResourcesAPI
from .api.statistics import StatisticsAPI
from .api.team_memberships import TeamMembershipsAPI
from .api.teams import TeamsAPI
from .api.users import UsersAPI
from .config import TransifexClientConfig
from .http_client import HTTPClient

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


class TransifexClient:
    """Entry point to the Transifex REST API.

    Args:
        config (TransifexClientConfig | None): The configuration. When None, it is read
            from the environment, see ``TransifexClientConfig.from_environment``.
        transport (httpx.BaseTransport | None): Transport used by the underlying HTTP client.

    Examples:
        >>> with TransifexClient(TransifexClientConfig(token="my-token")) as client:
        ...     page = client.projects.list(ProjectListParameters(organization="o:my-org"))
    """

    def __init__(
        self, config: TransifexClientConfig | None = None, transport: httpx.BaseTransport | None = None
    ) -> None:
        self._config = config or TransifexClientConfig.from_environment()
        self._http_client = HTTPClient(self._config, transport=transport)
        self.organizations = OrganizationsAPI(self._http_client)
        self.projects = ProjectsAPI(self._http_client)
        self.resources = ResourcesAPI(self._http_client)
        self.languages = LanguagesAPI(self._http_client)
        self.resource_strings = ResourceStringsAPI(self._http_client)
        self.resource_string_comments = ResourceStringCommentsAPI(self._http_client)
        self.resource_translations = ResourceTranslationsAPI(self._http_client)
        self.teams = TeamsAPI(self._http_client)
        self.team_memberships = TeamMembershipsAPI(self._http_client)
        self.statistics = StatisticsAPI(self._http_client)
        self.i18n_formats = I18nFormatsAPI(self._http_client)
        self.users = UsersAPI(self._http_client)

    @property
    def config(self) -> TransifexClientConfig:
        """Returns the configuration used by this client."""
        return self._config

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_value: BaseException | None, traceback: object | None
    ) -> Literal[False]:
        self.close()
        return False

    def close(self) -> None:
        self._http_client.close()
