import os
from collections.abc import Mapping
from dataclasses import dataclass

from transifex_client.exceptions import TransifexConfigError

DEFAULT_BASE_URL = "https://rest.api.transifex.com"


@dataclass(frozen=True)
class TransifexClientConfig:
    """Configuration shared by all requests of a client.

    Args:
        token (str): API token sent as a bearer token on every request.
        base_url (str): The URL of the Transifex REST API.
        timeout (float | None): Request timeout in seconds. When None, the default
            timeout of the HTTP transport is used.
        client_name (str): Included in the User-Agent header.
    """

    token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = None
    client_name: str = "transifex-client"

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> "TransifexClientConfig":
        """Create a config from the TX_TOKEN, TX_API_URL and TX_TIMEOUT environment variables."""
        environ = os.environ if environ is None else environ
        token = environ.get("TX_TOKEN")
        if not token:
            raise TransifexConfigError("The TX_TOKEN environment variable is not set")
        timeout: float | None = None
        if raw_timeout := environ.get("TX_TIMEOUT"):
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise TransifexConfigError(f"TX_TIMEOUT must be a number of seconds, got {raw_timeout!r}") from None
        return cls(token=token, base_url=environ.get("TX_API_URL") or DEFAULT_BASE_URL, timeout=timeout)

    def create_api_url(self, endpoint: str) -> str:
        """Create a full API URL for the given endpoint.

        Args:
            endpoint (str): The API endpoint to append to the base URL.

        Returns:
            str: The full API URL.

        Examples:
            >>> config = TransifexClientConfig(token="my-token")
            >>> config.create_api_url("/projects")
            "https://rest.api.transifex.com/projects"
        """
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        return f"{self.base_url.rstrip('/')}{endpoint}"
