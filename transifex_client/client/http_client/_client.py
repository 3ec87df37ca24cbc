import logging
import sys
from collections.abc import MutableMapping
from typing import Literal

import httpx

from transifex_client._version import __version__
from transifex_client.client.config import TransifexClientConfig
from transifex_client.client.http_client._data_classes import (
    FailedRequest,
    HTTPResult,
    RequestMessage,
    ResponseMessage,
)

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


class HTTPClient:
    """An HTTP client for the Transifex API.

    Every request is a single attempt. There is no retry, no rate limiting and
    no inspection of the status code; the caller decodes the body.

    Args:
        config (TransifexClientConfig): Configuration for the Transifex client.
        transport (httpx.BaseTransport | None): Transport used by the underlying
            httpx client. Defaults to the httpx default transport.

    """

    def __init__(self, config: TransifexClientConfig, transport: httpx.BaseTransport | None = None) -> None:
        self.config = config
        self.session = self._create_session(transport)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_value: BaseException | None, traceback: object | None
    ) -> Literal[False]:
        """Close the session when exiting the context."""
        self.close()
        return False  # Do not suppress exceptions

    def close(self) -> None:
        self.session.close()

    def _create_session(self, transport: httpx.BaseTransport | None) -> httpx.Client:
        if self.config.timeout is None:
            return httpx.Client(transport=transport)
        return httpx.Client(transport=transport, timeout=self.config.timeout)

    def _create_headers(self, accept: str) -> MutableMapping[str, str]:
        headers: MutableMapping[str, str] = {}
        headers["User-Agent"] = f"httpx/{httpx.__version__} {self.config.client_name}/{__version__}"
        headers["Authorization"] = f"Bearer {self.config.token}"
        headers["Accept"] = accept
        return headers

    def request_single(self, message: RequestMessage) -> HTTPResult:
        """Send an HTTP request and return the response.

        Args:
            message (RequestMessage): The request message to send.
        Returns:
            HTTPResult: The response message, or a failed request if no response was received.
        """
        logger.debug("%s %s", message.method, message.endpoint_url)
        try:
            response = self._make_request(message)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return self._handle_error_single(e, message)
        return ResponseMessage(status_code=response.status_code, body=response.text, content=response.content)

    def _make_request(self, message: RequestMessage) -> httpx.Response:
        return self.session.request(
            method=message.method,
            url=message.endpoint_url,
            headers=self._create_headers(message.accept),
            follow_redirects=False,
        )

    def _handle_error_single(self, e: Exception, request: RequestMessage) -> FailedRequest:
        if isinstance(e, httpx.TimeoutException):
            error_type = "timeout"
        elif isinstance(e, httpx.ConnectError):
            error_type = "connect"
        elif isinstance(e, httpx.UnsupportedProtocol | httpx.InvalidURL):
            error_type = "invalid URL"
        else:
            error_type = "transport"
        logger.warning("%s %s failed (%s error): %s", request.method, request.endpoint_url, error_type, e)
        return FailedRequest(error=f"{type(e).__name__} ({error_type} error): {e!s}")
