from ._client import HTTPClient
from ._data_classes import (
    JSON_API_MEDIA_TYPE,
    ErrorDetails,
    ErrorDocument,
    FailedRequest,
    HTTPResult,
    RequestMessage,
    ResponseMessage,
)

__all__ = [
    "JSON_API_MEDIA_TYPE",
    "ErrorDetails",
    "ErrorDocument",
    "FailedRequest",
    "HTTPClient",
    "HTTPResult",
    "RequestMessage",
    "ResponseMessage",
]
