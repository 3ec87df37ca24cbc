from ._version import __version__
from .client import TransifexClient, TransifexClientConfig
from .exceptions import (
    InvalidEnumValueError,
    InvalidRangeError,
    MissingParameterError,
    TransifexAPIError,
    TransifexConfigError,
    TransifexDecodeError,
    TransifexError,
    TransifexTransportError,
    TransifexValidationError,
)

__all__ = [
    "InvalidEnumValueError",
    "InvalidRangeError",
    "MissingParameterError",
    "TransifexAPIError",
    "TransifexClient",
    "TransifexClientConfig",
    "TransifexConfigError",
    "TransifexDecodeError",
    "TransifexError",
    "TransifexTransportError",
    "TransifexValidationError",
    "__version__",
]
