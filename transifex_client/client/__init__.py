from ._transifex_client import TransifexClient
from .config import DEFAULT_BASE_URL, TransifexClientConfig

__all__ = ["DEFAULT_BASE_URL", "TransifexClient", "TransifexClientConfig"]
