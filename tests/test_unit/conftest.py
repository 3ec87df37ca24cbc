from collections.abc import Iterator

import pytest

from tests.constants import BASE_URL
from transifex_client.client import TransifexClient, TransifexClientConfig
from transifex_client.client.http_client import HTTPClient


@pytest.fixture
def tx_config() -> TransifexClientConfig:
    return TransifexClientConfig(token="abc", base_url=BASE_URL, timeout=10, client_name="test-client")


@pytest.fixture
def http_client(tx_config: TransifexClientConfig) -> Iterator[HTTPClient]:
    with HTTPClient(tx_config) as client:
        yield client


@pytest.fixture
def tx_client(tx_config: TransifexClientConfig) -> Iterator[TransifexClient]:
    with TransifexClient(tx_config) as client:
        yield client
