import pytest

from transifex_client.client import DEFAULT_BASE_URL, TransifexClient, TransifexClientConfig
from transifex_client.exceptions import TransifexConfigError


class TestTransifexClientConfig:
    def test_from_environment(self) -> None:
        config = TransifexClientConfig.from_environment(
            {"TX_TOKEN": "secret", "TX_API_URL": "https://tx.example.com/", "TX_TIMEOUT": "2.5"}
        )

        assert config.token == "secret"
        assert config.timeout == 2.5
        assert config.create_api_url("/projects") == "https://tx.example.com/projects"

    def test_defaults(self) -> None:
        config = TransifexClientConfig.from_environment({"TX_TOKEN": "secret"})

        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout is None

    @pytest.mark.parametrize(
        "environ, message",
        [
            pytest.param({}, "TX_TOKEN", id="no token"),
            pytest.param({"TX_TOKEN": ""}, "TX_TOKEN", id="empty token"),
            pytest.param({"TX_TOKEN": "secret", "TX_TIMEOUT": "soon"}, "TX_TIMEOUT", id="bad timeout"),
        ],
    )
    def test_invalid_environment(self, environ: dict[str, str], message: str) -> None:
        with pytest.raises(TransifexConfigError) as exc_info:
            TransifexClientConfig.from_environment(environ)

        assert message in str(exc_info.value)

    @pytest.mark.parametrize("endpoint", ["/languages", "languages"])
    def test_create_api_url(self, endpoint: str) -> None:
        config = TransifexClientConfig(token="abc")

        assert config.create_api_url(endpoint) == "https://rest.api.transifex.com/languages"

    def test_client_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TX_TOKEN", "from-env")
        monkeypatch.delenv("TX_API_URL", raising=False)
        monkeypatch.delenv("TX_TIMEOUT", raising=False)

        with TransifexClient() as client:
            assert client.config.token == "from-env"
            assert client.config.base_url == DEFAULT_BASE_URL
