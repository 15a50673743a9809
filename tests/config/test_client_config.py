"""Tests for ClientConfig defaults, environment loading and validation."""

import pytest

from cloudcraft.config.client import (
    API_KEY_LENGTH,
    DEFAULT_HOST,
    DEFAULT_PATH,
    DEFAULT_PORT,
    DEFAULT_RATE_LIMIT,
    DEFAULT_SCHEME,
    DEFAULT_TIMEOUT,
    ClientConfig,
)
from cloudcraft.domain.exceptions import (
    ConfigError,
    InvalidKeyError,
    MissingEndpointHostError,
    MissingEndpointSchemeError,
    MissingKeyError,
)

VALID_KEY = "k" * API_KEY_LENGTH


class TestClientConfigDefaults:
    def test_defaults(self) -> None:
        config = ClientConfig()
        assert config.scheme == DEFAULT_SCHEME == "https"
        assert config.host == DEFAULT_HOST == "api.cloudcraft.co"
        assert config.port == DEFAULT_PORT == "443"
        assert config.path == DEFAULT_PATH == "/"
        assert config.timeout == DEFAULT_TIMEOUT == 80.0
        assert config.max_retries == 3
        assert config.min_retry_delay == 1.0
        assert config.max_retry_delay == 30.0
        assert config.rate_limit == DEFAULT_RATE_LIMIT == 2.0

    @pytest.mark.parametrize("timeout", [0, -5.0])
    def test_non_positive_timeout_uses_default(self, timeout: float) -> None:
        assert ClientConfig(timeout=timeout).timeout == DEFAULT_TIMEOUT

    def test_repr_masks_key(self) -> None:
        config = ClientConfig(key="abcd" + "x" * 40)
        assert "x" * 40 not in repr(config)
        assert "abcd..." in repr(config)


class TestClientConfigFromEnv:
    """Test reading CLOUDCRAFT_* variables."""

    def test_reads_all_variables(self) -> None:
        config = ClientConfig.from_env(
            {
                "CLOUDCRAFT_PROTOCOL": "http",
                "CLOUDCRAFT_HOST": "localhost",
                "CLOUDCRAFT_PORT": "8080",
                "CLOUDCRAFT_PATH": "/api/",
                "CLOUDCRAFT_TIMEOUT": "15s",
                "CLOUDCRAFT_MAX_RETRIES": "5",
                "CLOUDCRAFT_API_KEY": VALID_KEY,
            }
        )
        assert config.scheme == "http"
        assert config.host == "localhost"
        assert config.port == "8080"
        assert config.path == "/api/"
        assert config.timeout == 15.0
        assert config.max_retries == 5
        assert config.key == VALID_KEY

    def test_empty_environment_uses_defaults(self) -> None:
        config = ClientConfig.from_env({})
        assert config == ClientConfig()

    @pytest.mark.parametrize(
        "name,value",
        [
            ("CLOUDCRAFT_TIMEOUT", "soon"),
            ("CLOUDCRAFT_TIMEOUT", ""),
            ("CLOUDCRAFT_MAX_RETRIES", "many"),
            ("CLOUDCRAFT_HOST", ""),
        ],
    )
    def test_unparsable_values_fall_back(self, name: str, value: str) -> None:
        assert ClientConfig.from_env({name: value}) == ClientConfig()

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("80", 80.0),
            ("2.5", 2.5),
            ("15s", 15.0),
            ("2m", 120.0),
            ("500ms", 0.5),
            ("1m30s", 90.0),
            ("1.5h", 5400.0),
            ("1h2m3s", 3723.0),
        ],
    )
    def test_timeout_durations(self, value: str, expected: float) -> None:
        config = ClientConfig.from_env({"CLOUDCRAFT_TIMEOUT": value})
        assert config.timeout == pytest.approx(expected)

    @pytest.mark.parametrize(
        "value", ["nan", "inf", "-inf", "1e3", "2 m", "m", "5d", "1" * 400]
    )
    def test_invalid_timeout_falls_back(self, value: str) -> None:
        config = ClientConfig.from_env({"CLOUDCRAFT_TIMEOUT": value})
        assert config.timeout == DEFAULT_TIMEOUT

    def test_negative_timeout_falls_back(self) -> None:
        config = ClientConfig.from_env({"CLOUDCRAFT_TIMEOUT": "-5s"})
        assert config.timeout == DEFAULT_TIMEOUT

    def test_reads_os_environ_by_default(self, monkeypatch) -> None:
        monkeypatch.setenv("CLOUDCRAFT_API_KEY", VALID_KEY)
        monkeypatch.setenv("CLOUDCRAFT_HOST", "env.example.com")
        config = ClientConfig.from_env()
        assert config.key == VALID_KEY
        assert config.host == "env.example.com"


class TestClientConfigValidate:
    def test_valid_config(self) -> None:
        ClientConfig(key=VALID_KEY).validate()

    @pytest.mark.parametrize(
        "config,error",
        [
            (ClientConfig(key=VALID_KEY, scheme=""), MissingEndpointSchemeError),
            (ClientConfig(key=VALID_KEY, host=""), MissingEndpointHostError),
            (ClientConfig(key=""), MissingKeyError),
            (ClientConfig(key="short"), InvalidKeyError),
            (ClientConfig(key=VALID_KEY + "x"), InvalidKeyError),
        ],
    )
    def test_invalid_config(self, config: ClientConfig, error: type) -> None:
        with pytest.raises(error):
            config.validate()

    def test_endpoint_checked_before_key(self) -> None:
        with pytest.raises(MissingEndpointHostError):
            ClientConfig(key="", host="").validate()

    def test_errors_are_config_errors(self) -> None:
        with pytest.raises(ConfigError):
            ClientConfig().validate()
