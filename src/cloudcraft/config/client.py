"""Connection settings for the Cloudcraft API."""

import math
import os
import re
import typing as t
from dataclasses import dataclass

from ..domain.exceptions import (
    InvalidKeyError,
    MissingEndpointHostError,
    MissingEndpointSchemeError,
    MissingKeyError,
)
from ..domain.retry import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_MAX_RETRY_DELAY,
    DEFAULT_MIN_RETRY_DELAY,
)

DEFAULT_SCHEME = "https"
DEFAULT_HOST = "api.cloudcraft.co"
DEFAULT_PORT = "443"
DEFAULT_PATH = "/"
DEFAULT_TIMEOUT = 80.0  # seconds
DEFAULT_RATE_LIMIT = 2.0  # requests per second

API_KEY_LENGTH = 44

# Environment variables read by ClientConfig.from_env
ENV_SCHEME = "CLOUDCRAFT_PROTOCOL"
ENV_HOST = "CLOUDCRAFT_HOST"
ENV_PORT = "CLOUDCRAFT_PORT"
ENV_PATH = "CLOUDCRAFT_PATH"
ENV_TIMEOUT = "CLOUDCRAFT_TIMEOUT"
ENV_MAX_RETRIES = "CLOUDCRAFT_MAX_RETRIES"
ENV_API_KEY = "CLOUDCRAFT_API_KEY"


def _get_env(environ: t.Mapping[str, str], key: str, fallback: str) -> str:
    value = environ.get(key, "")
    return value or fallback


_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "\u00b5s": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"
_UNIT = r"(?:ns|us|\u00b5s|ms|s|m|h)"
_DURATION_PART = re.compile(rf"({_NUMBER})({_UNIT})")
_DURATION = re.compile(rf"([+-]?)((?:{_NUMBER}{_UNIT})+|{_NUMBER})")


def parse_duration(value: str) -> float | None:
    """Parse a duration such as "80", "15s", "500ms" or "1m30s" into seconds.

    A bare number is read as seconds.

    Returns:
        The duration in seconds, or None if value is not a finite duration
    """
    match = _DURATION.fullmatch(value)
    if match is None:
        return None
    sign, body = match.groups()
    parts = _DURATION_PART.findall(body)
    if parts:
        seconds = sum(float(number) * _DURATION_UNITS[unit] for number, unit in parts)
    else:
        seconds = float(body)
    if not math.isfinite(seconds):
        return None
    return -seconds if sign == "-" else seconds


def _get_duration_env(
    environ: t.Mapping[str, str], key: str, fallback: float
) -> float:
    value = environ.get(key, "")
    if not value:
        return fallback
    seconds = parse_duration(value)
    return fallback if seconds is None else seconds


def _get_int_env(environ: t.Mapping[str, str], key: str, fallback: int) -> int:
    value = environ.get(key, "")
    if not value:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


@dataclass(frozen=True)
class ClientConfig:
    """Connection, authentication and retry settings for a Client.

    Attributes:
        key: API key sent as a bearer token. Required, exactly 44 characters.
        scheme: Protocol scheme, "http" or "https"
        host: Host name or IP address of the API
        port: Port number of the API
        path: Base path of the API
        timeout: Time limit for a single HTTP attempt, in seconds. Values <= 0
            fall back to DEFAULT_TIMEOUT.
        max_retries: Retries after the first attempt
        min_retry_delay: Delay before the first retry, in seconds
        max_retry_delay: Upper bound for retry delays, in seconds
        rate_limit: Client-side requests per second, or None for no limit
    """

    key: str = ""
    scheme: str = DEFAULT_SCHEME
    host: str = DEFAULT_HOST
    port: str = DEFAULT_PORT
    path: str = DEFAULT_PATH
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    min_retry_delay: float = DEFAULT_MIN_RETRY_DELAY
    max_retry_delay: float = DEFAULT_MAX_RETRY_DELAY
    rate_limit: float | None = DEFAULT_RATE_LIMIT

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            object.__setattr__(self, "timeout", DEFAULT_TIMEOUT)

    def __repr__(self) -> str:
        # Keep the key out of logs and tracebacks
        masked = f"{self.key[:4]}..." if self.key else ""
        return (
            f"ClientConfig(key={masked!r}, scheme={self.scheme!r}, "
            f"host={self.host!r}, port={self.port!r}, path={self.path!r}, "
            f"timeout={self.timeout}, max_retries={self.max_retries})"
        )

    @classmethod
    def from_env(cls, environ: t.Mapping[str, str] | None = None) -> "ClientConfig":
        """Build a config from CLOUDCRAFT_* environment variables.

        Unset, empty or unparsable values fall back to the defaults.

        Args:
            environ: Mapping to read from. Defaults to os.environ.
        """
        env = os.environ if environ is None else environ
        return cls(
            key=_get_env(env, ENV_API_KEY, ""),
            scheme=_get_env(env, ENV_SCHEME, DEFAULT_SCHEME),
            host=_get_env(env, ENV_HOST, DEFAULT_HOST),
            port=_get_env(env, ENV_PORT, DEFAULT_PORT),
            path=_get_env(env, ENV_PATH, DEFAULT_PATH),
            timeout=_get_duration_env(env, ENV_TIMEOUT, DEFAULT_TIMEOUT),
            max_retries=_get_int_env(env, ENV_MAX_RETRIES, DEFAULT_MAX_RETRIES),
        )

    def validate(self) -> None:
        """Check the config before any request is attempted.

        Raises:
            MissingEndpointSchemeError: If scheme is empty
            MissingEndpointHostError: If host is empty
            MissingKeyError: If key is empty
            InvalidKeyError: If key is not API_KEY_LENGTH characters long
        """
        if not self.scheme:
            raise MissingEndpointSchemeError()

        if not self.host:
            raise MissingEndpointHostError()

        if not self.key:
            raise MissingKeyError()

        if len(self.key) != API_KEY_LENGTH:
            raise InvalidKeyError(len(self.key), API_KEY_LENGTH)
