"""Factories for the pooled, TLS-hardened aiohttp session."""

import ssl as ssl_module
import typing as t

import aiohttp
import certifi

# Pool bounds for kept-alive connections, overall and per host
DEFAULT_POOL_LIMIT = 100
DEFAULT_POOL_LIMIT_PER_HOST = 10
DEFAULT_KEEPALIVE_TIMEOUT = 90.0  # seconds


def create_ssl_context() -> ssl_module.SSLContext:
    """Create an SSL context that only negotiates TLS 1.3.

    Uses certifi's CA bundle so certificate verification behaves the same on
    every platform, e.g. macOS framework builds without system certificates.
    The context keeps TLS sessions for resumption across pooled connections.
    """
    context = ssl_module.create_default_context(cafile=certifi.where())
    context.minimum_version = ssl_module.TLSVersion.TLSv1_3
    return context


def create_secure_connector(
    ssl: ssl_module.SSLContext | None = None, **kwargs: t.Any
) -> aiohttp.TCPConnector:
    """Create a connection pool bound to a TLS 1.3 SSL context.

    Args:
        ssl: SSL context to use. Defaults to create_ssl_context().
        **kwargs: Extra TCPConnector arguments, overriding the pool defaults

    Returns:
        Configured TCPConnector. Must be created inside a running event loop.
    """
    kwargs.setdefault("limit", DEFAULT_POOL_LIMIT)
    kwargs.setdefault("limit_per_host", DEFAULT_POOL_LIMIT_PER_HOST)
    kwargs.setdefault("keepalive_timeout", DEFAULT_KEEPALIVE_TIMEOUT)
    return aiohttp.TCPConnector(ssl=ssl or create_ssl_context(), **kwargs)


def create_session(
    timeout: float, connector: aiohttp.BaseConnector | None = None
) -> aiohttp.ClientSession:
    """Create the client session used for every API call.

    - total timeout applies to each attempt
    - responses are not decompressed and no Accept-Encoding is advertised,
      the API chooses its own payload encoding
    - proxies are read from the environment

    Redirects are disabled per request by the transport, not here.

    Args:
        timeout: Time limit for a single request, in seconds
        connector: Connection pool. Defaults to create_secure_connector().
    """
    return aiohttp.ClientSession(
        connector=connector or create_secure_connector(),
        timeout=aiohttp.ClientTimeout(total=timeout),
        auto_decompress=False,
        skip_auto_headers=("Accept-Encoding",),
        trust_env=True,
    )
