"""HTTP transport - session factories and transport implementations."""

from .factories import (
    DEFAULT_POOL_LIMIT,
    DEFAULT_POOL_LIMIT_PER_HOST,
    create_secure_connector,
    create_session,
    create_ssl_context,
)
from .transport import AiohttpTransport, BaseTransport

__all__ = [
    "AiohttpTransport",
    "BaseTransport",
    "DEFAULT_POOL_LIMIT",
    "DEFAULT_POOL_LIMIT_PER_HOST",
    "create_secure_connector",
    "create_session",
    "create_ssl_context",
]
