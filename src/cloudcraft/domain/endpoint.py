"""Base URL assembly from endpoint fragments."""

from pydantic import HttpUrl
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InvalidEndpointError, InvalidSchemeError, MissingFragmentError

_ALLOWED_SCHEMES = frozenset({"http", "https"})


def parse_endpoint(scheme: str, host: str, port: str = "", path: str = "") -> HttpUrl:
    """Assemble and validate a base URL from its fragments.

    The fragments are joined as ``scheme://host[:port]path``. Pydantic's
    ``HttpUrl`` omits the default port for the scheme when rendered, so
    ``("https", "api.cloudcraft.co", "443", "/")`` renders as
    ``https://api.cloudcraft.co/``.

    Args:
        scheme: Either "http" or "https"
        host: Host name or IP address
        port: Optional port number
        path: Optional path, defaults to "/"

    Returns:
        The parsed base URL

    Raises:
        MissingFragmentError: If scheme or host is empty
        InvalidSchemeError: If scheme is not exactly "http" or "https"
        InvalidEndpointError: If the assembled string is not a valid URL

    Examples:
        >>> str(parse_endpoint("https", "example.com", "8080", ""))
        'https://example.com:8080/'
    """
    if not scheme or not host:
        raise MissingFragmentError()

    if scheme not in _ALLOWED_SCHEMES:
        raise InvalidSchemeError(scheme)

    if not path:
        path = "/"

    endpoint = f"{scheme}://{host}"
    if port:
        endpoint = f"{endpoint}:{port}"
    endpoint = f"{endpoint}{path}"

    try:
        return HttpUrl(endpoint)
    except PydanticValidationError as exc:
        raise InvalidEndpointError(endpoint) from exc
