"""Fixtures for service tests against a mocked API."""

from urllib.parse import urlencode

import pytest

BASE_URL = "https://api.cloudcraft.co"


@pytest.fixture
def api_url():
    """Provide a function building absolute API URLs."""

    def build(path: str, **query: str) -> str:
        url = f"{BASE_URL}/{path}"
        if query:
            url = f"{url}?{urlencode(query)}"
        return url

    return build


@pytest.fixture
def last_request(sent_requests):
    """Provide a function returning (method, url, kwargs) of the only request."""

    def get() -> tuple[str, str, dict]:
        requests = sent_requests()
        assert len(requests) == 1
        return requests[0]

    return get
