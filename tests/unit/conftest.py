import json
from unittest.mock import MagicMock

import pytest
import requests
from pytest import MonkeyPatch

from zeromk import Interface
from zeromk.utils.config import Credentials, ServiceConfig
from zeromk.utils.constants import (
    ZEROMK_USERNAME_ENV,
    ZEROMK_APIKEY_ENV,
    ZEROMK_SHORTEN_URI_ENV,
    ZEROMK_PREVIEW_URI_ENV,
    ZEROMK_DOMAIN_ENV,
    ZEROMK_MAX_REDIRECTS_ENV,
    ZEROMK_TIMEOUT_ENV,
    ZEROMK_CONFIG_FILE_ENV,
    LOG_LEVEL_ENV,
)


@pytest.fixture(autouse=True)
def _env(monkeypatch: MonkeyPatch) -> None:
    """Isolate tests from the developer's 0.mk environment."""
    for name in (
        ZEROMK_USERNAME_ENV,
        ZEROMK_APIKEY_ENV,
        ZEROMK_SHORTEN_URI_ENV,
        ZEROMK_PREVIEW_URI_ENV,
        ZEROMK_DOMAIN_ENV,
        ZEROMK_MAX_REDIRECTS_ENV,
        ZEROMK_TIMEOUT_ENV,
        ZEROMK_CONFIG_FILE_ENV,
        LOG_LEVEL_ENV,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_response():
    """Build real requests.Response objects with canned status, headers and body."""

    def _make(status: int = 200, body=None, headers: dict | None = None, url: str = 'http://api.0.mk/v2/skrati') -> requests.Response:
        response = requests.Response()
        response.status_code = status
        response.reason = 'TEST'
        response.url = url
        response.encoding = 'utf-8'
        response.headers.update(headers or {})
        if body is None:
            response._content = b''
        elif isinstance(body, (bytes, str)):
            response._content = body.encode('utf-8') if isinstance(body, str) else body
        else:
            response._content = json.dumps(body).encode('utf-8')
        return response

    return _make


@pytest.fixture
def session() -> requests.Session:
    """Mock a requests.Session transport."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(username='petar', apikey='s3cr3t')


@pytest.fixture
def config() -> ServiceConfig:
    return ServiceConfig(
        shorten_uri='http://api.0.mk/v2/skrati',
        preview_uri='http://api.0.mk/v2/pregled',
        service_domain='0.mk',
        max_redirects=5,
        timeout=3.0,
    )


@pytest.fixture
def interface(credentials, config, session) -> Interface:
    return Interface(credentials, config, session=session)


@pytest.fixture
def shorten_payload() -> dict:
    """Full successful response of the shorten API call."""
    # fmt: off
    return {
        'status': 1,
        'dolg': 'https://example.com/blog/chuck-norris-is-awesome',
        'kratok': 'http://0.mk/chuck',
        'nastavka': 'chuck',
        'urlNaslov': 'Chuck Norris is awesome',
        'statsLink': 'http://0.mk/statistiki/chuck',
        'brisiLink': 'http://0.mk/brisi/chuck',
        'brisiKod': 'x1y2z3',
    }
    # fmt: on
