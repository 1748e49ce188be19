"""Client configuration management.

The 0.mk client is configured with two immutable values which are handed to an
`Interface` at construction:

    ServiceConfig: API endpoints, service domain and transport settings
    Credentials:   0.mk username and API key

Both are resolved in layers, later layers overriding earlier ones:

    1. Built-in defaults (see `zeromk.utils.constants`)
    2. An optional YAML file, given explicitly or through `ZEROMK_CONFIG_FILE`
    3. Environment variables

The YAML file follows this structure (every key is optional):

    service:
      shorten_uri: http://api.0.mk/v2/skrati
      preview_uri: http://api.0.mk/v2/pregled
      domain: 0.mk
      max_redirects: 5
      timeout: 10
    credentials:
      username: petar
      apikey: s3cr3t

Functions:
    config_file_path(path: str | Path | None = None) -> Path | None
        Return the YAML config file to read, if any.

    load_config(path: str | Path | None = None) -> ServiceConfig
        Resolve the service configuration.

    load_credentials(path: str | Path | None = None) -> Credentials
        Resolve the 0.mk credentials.

Example:
    >>> os.environ['ZEROMK_DOMAIN'] = 'www.0.mk'
    >>> load_config().service_domain
    'www.0.mk'
"""

import os
import logging
from pathlib import Path
from dataclasses import dataclass

import yaml

from zeromk.types import YAMLDocument
from zeromk.utils.constants import (
    DEFAULT_SHORTEN_URI,
    DEFAULT_PREVIEW_URI,
    DEFAULT_SERVICE_DOMAIN,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_TIMEOUT_SECONDS,
    ZEROMK_USERNAME_ENV,
    ZEROMK_APIKEY_ENV,
    ZEROMK_SHORTEN_URI_ENV,
    ZEROMK_PREVIEW_URI_ENV,
    ZEROMK_DOMAIN_ENV,
    ZEROMK_MAX_REDIRECTS_ENV,
    ZEROMK_TIMEOUT_ENV,
    ZEROMK_CONFIG_FILE_ENV,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """0.mk account credentials. Both fields are optional for anonymous use."""

    username: str | None = None
    apikey: str | None = None

    def __repr__(self) -> str:
        return f'Credentials(username={self.username!r}, apikey={"***" if self.apikey else None})'


@dataclass(frozen=True)
class ServiceConfig:
    """Endpoints and transport settings of the 0.mk service.

    Attributes:
        shorten_uri (str):
            Base URI of the shorten API call.
        preview_uri (str):
            Base URI of the preview API call.
        service_domain (str):
            Domain of the short links, used to recognize 0.mk URIs.
        max_redirects (int):
            Maximum number of redirects followed per API call.
        timeout (float | None):
            Transport timeout in seconds, None to wait forever.
    """

    shorten_uri: str = DEFAULT_SHORTEN_URI
    preview_uri: str = DEFAULT_PREVIEW_URI
    service_domain: str = DEFAULT_SERVICE_DOMAIN
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    timeout: float | None = DEFAULT_TIMEOUT_SECONDS


def config_file_path(path: str | Path | None = None) -> Path | None:
    """Return the YAML config file to read

    Args:
        path (str | Path | None):
            Explicit path. Falls back to `ZEROMK_CONFIG_FILE`.

    Returns:
        Path | None: path of the config file, None if no file is configured.
    """
    path = path or os.environ.get(ZEROMK_CONFIG_FILE_ENV)
    return Path(path).expanduser() if path else None


def _load_yaml(path: Path | None) -> YAMLDocument:
    """Load a YAML config file into a Python dict (empty dict if no file)."""
    if path is None:
        return {}
    if not path.is_file():
        raise FileNotFoundError(f'Config file not found: {path}')

    with path.open('r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f'Config file must contain a mapping: {path}')
    logger.debug('Loaded config file.', extra={'configFile': str(path)})
    return data


def _section(document: YAMLDocument, name: str) -> YAMLDocument:
    section = document.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' section must be a mapping")
    return section


def _max_redirects(value) -> int:
    try:
        max_redirects = int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f'max_redirects must be an integer (given value: {value!r}).') from e
    if max_redirects < 0:
        raise ValueError(f'max_redirects must be non-negative (given value: {max_redirects}).')
    return max_redirects


def _timeout(value) -> float | None:
    if value is None or str(value).strip().lower() in {'', 'none'}:
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f'timeout must be a number of seconds (given value: {value!r}).') from e
    if timeout <= 0:
        raise ValueError(f'timeout must be positive (given value: {timeout}).')
    return timeout


def load_config(path: str | Path | None = None) -> ServiceConfig:
    """Resolve the service configuration from defaults, YAML file and environment

    Args:
        path (str | Path | None):
            Optional YAML config file. Falls back to `ZEROMK_CONFIG_FILE`.

    Returns:
        ServiceConfig: the resolved configuration.

    Raises:
        FileNotFoundError: if a config file is named but does not exist.
        ValueError: if the file or any value is malformed.
    """
    service = _section(_load_yaml(config_file_path(path)), 'service')

    values = {
        'shorten_uri': service.get('shorten_uri', DEFAULT_SHORTEN_URI),
        'preview_uri': service.get('preview_uri', DEFAULT_PREVIEW_URI),
        'service_domain': service.get('domain', DEFAULT_SERVICE_DOMAIN),
        'max_redirects': service.get('max_redirects', DEFAULT_MAX_REDIRECTS),
        'timeout': service.get('timeout', DEFAULT_TIMEOUT_SECONDS),
    }

    # fmt: off
    overrides = {
        'shorten_uri': ZEROMK_SHORTEN_URI_ENV,
        'preview_uri': ZEROMK_PREVIEW_URI_ENV,
        'service_domain': ZEROMK_DOMAIN_ENV,
        'max_redirects': ZEROMK_MAX_REDIRECTS_ENV,
        'timeout': ZEROMK_TIMEOUT_ENV,
    }
    # fmt: on
    for key, env in overrides.items():
        if os.environ.get(env):
            values[key] = os.environ[env]

    return ServiceConfig(
        shorten_uri=str(values['shorten_uri']).strip(),
        preview_uri=str(values['preview_uri']).strip(),
        service_domain=str(values['service_domain']).strip(),
        max_redirects=_max_redirects(values['max_redirects']),
        timeout=_timeout(values['timeout']),
    )


def load_credentials(path: str | Path | None = None) -> Credentials:
    """Resolve the 0.mk credentials from YAML file and environment

    Args:
        path (str | Path | None):
            Optional YAML config file. Falls back to `ZEROMK_CONFIG_FILE`.

    Returns:
        Credentials: resolved credentials, fields are None when not configured.
    """
    section = _section(_load_yaml(config_file_path(path)), 'credentials')

    username = os.environ.get(ZEROMK_USERNAME_ENV) or section.get('username')
    apikey = os.environ.get(ZEROMK_APIKEY_ENV) or section.get('apikey')

    return Credentials(
        username=str(username) if username is not None else None,
        apikey=str(apikey) if apikey is not None else None,
    )
