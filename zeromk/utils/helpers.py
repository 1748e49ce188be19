"""Helper utilities for recognizing and building 0.mk links.

Functions:
    service_uri_pattern(domain: str) -> re.Pattern
        Compile the pattern matching URIs on the service's own domain
    is_service_uri(uri: str, domain: str) -> bool
        Check whether a URI points at the service's own domain
    get_short_uri(short_name: str, domain: str) -> str
        Get string representation of the short URI for a given short name
    is_delete_code(code: str) -> bool
        Check whether a delete code is alphanumeric
    mask_apikey(uri: str) -> str
        Hide the API key value of a request URI before logging it

Example:
    >>> from zeromk.utils.helpers import is_service_uri, get_short_uri
    >>> is_service_uri('http://www.0.mk/abc', '0.mk')
    True
    >>> is_service_uri('https://example.com/abc', '0.mk')
    False
    >>> get_short_uri('abc', '0.mk')
    'http://0.mk/abc'
"""

import re
import functools


URL_SCAN_PATTERN = re.compile(r'https?://\S+')
DELETE_CODE_PATTERN = re.compile(r'[A-Za-z0-9]+')
APIKEY_PARAM_PATTERN = re.compile(r'(?<=[?&]apikey=)[^&]*')


@functools.cache
def service_uri_pattern(domain: str) -> re.Pattern:
    """Compile the pattern matching `http(s)://[www.]<domain>[/short_name]`

    Args:
        domain (str): service domain, e.g. '0.mk'

    Returns:
        re.Pattern: compiled, case-insensitive pattern meant for `fullmatch()`
    """
    return re.compile(rf'https?://(www\.)?{re.escape(domain)}(/\S*)?', re.IGNORECASE)


def is_service_uri(uri: str, domain: str) -> bool:
    return service_uri_pattern(domain).fullmatch(uri) is not None


def get_short_uri(short_name: str, domain: str) -> str:
    """Get string representation of a short URI

    Args:
        short_name (str): short name, surrounding whitespace and slashes are dropped
        domain (str): service domain

    Returns:
        str: short URI, e.g. 'http://0.mk/abc'
    """
    return f'http://{domain}/{short_name.strip().strip("/")}'


def is_delete_code(code: str) -> bool:
    return DELETE_CODE_PATTERN.fullmatch(code) is not None


def mask_apikey(uri: str) -> str:
    """Replace the value of the `apikey` query parameter with asterisks."""
    return APIKEY_PARAM_PATTERN.sub('***', uri)
