"""Interpretation of 0.mk API responses

Every response is a JSON object. `"status": 1` marks success; anything else is
a failure described by `greskaId` (numeric code) and `greskaMsg` (message).

Successful responses are translated into a ShortenedLink through a fixed,
ordered table of (wire key, field) pairs:

    dolg       -> long_uri
    kratok     -> short_uri
    nastavka   -> short_name
    urlNaslov  -> title
    statsLink  -> stats_uri
    brisiLink  -> delete_uri
    brisiKod   -> delete_code

Keys outside the table are ignored. Keys missing from the response leave the
field as None.

Functions:
    decode(body) -> APIResponse
        Decode a JSON body into a mapping.

    parse_response(origin, body, deleter=None) -> ShortenedLink
        Turn an API response into a ShortenedLink or raise the reported error.

Example:
    >>> link = parse_response(Origin.SHORTEN, '{"status": 1, "dolg": "https://example.com", "kratok": "http://0.mk/abc"}')
    >>> link.short_uri
    'http://0.mk/abc'
    >>> link.title is None
    True
"""

import json
import logging
from collections.abc import Mapping

from zeromk.types import APIResponse, LinkDeleter
from zeromk.models import Origin, ShortenedLink
from zeromk.exceptions import MalformedResponseError, api_error
from zeromk.utils.constants import API_SUCCESS_STATUS


logger = logging.getLogger(__name__)

# fmt: off
FIELDS: tuple[tuple[str, str], ...] = (
    ('dolg',      'long_uri'),
    ('kratok',    'short_uri'),
    ('nastavka',  'short_name'),
    ('urlNaslov', 'title'),
    ('statsLink', 'stats_uri'),
    ('brisiLink', 'delete_uri'),
    ('brisiKod',  'delete_code'),
)
# fmt: on


def decode(body: str | bytes | Mapping) -> APIResponse:
    """Decode a JSON response body into a mapping

    Raises:
        MalformedResponseError: if the body is not valid JSON or not a JSON object
    """
    if isinstance(body, Mapping):
        return dict(body)

    try:
        document = json.loads(body)
    except (TypeError, ValueError) as e:
        raise MalformedResponseError(f'Response body is not valid JSON: {body!r:.100}') from e

    if not isinstance(document, dict):
        raise MalformedResponseError(f'Response body is not a JSON object: {body!r:.100}')
    return document


def _text(value) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def parse_response(origin: Origin, body: str | bytes | Mapping, deleter: LinkDeleter | None = None) -> ShortenedLink:
    """Turn an API response into a ShortenedLink

    Args:
        origin (Origin):
            API call which produced the response.
        body (str | bytes | Mapping):
            Raw JSON body, or an already decoded mapping.
        deleter (LinkDeleter | None):
            Delete operation handed to the produced link.

    Returns:
        ShortenedLink: link holding every known field of the response.

    Raises:
        MalformedResponseError: if the body is not a JSON object.
        APIError: the subclass matching `greskaId` when `status` is not 1.
    """
    document = decode(body)

    status = document.get('status')
    if type(status) is not int or status != API_SUCCESS_STATUS:
        error = api_error(document.get('greskaId'), str(document.get('greskaMsg') or '').strip())
        logger.info(
            '0.mk API reported an error.',
            extra={'origin': origin.value, 'errorId': document.get('greskaId'), 'errorMessage': error.message},
        )
        raise error

    attributes = {field: _text(document.get(key)) for key, field in FIELDS}
    return ShortenedLink(origin=origin, deleter=deleter, **attributes)
