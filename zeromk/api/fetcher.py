"""Bounded redirect-following GET requests

The 0.mk API may answer with HTTP redirects before returning the JSON document.
Redirects are followed here, by hand, instead of by `requests`, so the number
of hops is bounded by the client's configuration and reported with a dedicated
error.

Functions:
    fetch(session, uri, max_redirects=5, timeout=None) -> requests.Response
        GET a URI, following at most `max_redirects` redirects.

Example:
    >>> import requests
    >>> with requests.Session() as session:
    ...     response = fetch(session, 'http://api.0.mk/v2/pregled?format=json&link=http://0.mk/abc')
    >>> response.status_code
    200
"""

import logging
from urllib.parse import urljoin

import requests

from zeromk.exceptions import RedirectDepthExceededError
from zeromk.utils.constants import DEFAULT_MAX_REDIRECTS
from zeromk.utils.helpers import mask_apikey


logger = logging.getLogger(__name__)


def fetch(
    session: requests.Session,
    uri: str,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
    timeout: float | None = None,
) -> requests.Response:
    """GET a URI, following at most `max_redirects` redirects

    Args:
        session (requests.Session):
            Transport used to issue the requests.
        uri (str):
            URI to fetch.
        max_redirects (int):
            Redirect budget. Every hop decrements it by one.
        timeout (float | None):
            Transport timeout for each request, in seconds.

    Returns:
        requests.Response: the final 2xx response

    Raises:
        RedirectDepthExceededError:
            If the budget is exhausted before a non-redirect response arrives.
        requests.HTTPError:
            On any status other than 2xx and 3xx, or a 3xx without `Location`.
        requests.RequestException:
            On transport failures (connection, TLS, timeout).
    """
    remaining = max_redirects

    while True:
        logger.debug('Fetching URI.', extra={'uri': mask_apikey(uri), 'remainingRedirects': remaining})
        response = session.get(uri, allow_redirects=False, timeout=timeout)

        if 200 <= response.status_code < 300:
            return response

        if not 300 <= response.status_code < 400:
            response.raise_for_status()
            raise requests.HTTPError(f'Unexpected HTTP status {response.status_code} for url: {mask_apikey(uri)}', response=response)

        location = response.headers.get('Location')
        if not location:
            raise requests.HTTPError(f'{response.status_code} redirect without Location header for url: {mask_apikey(uri)}', response=response)

        # Check the budget before issuing the next hop
        if remaining <= 0:
            logger.warning('Redirect level too deep.', extra={'uri': mask_apikey(uri), 'maxRedirects': max_redirects})
            raise RedirectDepthExceededError(f'Redirect level too deep (max {max_redirects}).')

        uri = urljoin(uri, location)
        remaining -= 1
