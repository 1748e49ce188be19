"""Deletion of 0.mk links

A link is deleted by POSTing its delete code (`brisiKod`) as a form field to
its delete URI. Redirects are not followed. A non-2xx status is reported as
`False` rather than raised.

Functions:
    delete_link(delete_uri, delete_code, *, session=None, domain='0.mk', timeout=10.0) -> bool
        Validate the arguments and delete a link.

Example:
    >>> delete_link('http://0.mk/brisi/abc', 'x1y2')
    True
"""

import logging

import requests

from zeromk.exceptions import InvalidArgumentError
from zeromk.utils.constants import DEFAULT_SERVICE_DOMAIN, DEFAULT_TIMEOUT_SECONDS
from zeromk.utils.helpers import is_service_uri, is_delete_code


logger = logging.getLogger(__name__)


def delete_link(
    delete_uri: str,
    delete_code: str,
    *,
    session: requests.Session | None = None,
    domain: str = DEFAULT_SERVICE_DOMAIN,
    timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
) -> bool:
    """Delete a 0.mk link

    Args:
        delete_uri (str):
            The link's delete URI, must point at the service domain.
        delete_code (str):
            Alphanumeric code authorizing the deletion.
        session (requests.Session | None):
            Transport to use. The `requests` module itself is used when None.
        domain (str):
            Service domain `delete_uri` is validated against.
        timeout (float | None):
            Transport timeout in seconds.

    Returns:
        bool: True if the service answered with a 2xx status, False otherwise.

    Raises:
        InvalidArgumentError: if either argument is malformed (no request is made).
        requests.RequestException: on transport failures.
    """
    if not isinstance(delete_uri, str) or not is_service_uri(delete_uri.strip(), domain):
        raise InvalidArgumentError(f'delete_uri should be a valid http://{domain} URI (given: {delete_uri!r}).')
    if not isinstance(delete_code, str) or not is_delete_code(delete_code.strip()):
        raise InvalidArgumentError(f'delete_code should be alphanumeric (given: {delete_code!r}).')

    transport = session if session is not None else requests
    response = transport.post(
        delete_uri.strip(),
        data={'brisiKod': delete_code.strip()},
        allow_redirects=False,
        timeout=timeout,
    )

    if 200 <= response.status_code < 300:
        logger.info('Deleted link.', extra={'deleteUri': delete_uri})
        return True

    logger.warning('Link deletion refused.', extra={'deleteUri': delete_uri, 'statusCode': response.status_code})
    return False
