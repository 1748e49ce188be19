"""Request URI construction for the shorten and preview API calls

Both calls share the same query shape:

    <api base URI>?korisnik=<username>&apikey=<apikey>&format=json&nastavka=<short name>&link=<link>

`korisnik`, `apikey` and `nastavka` are left out when they are not set. `link`
is always present, last. Values are trimmed but not percent-encoded; the link is
sent exactly as the caller provided it.

Functions:
    build_query(credentials, link, short_name=None) -> str
        Build the query string of an API call.

    build_uri(api_base_uri, credentials, link, short_name=None) -> str
        Build the full request URI of an API call.

Example:
    >>> from zeromk.utils.config import Credentials
    >>> build_uri('http://api.0.mk/v2/skrati', Credentials('petar', 'k3y'), 'https://example.com')
    'http://api.0.mk/v2/skrati?korisnik=petar&apikey=k3y&format=json&link=https://example.com'
"""

from beartype import beartype

from zeromk.utils.config import Credentials


def _clean(value: str | None) -> str:
    return '' if value is None else str(value).strip()


@beartype
def build_query(credentials: Credentials, link: str, short_name: str | None = None) -> str:
    """Build the query string of a shorten or preview API call

    Args:
        credentials (Credentials):
            0.mk username and API key, either may be None.
        link (str):
            Target link, appended unconditionally.
        short_name (str | None):
            Optional custom short name.

    Returns:
        str: query string without the leading '?'
    """
    # Order of the parameters is fixed
    params = [
        ('korisnik', _clean(credentials.username)),
        ('apikey', _clean(credentials.apikey)),
        ('format', 'json'),
        ('nastavka', _clean(short_name)),
    ]

    pairs = [f'{key}={value}' for key, value in params if value]
    pairs.append(f'link={_clean(link)}')
    return '&'.join(pairs)


@beartype
def build_uri(api_base_uri: str, credentials: Credentials, link: str, short_name: str | None = None) -> str:
    """Build the full request URI of a shorten or preview API call

    Args:
        api_base_uri (str):
            Base URI of the API call, e.g. 'http://api.0.mk/v2/skrati'.
        credentials (Credentials):
            0.mk username and API key.
        link (str):
            Target link.
        short_name (str | None):
            Optional custom short name.

    Returns:
        str: request URI
    """
    return f'{api_base_uri.strip().rstrip("?")}?{build_query(credentials, link, short_name)}'
