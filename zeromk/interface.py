"""Main interface to the 0.mk URL-shortening API.

Responsibilities:
    - Validate caller input before any network call;
    - Build request URIs, fetch them and parse the responses into ShortenedLinks;
    - Delete links;
    - Rewrite text by shortening every embedded non-0.mk URL.

Classes:
    Interface:
        Client bound to one set of credentials, service config and transport.

Example:
    >>> from zeromk import Interface, Credentials
    >>> api = Interface(Credentials(username='petar', apikey='s3cr3t'))
    >>> link = api.shorten('https://example.com/blog/chuck-norris-is-awesome')
    >>> link.short_uri
    'http://0.mk/abc'
    >>> text, links = api.shorten_text('Read https://example.com/blog now!')
    >>> text
    'Read http://0.mk/def now!'
    >>> link.delete()
    True
    >>> api.close()
"""

import logging

import requests
from beartype import beartype

from zeromk.api import build_uri, fetch, parse_response, delete_link
from zeromk.models import Origin, ShortenedLink, PreviewSpec
from zeromk.utils.config import Credentials, ServiceConfig
from zeromk.utils.helpers import URL_SCAN_PATTERN, is_service_uri


logger = logging.getLogger(__name__)


class Interface:
    """Client of the 0.mk API

    Attributes:
        credentials (Credentials):
            0.mk username and API key, read-only for the lifetime of the instance.
        config (ServiceConfig):
            Endpoints, service domain and transport settings.
        session (requests.Session):
            Transport used for every request.

    Methods:
        shorten(uri: str, short_name: str | None = None) -> ShortenedLink:
            Shorten a long URI, optionally with a custom short name.

        preview(link: PreviewSpec | str) -> ShortenedLink:
            Inspect an already shortened link.

        delete(delete_uri: str, delete_code: str) -> bool:
            Delete a link. Returns False when the service refuses.

        shorten_text(text: str) -> tuple[str, list[ShortenedLink]]:
            Shorten every non-0.mk URL in a text.

        close() -> None:
            Close the session if this instance created it.
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        config: ServiceConfig | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize a 0.mk client

        Args:
            credentials (Credentials | None):
                0.mk username and API key. Anonymous when None.
            config (ServiceConfig | None):
                Service configuration. Defaults to the public 0.mk endpoints.
            session (requests.Session | None):
                Existing transport to reuse. A new session, owned and closed by
                this instance, is created when None.
        """
        self._credentials = credentials or Credentials()
        self._config = config or ServiceConfig()
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def config(self) -> ServiceConfig:
        return self._config

    @property
    def session(self) -> requests.Session:
        return self._session

    def __enter__(self) -> 'Interface':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f'Interface(credentials={self._credentials!r}, config={self._config!r})'

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    @beartype
    def shorten(self, uri: str, short_name: str | None = None) -> ShortenedLink:
        """Shorten a URI

        Args:
            uri (str):
                The long URI to shorten. Surrounding whitespace is dropped.
            short_name (str | None):
                Custom short name ('http://0.mk/<short_name>').

        Returns:
            ShortenedLink: the shortened link, origin SHORTEN

        Raises:
            APIError: the failure reported by 0.mk (e.g. InvalidLinkError).
            RedirectDepthExceededError: if the API redirects too many times.
            MalformedResponseError: if the API response is not a JSON object.
            requests.RequestException: on transport failures.
        """
        request_uri = build_uri(self._config.shorten_uri, self._credentials, uri.strip(), short_name)
        link = self._call(Origin.SHORTEN, request_uri)
        logger.info('Shortened link.', extra={'longUri': link.long_uri, 'shortUri': link.short_uri})
        return link

    @beartype
    def preview(self, link: PreviewSpec | str) -> ShortenedLink:
        """Inspect an already shortened link

        Args:
            link (PreviewSpec | str):
                Either a PreviewSpec, a bare short name or a full 0.mk URI.

        Returns:
            ShortenedLink: the previewed link, origin PREVIEW (volume of data varies)

        Raises:
            InvalidArgumentError: if the link is not a 0.mk link (no request is made).
            APIError: the failure reported by 0.mk.
            RedirectDepthExceededError: if the API redirects too many times.
            requests.RequestException: on transport failures.
        """
        spec = PreviewSpec.parse(link) if isinstance(link, str) else link
        uri = spec.resolve(self._config.service_domain)

        request_uri = build_uri(self._config.preview_uri, self._credentials, uri)
        return self._call(Origin.PREVIEW, request_uri)

    @beartype
    def delete(self, delete_uri: str, delete_code: str) -> bool:
        """Delete a shortened link

        Args:
            delete_uri (str): the link's 0.mk delete URI
            delete_code (str): the alphanumeric delete code of the link

        Returns:
            bool: True if the link was deleted, False if the service refused

        Raises:
            InvalidArgumentError: if either argument is malformed (no request is made).
            requests.RequestException: on transport failures.
        """
        return delete_link(
            delete_uri,
            delete_code,
            session=self._session,
            domain=self._config.service_domain,
            timeout=self._config.timeout,
        )

    @beartype
    def shorten_text(self, text: str) -> tuple[str, list[ShortenedLink]]:
        """Shorten every URL in a text that does not already point at 0.mk

        Each distinct URL is shortened once, in order of first appearance, and
        all of its occurrences are replaced by the short URI. 0.mk URLs are
        left untouched.

        Args:
            text (str): free text

        Returns:
            tuple[str, list[ShortenedLink]]:
                The rewritten text and the links produced, in first-seen order.

        Raises:
            Whatever shorten() raises. The text is not partially rewritten.
        """
        replacements: dict[str, str] = {}
        links: list[ShortenedLink] = []

        for match in URL_SCAN_PATTERN.finditer(text):
            url = match.group(0)
            if url in replacements or is_service_uri(url, self._config.service_domain):
                continue

            link = self.shorten(url)
            replacements[url] = link.short_uri or url
            links.append(link)

        if not links:
            return text, links

        rewritten = URL_SCAN_PATTERN.sub(lambda m: replacements.get(m.group(0), m.group(0)), text)
        logger.debug('Rewrote text.', extra={'shortenedCount': len(links)})
        return rewritten, links

    def _call(self, origin: Origin, request_uri: str) -> ShortenedLink:
        response = fetch(
            self._session,
            request_uri,
            max_redirects=self._config.max_redirects,
            timeout=self._config.timeout,
        )
        return parse_response(origin, response.content, deleter=self.delete)
