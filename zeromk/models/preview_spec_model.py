import re
from dataclasses import dataclass

from zeromk.exceptions import InvalidArgumentError
from zeromk.utils.helpers import get_short_uri, is_service_uri


# Short names are a single path segment; '0.mk/abc' is a URI without a scheme
INVALID_SHORT_NAME_PATTERN = re.compile(r'[/.\s]')


@dataclass(frozen=True)
class PreviewSpec:
    """Identify a 0.mk link to preview, either by short name or by full URI.

    When both fields are set the short name takes precedence.

    Attributes:
        short_name (str | None):
            Short name of the link ('http://0.mk/<short_name>').
        uri (str | None):
            Full 0.mk URI of the link.

    Example:
        >>> PreviewSpec.by_short_name('abc').resolve('0.mk')
        'http://0.mk/abc'
        >>> PreviewSpec.parse('http://0.mk/abc').uri
        'http://0.mk/abc'
    """

    short_name: str | None = None
    uri: str | None = None

    @classmethod
    def by_short_name(cls, short_name: str) -> 'PreviewSpec':
        return cls(short_name=short_name)

    @classmethod
    def by_uri(cls, uri: str) -> 'PreviewSpec':
        return cls(uri=uri)

    @classmethod
    def parse(cls, link: str) -> 'PreviewSpec':
        """Build a spec from a string holding either a URI or a bare short name."""
        link = link.strip()
        if link.lower().startswith(('http://', 'https://')):
            return cls.by_uri(link)
        return cls.by_short_name(link)

    def resolve(self, domain: str) -> str:
        """Return the URI to preview

        Args:
            domain (str): service domain the URI must belong to

        Returns:
            str: short URI built from the short name, or the validated full URI

        Raises:
            InvalidArgumentError: if the short name is not a single path segment,
                or neither field yields a valid service URI
        """
        short_name = (self.short_name or '').strip()
        if short_name:
            if INVALID_SHORT_NAME_PATTERN.search(short_name):
                raise InvalidArgumentError(f'Short name must not contain "/", "." or whitespace (given: {short_name!r}).')
            return get_short_uri(short_name, domain)

        uri = (self.uri or '').strip()
        if uri and is_service_uri(uri, domain):
            return uri

        raise InvalidArgumentError(f'Expected a short name or a valid http://{domain} shortened URI (given: {self!r}).')
