import logging
from enum import Enum
from typing import Any
from dataclasses import dataclass, field

from zeromk.types import LinkDeleter


logger = logging.getLogger(__name__)


class Origin(Enum):
    """API call which produced a ShortenedLink."""

    SHORTEN = 'shorten'
    PREVIEW = 'preview'


@dataclass(frozen=True)
class ShortenedLink:
    """Represent a link returned by the 0.mk API.

    The amount of information returned by the API varies between calls, so any
    attribute that is None is unknown rather than empty. Instances are frozen;
    the only state change is the one-way transition to `deleted` made by a
    successful `delete()`.

    Attributes:
        origin (Origin):
            API call which produced this link.
        long_uri (str | None):
            The original long URI.
        short_uri (str | None):
            The shortened URI, e.g. 'http://0.mk/abc'.
        short_name (str | None):
            The short name ('http://0.mk/<short_name>').
        stats_uri (str | None):
            URI of the statistics page for this link.
        title (str | None):
            Document title of the long URI.
        delete_uri (str | None):
            URI which deletes this link.
        delete_code (str | None):
            Code authorizing the deletion.
        deleted (bool):
            True once a delete call succeeded.

    Example:
        >>> link = ShortenedLink(
        ...     origin=Origin.SHORTEN,
        ...     long_uri='https://example.com/article/123',
        ...     short_uri='http://0.mk/abc',
        ...     delete_uri='http://0.mk/brisi/abc',
        ...     delete_code='x1y2',
        ... )
        >>> link.deletable
        True
        >>> link.title is None
        True
    """

    origin: Origin
    long_uri: str | None = None
    short_uri: str | None = None
    short_name: str | None = None
    stats_uri: str | None = None
    title: str | None = None
    delete_uri: str | None = None
    delete_code: str | None = None
    _deleted: bool = field(default=False, init=False, hash=False)
    deleter: LinkDeleter | None = field(default=None, repr=False, compare=False)

    @property
    def deleted(self) -> bool:
        """True once a delete call succeeded. Never reset."""
        return self._deleted

    @property
    def deletable(self) -> bool:
        """True if a delete call may currently be attempted."""
        if self.deleted:
            return False
        return self.origin is Origin.SHORTEN or bool(self.delete_uri and self.delete_code)

    def delete(self) -> bool:
        """Delete this link from 0.mk

        Uses the delete operation of the Interface that produced the link, or
        the module-level `delete_link()` with default settings when the link was
        built by hand.

        Returns:
            bool: True if the link was deleted by this call.
                  False if it was already deleted, lacks delete information,
                  or the service refused the deletion.

        Raises:
            InvalidArgumentError: if `delete_uri` or `delete_code` are malformed.
        """
        if self.deleted:
            return False
        if not (self.delete_uri and self.delete_code):
            logger.debug('Link has no delete information.', extra={'shortUri': self.short_uri})
            return False

        deleter = self.deleter
        if deleter is None:
            from zeromk.api.deleter import delete_link

            deleter = delete_link

        if deleter(self.delete_uri, self.delete_code):
            object.__setattr__(self, '_deleted', True)
        return self._deleted

    def to_dict(self) -> dict[str, Any]:
        """Return the public fields of this link as a JSON-serializable dict."""
        return {
            'origin': self.origin.value,
            'long_uri': self.long_uri,
            'short_uri': self.short_uri,
            'short_name': self.short_name,
            'stats_uri': self.stats_uri,
            'title': self.title,
            'delete_uri': self.delete_uri,
            'delete_code': self.delete_code,
            'deletable': self.deletable,
            'deleted': self.deleted,
        }
