"""Exceptions raised by the 0.mk client.

The API reports failures with a numeric `greskaId` and a human-readable
`greskaMsg`. Each known code maps to one exception class; the mapping is keyed
directly by the code the API returns (1-based).

Classes:
    ZeroMKError:
        Generic base class carrying `message` and `status`.

    RedirectDepthExceededError:
        Raised locally when an API call redirects more times than allowed.

    APIError:
        Base class for failures reported by the 0.mk API.

    EmptyLinkError, InvalidLinkError, InvalidFormatError, InvalidShortNameError,
    InvalidAPIKeyError, InvalidCredentialsError, InvalidAPICallError:
        API-reported failures with status codes 1 through 7.

    UnknownAPIError:
        Raised when the API reports a failure code outside the known table.

    MalformedResponseError:
        Raised when the response body is not a JSON object.

    InvalidArgumentError:
        Raised for invalid caller input before any network call is made.
        Derives from ValueError, not from ZeroMKError.

Functions:
    api_error(code, message) -> APIError
        Build the exception matching an API failure code.

Example:
    >>> from zeromk.exceptions import api_error
    >>> raise api_error(2, 'Invalid link.')
    Traceback (most recent call last):
        ...
    zeromk.exceptions.InvalidLinkError: Invalid link.
"""

from typing import Any

from zeromk.utils.constants import REDIRECT_ERROR_STATUS


class ZeroMKError(Exception):
    """Generic base class for 0.mk client errors.

    Attributes:
        message (str):
            Message describing the failure (as returned by 0.mk for API errors).
        status (int | None):
            Numeric status identifying the failure kind.
    """

    status: int | None = None

    def __init__(self, message: str = '', status: int | None = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class RedirectDepthExceededError(ZeroMKError):
    """Exception raised when an API call redirects too many times."""

    status = REDIRECT_ERROR_STATUS


class APIError(ZeroMKError):
    """Base class for failures reported by the 0.mk API."""

    pass


class EmptyLinkError(APIError):
    """The provided link was empty."""

    status = 1


class InvalidLinkError(APIError):
    """The provided link was invalid."""

    status = 2


class InvalidFormatError(APIError):
    """The requested response format was invalid. Probably an internal error."""

    status = 3


class InvalidShortNameError(APIError):
    """The provided (custom) short name was invalid."""

    status = 4


class InvalidAPIKeyError(APIError):
    """The provided API key was invalid."""

    status = 5


class InvalidCredentialsError(APIError):
    """The provided credentials were invalid."""

    status = 6


class InvalidAPICallError(APIError):
    """The API call is not supported by 0.mk. Check the configured endpoints."""

    status = 7


class UnknownAPIError(APIError):
    """The API reported a failure code this client does not know."""

    pass


class MalformedResponseError(ZeroMKError):
    """The API responded with something other than a JSON object."""

    pass


class InvalidArgumentError(ValueError):
    """Invalid caller input, rejected before any network call."""

    pass


API_ERRORS: dict[int, type[APIError]] = {
    cls.status: cls
    for cls in (
        EmptyLinkError,
        InvalidLinkError,
        InvalidFormatError,
        InvalidShortNameError,
        InvalidAPIKeyError,
        InvalidCredentialsError,
        InvalidAPICallError,
    )
}


def api_error(code: Any, message: str) -> APIError:
    """Build the exception matching an API failure code

    Args:
        code (Any):
            Raw `greskaId` value from the response. Integers and integer strings
            are accepted; anything else (including booleans and floats) is
            treated as unknown.
        message (str):
            Message to attach to the exception.

    Returns:
        APIError: instance of the mapped class, or UnknownAPIError carrying the
                  code when it is missing or outside the table.
    """
    # bool and float codes are not valid greskaId values
    if type(code) is int:
        status = code
    elif isinstance(code, str):
        try:
            status = int(code)
        except ValueError:
            return UnknownAPIError(message, status=None)
    else:
        return UnknownAPIError(message, status=None)

    cls = API_ERRORS.get(status)
    if cls is None:
        return UnknownAPIError(message, status=status)
    return cls(message)
