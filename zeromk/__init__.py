"""Client library for the 0.mk URL-shortening service."""

from zeromk.interface import Interface
from zeromk.models import Origin, ShortenedLink, PreviewSpec
from zeromk.utils.config import Credentials, ServiceConfig, load_config, load_credentials
from zeromk.exceptions import (
    ZeroMKError,
    APIError,
    RedirectDepthExceededError,
    EmptyLinkError,
    InvalidLinkError,
    InvalidFormatError,
    InvalidShortNameError,
    InvalidAPIKeyError,
    InvalidCredentialsError,
    InvalidAPICallError,
    UnknownAPIError,
    MalformedResponseError,
    InvalidArgumentError,
)


__version__ = '1.0.0'

__all__ = [
    'Interface',
    'Origin',
    'ShortenedLink',
    'PreviewSpec',
    'Credentials',
    'ServiceConfig',
    'load_config',
    'load_credentials',
    'ZeroMKError',
    'APIError',
    'RedirectDepthExceededError',
    'EmptyLinkError',
    'InvalidLinkError',
    'InvalidFormatError',
    'InvalidShortNameError',
    'InvalidAPIKeyError',
    'InvalidCredentialsError',
    'InvalidAPICallError',
    'UnknownAPIError',
    'MalformedResponseError',
    'InvalidArgumentError',
]
