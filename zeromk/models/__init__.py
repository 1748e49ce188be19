from zeromk.models.shortened_link_model import Origin, ShortenedLink
from zeromk.models.preview_spec_model import PreviewSpec


__all__ = [
    'Origin',
    'ShortenedLink',
    'PreviewSpec',
]
