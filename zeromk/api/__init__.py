from zeromk.api.uri_builder import build_query, build_uri
from zeromk.api.fetcher import fetch
from zeromk.api.parser import decode, parse_response
from zeromk.api.deleter import delete_link


__all__ = [
    'build_query',
    'build_uri',
    'fetch',
    'decode',
    'parse_response',
    'delete_link',
]
