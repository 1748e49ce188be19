from zeromk.utils.config import Credentials, ServiceConfig, load_config, load_credentials
from zeromk.utils.helpers import is_service_uri, get_short_uri, is_delete_code, mask_apikey
from zeromk.utils.logging import initialize_logging


__all__ = [
    'Credentials',
    'ServiceConfig',
    'load_config',
    'load_credentials',
    'is_service_uri',
    'get_short_uri',
    'is_delete_code',
    'mask_apikey',
    'initialize_logging',
]
