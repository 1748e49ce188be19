# Default 0.mk API endpoints
DEFAULT_SHORTEN_URI = 'http://api.0.mk/v2/skrati'
DEFAULT_PREVIEW_URI = 'http://api.0.mk/v2/pregled'
DEFAULT_SERVICE_DOMAIN = '0.mk'

# Transport defaults
DEFAULT_MAX_REDIRECTS = 5
DEFAULT_TIMEOUT_SECONDS = 10.0

# The API reports success with `"status": 1`
API_SUCCESS_STATUS = 1

# Status of the locally raised redirect error (not an API code)
REDIRECT_ERROR_STATUS = 100

# Credentials
ZEROMK_USERNAME_ENV = 'ZEROMK_USERNAME'
ZEROMK_APIKEY_ENV = 'ZEROMK_APIKEY'

# Service overrides
ZEROMK_SHORTEN_URI_ENV = 'ZEROMK_SHORTEN_URI'
ZEROMK_PREVIEW_URI_ENV = 'ZEROMK_PREVIEW_URI'
ZEROMK_DOMAIN_ENV = 'ZEROMK_DOMAIN'
ZEROMK_MAX_REDIRECTS_ENV = 'ZEROMK_MAX_REDIRECTS'
ZEROMK_TIMEOUT_ENV = 'ZEROMK_TIMEOUT'

# YAML config file location
ZEROMK_CONFIG_FILE_ENV = 'ZEROMK_CONFIG_FILE'

# Logging
LOG_LEVEL_ENV = 'ZEROMK_LOG_LEVEL'
