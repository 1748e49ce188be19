"""Logging initialization for the 0.mk client

The library only creates module loggers (`logging.getLogger(__name__)`) and
never configures handlers on import. Applications, including the `zeromk`
command line tool, call `initialize_logging()` once at start-up.

JSON logging format:
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "zeromk.interface",
    "message": "Shortened link.",
    "longUri": "https://example.com/article/123",
    "shortUri": "http://0.mk/abc"
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from zeromk.utils.constants import LOG_LEVEL_ENV


TEXT_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(logging.LogRecord('', 0, '', 0, '', (), None).__dict__) | {'message', 'asctime'}

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec='milliseconds') \
                            .replace('+00:00', 'Z')
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None, json_output: bool = True) -> None:
    """Configure the `zeromk` logger

    Args:
        level (str | None):
            Log level name. Falls back to `ZEROMK_LOG_LEVEL`, then 'WARNING'.
        json_output (bool):
            Emit one JSON object per line if True, plain text otherwise.
    """
    log_level = (level or os.getenv(LOG_LEVEL_ENV) or 'WARNING').upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                },
                'text': {
                    'format': TEXT_FORMAT,
                },
            },
            'handlers': {
                'stderr': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json' if json_output else 'text',
                    'stream': 'ext://sys.stderr',
                }
            },
            'loggers': {
                'zeromk': {
                    'level': log_level,
                    'handlers': ['stderr'],
                    'propagate': False,
                },
            },
        }
    )
