"""Command line interface to the 0.mk API.

CLI usage:
    $ zeromk shorten https://example.com/blog/chuck-norris-is-awesome
    $ zeromk shorten https://example.com/blog --short-name chuck
    $ zeromk preview chuck
    $ zeromk preview http://0.mk/chuck
    $ zeromk delete http://0.mk/brisi/chuck x1y2z3
    $ echo "Read https://example.com/blog now" | zeromk text
    $ zeromk --config ~/.zeromk.yml --log-level debug text notes.txt

Credentials and service settings are resolved by `zeromk.utils.config`
(YAML file, then environment variables); `--username` and `--apikey` override
both.

Output:
    - shorten/preview print the link as a JSON object.
    - text prints the rewritten text; with --verbose the produced links are
      printed to stderr as a JSON array.

Exit codes:
    0   success
    1   delete refused by the service
    2   error (API error, invalid argument, transport failure, I/O or config error)
"""

import sys
import json
import logging
import argparse
from dataclasses import replace

import requests

from zeromk.interface import Interface
from zeromk.exceptions import ZeroMKError, InvalidArgumentError
from zeromk.utils.config import load_config, load_credentials
from zeromk.utils.logging import initialize_logging


logger = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='zeromk', description='Shorten, preview and delete 0.mk links.')
    parser.add_argument('--config', default=None, help='YAML config file (default: $ZEROMK_CONFIG_FILE)')
    parser.add_argument('--username', default=None, help='0.mk username (default: $ZEROMK_USERNAME)')
    parser.add_argument('--apikey', default=None, help='0.mk API key (default: $ZEROMK_APIKEY)')
    parser.add_argument('--log-level', default=None, help='Log level (default: $ZEROMK_LOG_LEVEL or WARNING)')
    parser.add_argument('--text-logs', action='store_true', help='Plain text logs instead of JSON')

    commands = parser.add_subparsers(dest='command', required=True)

    shorten = commands.add_parser('shorten', help='Shorten a long URI')
    shorten.add_argument('uri', help='Long URI to shorten')
    shorten.add_argument('--short-name', default=None, help='Custom short name (http://0.mk/<short name>)')

    preview = commands.add_parser('preview', help='Inspect a shortened link')
    preview.add_argument('link', help='Short name or full 0.mk URI')

    delete = commands.add_parser('delete', help='Delete a shortened link')
    delete.add_argument('delete_uri', help='Delete URI of the link')
    delete.add_argument('delete_code', help='Delete code of the link')

    text = commands.add_parser('text', help='Shorten every URL in a text')
    text.add_argument('file', nargs='?', default='-', help="Input file (default: '-' for stdin)")
    text.add_argument('--verbose', action='store_true', help='Print the produced links to stderr')

    return parser


def _read_text(path: str) -> str:
    if path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def _run(args: argparse.Namespace) -> int:
    credentials = load_credentials(args.config)
    if args.username or args.apikey:
        credentials = replace(
            credentials,
            username=args.username or credentials.username,
            apikey=args.apikey or credentials.apikey,
        )

    with Interface(credentials, load_config(args.config)) as api:
        if args.command == 'shorten':
            link = api.shorten(args.uri, args.short_name)
            print(json.dumps(link.to_dict(), ensure_ascii=False, indent=2))
            return 0

        if args.command == 'preview':
            link = api.preview(args.link)
            print(json.dumps(link.to_dict(), ensure_ascii=False, indent=2))
            return 0

        if args.command == 'delete':
            deleted = api.delete(args.delete_uri, args.delete_code)
            print('Deleted.' if deleted else 'Not deleted.')
            return 0 if deleted else 1

        # text
        rewritten, links = api.shorten_text(_read_text(args.file))
        sys.stdout.write(rewritten)
        if args.verbose:
            print(json.dumps([link.to_dict() for link in links], ensure_ascii=False, indent=2), file=sys.stderr)
        return 0


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    initialize_logging(args.log_level, json_output=not args.text_logs)

    try:
        return _run(args)
    except (ZeroMKError, InvalidArgumentError) as e:
        print(f'[!] {type(e).__name__}: {e}', file=sys.stderr)
        return 2
    except requests.RequestException as e:
        logger.debug('Transport failure.', exc_info=True)
        print(f'[!] HTTP error: {e}', file=sys.stderr)
        return 2
    except OSError as e:
        print(f'[!] I/O error: {e}', file=sys.stderr)
        return 2
    except ValueError as e:
        print(f'[!] Configuration error: {e}', file=sys.stderr)
        return 2
