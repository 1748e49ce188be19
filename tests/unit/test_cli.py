"""Unit tests for the command line interface in cli.py

Test coverage includes:

1. Commands
   - Ensures shorten/preview print the link as JSON.
   - Ensures delete prints the outcome and exits 1 when refused.
   - Ensures text rewrites stdin or a file.

2. Credentials and config
   - Ensures --username/--apikey override configured credentials.
   - Ensures --config is passed to the config loaders.

3. Errors
   - Ensures API errors, invalid arguments, transport failures, I/O and config
     errors are reported on stderr with exit code 2.
"""

import io
import json
from unittest.mock import patch

import pytest
import requests

from zeromk import cli
from zeromk.models import Origin, ShortenedLink
from zeromk.utils.config import Credentials
from zeromk.utils.constants import ZEROMK_USERNAME_ENV, ZEROMK_APIKEY_ENV
from zeromk.exceptions import InvalidAPIKeyError, InvalidArgumentError


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def interface_cls():
    """Patch the Interface used by the CLI; `interface_cls.api` is the object inside `with`."""
    with patch('zeromk.cli.Interface') as interface_cls, patch('zeromk.cli.initialize_logging'):
        interface_cls.api = interface_cls.return_value.__enter__.return_value
        yield interface_cls


@pytest.fixture
def link() -> ShortenedLink:
    return ShortenedLink(
        origin=Origin.SHORTEN,
        long_uri='https://example.com/blog',
        short_uri='http://0.mk/chuck',
        short_name='chuck',
        delete_uri='http://0.mk/brisi/chuck',
        delete_code='x1y2z3',
    )


# -------------------------------
# 1. Commands
# -------------------------------


def test_shorten(interface_cls, link, capsys):
    interface_cls.api.shorten.return_value = link

    assert cli.main(['shorten', 'https://example.com/blog', '--short-name', 'chuck']) == 0

    interface_cls.api.shorten.assert_called_once_with('https://example.com/blog', 'chuck')
    output = json.loads(capsys.readouterr().out)
    assert output['origin'] == 'shorten'
    assert output['short_uri'] == 'http://0.mk/chuck'
    assert output['deletable'] is True


def test_preview(interface_cls, capsys):
    interface_cls.api.preview.return_value = ShortenedLink(origin=Origin.PREVIEW, short_uri='http://0.mk/chuck')

    assert cli.main(['preview', 'chuck']) == 0

    interface_cls.api.preview.assert_called_once_with('chuck')
    output = json.loads(capsys.readouterr().out)
    assert output['origin'] == 'preview'
    assert output['deletable'] is False


@pytest.mark.parametrize('deleted, code, message', [(True, 0, 'Deleted.'), (False, 1, 'Not deleted.')])
def test_delete(interface_cls, capsys, deleted, code, message):
    interface_cls.api.delete.return_value = deleted

    assert cli.main(['delete', 'http://0.mk/brisi/chuck', 'x1y2z3']) == code

    interface_cls.api.delete.assert_called_once_with('http://0.mk/brisi/chuck', 'x1y2z3')
    assert capsys.readouterr().out.strip() == message


def test_text_from_stdin(interface_cls, link, capsys, monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO('read https://example.com/blog now\n'))
    interface_cls.api.shorten_text.return_value = ('read http://0.mk/chuck now\n', [link])

    assert cli.main(['text']) == 0

    interface_cls.api.shorten_text.assert_called_once_with('read https://example.com/blog now\n')
    captured = capsys.readouterr()
    assert captured.out == 'read http://0.mk/chuck now\n'
    assert captured.err == ''


def test_text_from_file_verbose(interface_cls, link, capsys, tmp_path):
    path = tmp_path / 'notes.txt'
    path.write_text('https://example.com/blog', encoding='utf-8')
    interface_cls.api.shorten_text.return_value = ('http://0.mk/chuck', [link])

    assert cli.main(['text', str(path), '--verbose']) == 0

    interface_cls.api.shorten_text.assert_called_once_with('https://example.com/blog')
    captured = capsys.readouterr()
    assert captured.out == 'http://0.mk/chuck'
    assert [item['short_uri'] for item in json.loads(captured.err)] == ['http://0.mk/chuck']


def test_missing_command():
    with pytest.raises(SystemExit):
        cli.main([])


# -------------------------------
# 2. Credentials and config
# -------------------------------


def test_credentials_from_environment(interface_cls, link, monkeypatch):
    monkeypatch.setenv(ZEROMK_USERNAME_ENV, 'petar')
    monkeypatch.setenv(ZEROMK_APIKEY_ENV, 's3cr3t')
    interface_cls.api.shorten.return_value = link

    cli.main(['shorten', 'https://example.com/blog'])

    assert interface_cls.call_args.args[0] == Credentials(username='petar', apikey='s3cr3t')


def test_credentials_options_override(interface_cls, link, monkeypatch):
    monkeypatch.setenv(ZEROMK_USERNAME_ENV, 'petar')
    monkeypatch.setenv(ZEROMK_APIKEY_ENV, 's3cr3t')
    interface_cls.api.shorten.return_value = link

    cli.main(['--apikey', 'other-key', 'shorten', 'https://example.com/blog'])

    assert interface_cls.call_args.args[0] == Credentials(username='petar', apikey='other-key')


def test_config_file_option(interface_cls, link, tmp_path):
    path = tmp_path / 'zeromk.yml'
    path.write_text('service:\n  domain: short.test\ncredentials:\n  username: pesho\n', encoding='utf-8')
    interface_cls.api.shorten.return_value = link

    cli.main(['--config', str(path), 'shorten', 'https://example.com/blog'])

    credentials, config = interface_cls.call_args.args
    assert credentials.username == 'pesho'
    assert config.service_domain == 'short.test'


# -------------------------------
# 3. Errors
# -------------------------------


@pytest.mark.parametrize(
    'error, expected',
    [
        (InvalidAPIKeyError('Nevaliden API kluc.'), '[!] InvalidAPIKeyError: Nevaliden API kluc.'),
        (InvalidArgumentError('not a 0.mk link'), '[!] InvalidArgumentError: not a 0.mk link'),
        (requests.ConnectionError('Connection refused'), '[!] HTTP error: Connection refused'),
    ],
)
def test_errors_exit_2(interface_cls, capsys, error, expected):
    interface_cls.api.preview.side_effect = error

    assert cli.main(['preview', 'chuck']) == 2

    assert capsys.readouterr().err.strip() == expected


def test_missing_config_file_exits_2(interface_cls, capsys, tmp_path):
    assert cli.main(['--config', str(tmp_path / 'missing.yml'), 'preview', 'chuck']) == 2

    assert capsys.readouterr().err.startswith('[!] I/O error:')
    interface_cls.assert_not_called()


def test_missing_text_file_exits_2(interface_cls, capsys, tmp_path):
    assert cli.main(['text', str(tmp_path / 'missing.txt')]) == 2

    assert capsys.readouterr().err.startswith('[!] I/O error:')


def test_invalid_config_value_exits_2(interface_cls, capsys, tmp_path):
    path = tmp_path / 'zeromk.yml'
    path.write_text('service:\n  max_redirects: -1\n', encoding='utf-8')

    assert cli.main(['--config', str(path), 'preview', 'chuck']) == 2

    assert 'max_redirects' in capsys.readouterr().err
    interface_cls.assert_not_called()
