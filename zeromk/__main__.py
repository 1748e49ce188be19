"""Module entrypoint to run as `python -m zeromk`."""

from zeromk.cli import main


if __name__ == '__main__':  # pragma: no cover
    raise SystemExit(main())
