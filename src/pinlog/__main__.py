"""Module entrypoint for ``python -m pinlog``."""

from pinlog.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
