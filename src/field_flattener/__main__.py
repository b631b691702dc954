"""Module entry point for `python -m field_flattener`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
