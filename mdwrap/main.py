from __future__ import annotations
import sys
from mdwrap.app import run_app


def main() -> int:
    """Module entrypoint for `python -m mdwrap.main` and the `mdwrap` console script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
