"""Module entrypoint for ``python -m jablkodev``."""

from __future__ import annotations

from jablkodev.cli import main

if __name__ == "__main__":
    main()
