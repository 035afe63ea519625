"""Module entrypoint for ``python -m pngstego``."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover - module entry point
    main(prog_name="pngstego")
