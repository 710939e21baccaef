"""Module entrypoint for ``python -m navi``."""

from .cli import main


if __name__ == "__main__":
    main()
