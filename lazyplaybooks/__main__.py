"""Module entrypoint for ``python -m lazyplaybooks``."""

from .cli import main


if __name__ == "__main__":
    main()
