"""Module entrypoint for ``python -m singledir``.

All argument parsing and session setup happen in ``singledir.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
