"""Module entrypoint for ``python -m favtree``.

All argument parsing and store setup happen in ``favtree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
