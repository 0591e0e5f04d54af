"""Module entrypoint for ``python -m summarydesk``.

All argument parsing and runtime setup happen in ``summarydesk.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
