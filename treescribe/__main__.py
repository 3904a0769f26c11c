"""Module entrypoint for ``python -m treescribe``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and output handling happen in ``treescribe.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
