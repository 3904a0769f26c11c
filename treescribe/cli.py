"""Command-line front door for treescribe.

Parses CLI options, merges them with saved defaults, and renders the tree.
Then writes the result to stdout or to the requested file.
"""

from __future__ import annotations

import argparse
import locale
import logging
import sys
from pathlib import Path

from . import __version__, config
from .errors import InvalidRootError
from .ignore import parse_ignore_argument
from .output import display_text, write_tree_output
from .tree import generate_tree

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

EXAMPLES = """\
examples:
  treescribe
  treescribe --output "tree.txt"
  treescribe --level 2 --ignore "node_modules | dist"
  treescribe -l 3 -i ".env | README.md" -o "tree.txt"
"""

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("--level must be a non-negative integer")
    return parsed


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when ``verbose`` else WARNING."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    package_logger = logging.getLogger("treescribe")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def _use_environment_collation() -> None:
    """Adopt the user's LC_COLLATE so sibling names sort as they expect."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.debug("Falling back to default collation: %s", exc)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treescribe",
        description="Generate a tree of a directory.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to render. Defaults to current directory.")
    parser.add_argument("-o", "--output", metavar="FILE", help="Save the tree to FILE.")
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATHS",
        help='Pipe-separated paths to ignore, relative to the root (no wildcards), e.g. "node_modules | .git".',
    )
    parser.add_argument(
        "-l",
        "--level",
        metavar="DEPTH",
        type=_non_negative_int,
        default=None,
        help="Maximum depth of the tree.",
    )
    parser.add_argument("--no-config", action="store_true", help="Ignore saved defaults.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Store the given --ignore and --level as defaults for later runs.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print or save the tree.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Saved ignore rules are applied before ``--ignore``
    rules, and ``--level`` overrides a saved level.
    """
    args = build_parser().parse_args()
    configure_logging(args.verbose)
    _use_environment_collation()

    cli_ignore = parse_ignore_argument(args.ignore)
    if args.save_defaults:
        config.save_default_ignore(cli_ignore)
        config.save_default_level(args.level)
        logger.debug("Saved defaults to %s", config.CONFIG_PATH)

    ignore: list[str] = [] if args.no_config else config.load_default_ignore()
    ignore.extend(cli_ignore)
    level = args.level
    if level is None and not args.no_config:
        level = config.load_default_level()

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)

    try:
        tree_text = generate_tree(path, max_depth=level, ignore=ignore)
    except InvalidRootError as exc:
        raise SystemExit(str(exc)) from exc

    if args.output is None:
        sys.stdout.write(display_text(tree_text) + "\n")
        return

    try:
        written = write_tree_output(tree_text, args.output)
    except (OSError, UnicodeError) as exc:
        destination = display_text(str(Path(args.output).resolve()))
        raise SystemExit(f"Error writing to file {destination}: {exc}") from exc
    sys.stdout.write(display_text(f"File created: {written}") + "\n")


if __name__ == "__main__":
    main()
