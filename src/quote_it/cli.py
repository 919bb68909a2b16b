"""
CLI for quote-it.

Minimal CLI using stdlib argument handling for fast startup.

Usage:
    quote-it "your quote here" [-a AUTHOR] [-t]   # Save a quote
    quote-it list [-a AUTHOR]                     # List saved quotes
    quote-it --help                               # Show help
"""

import logging
import os
import sys
from datetime import datetime
from typing import Any

from quote_it.errors import QuoteItError, UsageError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def print_help() -> None:
    """Print help message."""
    print("""quote-it - a quoting utility in the terminal

Usage:
    quote-it "<text>" [options]   Save a quote

Commands:
    quote-it list [-a AUTHOR]     List saved quotes, optionally by author

Options:
    -a, --author AUTHOR           Specify an author
    -t, --timestamp               Add a timestamp
    -h, --help                    Show this help
    -V, --version                 Show version

Examples:
    quote-it "Woah Rust is amazing!"
    quote-it "Javascript sucks" -a "Person with common sense" -t
    quote-it list -a "Person with common sense"

Author filters match exactly.""")


def print_version() -> None:
    """Print version."""
    from quote_it import __version__
    print(f"quote-it {__version__}")


def setup_logging(config: dict[str, Any]) -> None:
    """Configure logging from QUOTE_IT_LOG_LEVEL or the [logging] section."""
    level_name = (
        os.environ.get("QUOTE_IT_LOG_LEVEL")
        or config.get("logging", {}).get("level")
        or "WARNING"
    )
    level = getattr(logging, str(level_name).upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )


def parse_options(args: list[str], allow_timestamp: bool = True) -> dict[str, Any]:
    """
    Split args into positional words and -a/-t options.

    Raises UsageError on unknown options or a missing author value.
    """
    words: list[str] = []
    author = None
    timestamp = False

    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--":
            words.extend(args[i + 1:])
            break
        if arg in ("--author", "-a"):
            if i + 1 >= len(args):
                raise UsageError(f"{arg} requires a value")
            author = args[i + 1]
            i += 2
        elif arg.startswith("--author="):
            author = arg.split("=", 1)[1]
            i += 1
        elif allow_timestamp and arg in ("--timestamp", "-t"):
            timestamp = True
            i += 1
        elif arg.startswith("-") and arg != "-":
            raise UsageError(f"Unknown option: {arg}")
        else:
            words.append(arg)
            i += 1

    return {"words": words, "author": author, "timestamp": timestamp}


def create(text: str, author: str | None = None, timestamp: bool = False, store=None):
    """
    Save a new quote.

    Returns the stored Quote.
    """
    from pydantic import ValidationError

    from quote_it.models import Quote
    from quote_it.store import QuoteStore

    try:
        quote = Quote(
            text=text,
            author=author,
            timestamp=datetime.now().astimezone() if timestamp else None,
        )
    except ValidationError as e:
        raise UsageError(f"Invalid quote: {e.errors()[0]['msg']}") from e

    store = store or QuoteStore()
    return store.append(quote)


def list_quotes(author: str | None = None, store=None) -> list:
    """Load quotes in storage order, filtered by exact author when given."""
    from quote_it.store import QuoteStore, filter_by_author

    store = store or QuoteStore()
    return filter_by_author(store.load(), author)


def cmd_create(args: list[str], config: dict[str, Any]) -> int:
    """Save a quote from the command line."""
    from quote_it.config import ensure_dirs, get_store_path
    from quote_it.store import QuoteStore

    try:
        options = parse_options(args)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    # Join all words (allows: quote-it Woah Rust is amazing)
    text = " ".join(options["words"])

    if not text.strip():
        print("Error: Empty quote", file=sys.stderr)
        return EXIT_USAGE

    try:
        ensure_dirs()
        store = QuoteStore(get_store_path(config))
        quote = create(text, options["author"], options["timestamp"], store=store)
        print(f"Saved quote #{quote.id}")
        return EXIT_OK
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except QuoteItError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


def cmd_list(args: list[str], config: dict[str, Any]) -> int:
    """List quotes with an optional author filter."""
    from quote_it.config import get_store_path
    from quote_it.display import DEFAULT_DATE_FORMAT, format_quote
    from quote_it.store import QuoteStore

    try:
        options = parse_options(args, allow_timestamp=False)
        if options["words"]:
            raise UsageError(f"Unexpected argument: {options['words'][0]}")
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Usage: quote-it list [-a AUTHOR]", file=sys.stderr)
        return EXIT_USAGE

    date_format = config.get("display", {}).get("date_format") or DEFAULT_DATE_FORMAT

    try:
        store = QuoteStore(get_store_path(config))
        quotes = list_quotes(options["author"], store=store)
    except QuoteItError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if not quotes:
        print("No quotes found.")
        return EXIT_OK

    for quote in quotes:
        print(f"\n{format_quote(quote, date_format)}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point.

    Anything that isn't a known command is a quote to save.
    """
    args = sys.argv[1:] if argv is None else argv

    if args and args[0] in ("--help", "-h", "help"):
        print_help()
        return EXIT_OK

    if args and args[0] in ("--version", "-V", "version"):
        print_version()
        return EXIT_OK

    from quote_it.config import load_config

    try:
        config = load_config()
    except QuoteItError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    setup_logging(config)
    logger.debug(f"Running with args: {args}")

    # No args - check for piped input
    if not args:
        if not sys.stdin.isatty():
            text = sys.stdin.read().strip()
            if text:
                return cmd_create(["--", text], config)
        print_help()
        return EXIT_OK

    if args[0] == "list":
        return cmd_list(args[1:], config)

    return cmd_create(args, config)


if __name__ == "__main__":
    sys.exit(main())
