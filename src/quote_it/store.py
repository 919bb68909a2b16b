"""
Store module for quote-it.

Flat JSON file holding every quote, one mapping per record:

    {"version": 1, "quotes": [{"id": 1, "text": "...", "author": null, "timestamp": null}]}

Append-only. The whole file is rewritten on each append and nothing is
locked, so concurrent appends are last-writer-wins.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from quote_it.config import get_store_path
from quote_it.errors import StoreError
from quote_it.models import Quote

logger = logging.getLogger(__name__)

# Store format version
STORE_VERSION = 1


class QuoteStore:
    """JSON file store for quotes."""

    def __init__(self, path: Path | None = None):
        self.path = path or get_store_path()

    def load(self) -> list[Quote]:
        """
        Read every stored quote in storage order.

        Returns an empty list if the store doesn't exist yet.
        Raises StoreError if the file is unreadable or malformed.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"No store at {self.path}, starting empty")
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Could not read {self.path}: {e}") from e

        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreError(f"Corrupt store {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreError(f"Corrupt store {self.path}: expected a JSON object")

        # Files without a version predate versioning and share the v1 layout
        version = data.get("version", STORE_VERSION)
        if version != STORE_VERSION:
            raise StoreError(f"Unsupported store version {version!r} in {self.path}")

        records = data.get("quotes")
        if not isinstance(records, list):
            raise StoreError(f"Corrupt store {self.path}: missing 'quotes' list")

        try:
            quotes = [Quote.model_validate(record) for record in records]
        except ValidationError as e:
            raise StoreError(f"Corrupt store {self.path}: {e}") from e

        logger.debug(f"Loaded {len(quotes)} quotes from {self.path}")
        return quotes

    def append(self, quote: Quote) -> Quote:
        """
        Add a quote to the end of the store.

        Assigns the next sequential id and rewrites the full file.
        Returns the stored quote.
        """
        quotes = self.load()
        stored = quote.model_copy(update={"id": len(quotes) + 1})
        quotes.append(stored)
        self._write(quotes)

        logger.debug(f"Appended quote #{stored.id} to {self.path}")
        return stored

    def _write(self, quotes: list[Quote]) -> None:
        """Rewrite the store with the given quotes."""
        data: dict[str, Any] = {
            "version": STORE_VERSION,
            "quotes": [q.model_dump(mode="json") for q in quotes],
        }

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.write("\n")
        except OSError as e:
            raise StoreError(f"Could not write {self.path}: {e}") from e


def filter_by_author(quotes: Iterable[Quote], author: str | None) -> list[Quote]:
    """Keep quotes whose author matches exactly. None keeps everything."""
    if author is None:
        return list(quotes)
    return [q for q in quotes if q.author == author]
