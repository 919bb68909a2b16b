"""
Terminal rendering for quotes.
"""

import os
import unicodedata

from quote_it.models import Quote

SEPARATOR = "-" * 12
DEFAULT_DATE_FORMAT = "%m-%d-%Y"

ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\0": "\\0",
}


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    BRIGHT_BLACK = "\033[90m"  # Gray
    BRIGHT_CYAN = "\033[96m"

    @classmethod
    def enabled(cls) -> bool:
        """Check if colors should be enabled."""
        if os.environ.get("NO_COLOR"):
            return False
        return True


def c(text: str, *codes: str) -> str:
    """Apply color codes to text if colors are enabled."""
    if not Colors.enabled():
        return text
    return "".join(codes) + text + Colors.RESET


def format_quote(quote: Quote, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """
    Render a quote as a block:

        "Javascript sucks"
          - Person with common sense on 10-19-2026
        ------------
    """
    lines = [c(quoted(quote.text), Colors.BOLD)]

    attribution = ""
    if quote.author is not None:
        attribution = c(quote.author, Colors.BRIGHT_CYAN)
    if quote.timestamp is not None:
        date = quote.timestamp.strftime(date_format)
        attribution = f"{attribution} on {date}" if attribution else f"on {date}"
    if attribution:
        lines.append(f"  - {attribution}")

    lines.append(c(SEPARATOR, Colors.DIM))
    return "\n".join(lines)


def quoted(text: str) -> str:
    """Wrap text in double quotes, escaping quotes, backslashes and control characters."""
    return '"' + "".join(_escape(ch) for ch in text) + '"'


def _escape(ch: str) -> str:
    if ch in ESCAPES:
        return ESCAPES[ch]
    if unicodedata.category(ch) == "Cc":
        return f"\\u{{{ord(ch):x}}}"
    return ch
