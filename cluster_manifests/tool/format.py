"""Library for formatting output."""

from typing import Generator, Any

import sys
from typing import TextIO


PADDING = 4


def column_format_string(rows: list[list[str]]) -> str:
    """Produce a format string based on max width of columns."""
    num_cols = len(rows[0])
    widths = [0] * num_cols
    for row in rows:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(str(value)))
    return "".join([f"{{:{w+PADDING}}}" for w in widths])


class PrintFormatter:
    """A formatter that prints human readable console output."""

    def __init__(self, keys: list[str]):
        """Initialize the PrintFormatter with the keys to print."""
        self._keys = keys

    def format(self, data: list[dict[str, Any]]) -> Generator[str, None, None]:
        """Format the data objects as columns with a header row."""
        if not data:
            return
        rows = [[k.upper() for k in self._keys]]
        rows.extend([str(row[key]) for key in self._keys] for row in data)
        format_string = column_format_string(rows)
        for row in rows:
            yield format_string.format(*row).rstrip()

    def print(self, data: list[dict[str, Any]], file: TextIO = sys.stdout) -> None:
        """Output the data objects."""
        for result in self.format(data):
            print(result, file=file)
