"""Output formatting for terminal and tables."""

from poker_profiler.formatters.text import TextFormatter
from poker_profiler.formatters.table import TableFormatter

__all__ = ["TextFormatter", "TableFormatter"]
