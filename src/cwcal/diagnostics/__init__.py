"""Diagnostics package.

- easter_table, pretty_year: plain text, always available
- easter_scatter: optional (requires numpy and matplotlib, the "diagnostics" extra)
"""

__all__ = ["easter_table", "pretty_year", "easter_scatter"]
