from __future__ import annotations

from typing import Any, Tuple

from .advent import church_year

# Sunday cycle: church year mod 3 -> letter (2023 was Year A, 2024 Year B, 2025 Year C)
SUNDAY_LETTERS = ("C", "A", "B")


def weekday_lectionary_number(d: Any) -> int:
    """Weekday lectionary year, 1 or 2.

    Year 1 is read in odd-numbered church years and Year 2 in even ones; the
    number changes on Advent Sunday, not on January 1.
    """
    return ((church_year(d) + 1) % 2) + 1


def sunday_lectionary_letter(d: Any) -> str:
    """Principal Service lectionary year: "A", "B" or "C"."""
    return SUNDAY_LETTERS[church_year(d) % 3]


def lectionary(d: Any) -> Tuple[str, int]:
    cy = church_year(d)
    return SUNDAY_LETTERS[cy % 3], ((cy + 1) % 2) + 1
