"""Utility functions for catalog searches and report formatting."""

from __future__ import annotations

from typing import Iterable, List

from models import Book


def apply_title_search(books: Iterable[Book], term: str) -> List[Book]:
    """Return the books whose title contains ``term`` (case-sensitive), in the given order."""
    return [b for b in books if term in b.title]


def overdue_only(books: Iterable[Book], as_of) -> List[Book]:
    return [b for b in books if b.is_overdue(as_of)]


def format_money(amount: float) -> str:
    return f"${amount:.2f}"


def format_number(value: float) -> str:
    """Shortest general form of a number: 5.0 -> "5", 2.5 -> "2.5"."""
    return f"{value:g}"


def render_section(title: str, entries: Iterable[str]) -> str:
    """Render a report heading followed by one block per entry, each closed by ``---``."""
    heading = f" {title} "
    lines = ["", heading, "=" * (len(heading) + 5)]
    for entry in entries:
        lines.append(entry)
        lines.append("---")
    return "\n".join(lines)
