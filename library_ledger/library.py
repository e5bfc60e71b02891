"""The library registry: books, members and the circulation clock.

``Library`` owns every Book and Member, keyed by ISBN and member id, and
runs the borrow and return workflows against its ``current_date``.  None of
the operations raise on bad input: duplicates, unknown keys and refused
loans are reported through the ``library`` logger and signalled by a False
return value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from dates import CalendarDate
from models import DEFAULT_FINE_PER_DAY, DEFAULT_LOAN_DAYS, Book, Member
import storage
import utils


logger = logging.getLogger("library")

# The clock starts here until a caller moves it.
SEED_DATE = CalendarDate(2024, 1, 28)


@dataclass(frozen=True)
class LibraryStatus:
    """Aggregate counts shown by the status report."""
    total_books: int
    total_members: int
    borrowed_books: int
    total_fines: float


class Library:
    """In-memory catalog and member registry."""

    def __init__(self, data_file: Union[str, Path] = storage.DEFAULT_DATA_FILE,
                 current_date: Optional[CalendarDate] = None) -> None:
        self.data_file = Path(data_file)
        self.current_date = current_date or SEED_DATE
        self._books: Dict[str, Book] = {}
        self._members: Dict[int, Member] = {}

    @property
    def books(self) -> List[Book]:
        return list(self._books.values())

    @property
    def members(self) -> List[Member]:
        return list(self._members.values())

    # Books

    def add_book(self, title: str, author: str, isbn: str,
                 fine_per_day: float = DEFAULT_FINE_PER_DAY) -> bool:
        if isbn in self._books:
            logger.warning("ISBN already exists: %s", isbn)
            return False
        try:
            book = Book(title=title, author=author, isbn=isbn, fine_per_day=fine_per_day)
        except ValueError as exc:
            logger.warning("Book rejected | isbn=%s (%s)", isbn, exc)
            return False
        self._books[isbn] = book
        logger.info("Book added: %s", title)
        return True

    def remove_book(self, isbn: str) -> bool:
        """Drop the book with ``isbn`` from the catalog.

        A borrowed book is removed as well; the borrowing member keeps the
        ISBN in its ledger and can no longer return it through the registry.
        """
        if self._books.pop(isbn, None) is None:
            logger.warning("Book not found: %s", isbn)
            return False
        logger.info("Book removed: %s", isbn)
        return True

    def find_book_by_isbn(self, isbn: str) -> Optional[Book]:
        return self._books.get(isbn)

    def find_books_by_title(self, title: str) -> List[Book]:
        return utils.apply_title_search(self._books.values(), title)

    def overdue_books(self) -> List[Book]:
        return utils.overdue_only(self._books.values(), self.current_date)

    # Members

    def add_member(self, name: str, member_id: int) -> bool:
        if member_id in self._members:
            logger.warning("Member ID already exists: %s", member_id)
            return False
        self._members[member_id] = Member(name=name, member_id=member_id)
        logger.info("Member added: %s", name)
        return True

    def find_member_by_id(self, member_id: int) -> Optional[Member]:
        return self._members.get(member_id)

    def pay_fine(self, member_id: int, amount: float) -> bool:
        member = self.find_member_by_id(member_id)
        if member is None:
            logger.warning("Member not found: %s", member_id)
            return False
        if not member.pay_fine(amount):
            logger.warning("Payment of %s ignored for member %s (owes %s)",
                           amount, member_id, utils.format_money(member.total_fines))
            return False
        logger.info("%s paid %s", member.name, utils.format_money(amount))
        return True

    # Circulation

    def borrow_book(self, isbn: str, member_id: int, loan_days: int = DEFAULT_LOAN_DAYS) -> bool:
        book = self.find_book_by_isbn(isbn)
        member = self.find_member_by_id(member_id)
        if book is None or member is None:
            logger.warning("Book or member not found | isbn=%s member=%s", isbn, member_id)
            return False
        if member.borrow_book(book, self.current_date, loan_days):
            logger.info("%s borrowed: %s (due %s)", member.name, book.title, book.due_date)
            return True
        logger.warning("Cannot borrow book | isbn=%s member=%s", isbn, member_id)
        return False

    def return_book(self, isbn: str, member_id: int) -> bool:
        book = self.find_book_by_isbn(isbn)
        member = self.find_member_by_id(member_id)
        if book is None or member is None:
            logger.warning("Book or member not found | isbn=%s member=%s", isbn, member_id)
            return False
        fines_before = member.total_fines
        if member.return_book(book, self.current_date):
            charged = member.total_fines - fines_before
            if charged:
                logger.info("%s returned: %s (fine %s)", member.name, book.title, utils.format_money(charged))
            else:
                logger.info("%s returned: %s", member.name, book.title)
            return True
        logger.warning("Cannot return book | isbn=%s member=%s", isbn, member_id)
        return False

    # Clock

    def set_current_date(self, date: CalendarDate) -> None:
        self.current_date = date

    def advance_clock(self, days: int) -> CalendarDate:
        self.current_date = self.current_date.advance(days)
        return self.current_date

    # Reporting and persistence

    def status(self) -> LibraryStatus:
        return LibraryStatus(
            total_books=len(self._books),
            total_members=len(self._members),
            borrowed_books=sum(1 for b in self._books.values() if b.borrowed),
            total_fines=sum(m.total_fines for m in self._members.values()),
        )

    def save_to_file(self, path: Union[str, Path, None] = None) -> bool:
        target = Path(path) if path is not None else self.data_file
        try:
            storage.save_snapshot(self._books.values(), self._members.values(), target)
        except OSError as exc:
            logger.error("Cannot open file for writing: %s (%s)", target, exc)
            return False
        logger.info("Data saved to: %s", target)
        return True
