"""Data models for the circulation tracker.

We define simple dataclasses to model Loans, Books and Members.  These
dataclasses are owned by the ``Library`` registry and carry the borrowing
rules themselves: a book knows whether it is on loan and what it owes, a
member knows how many loans it holds and its unpaid fines.  Members never
hold Book objects, only their ISBNs; the registry resolves them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from dates import CalendarDate, days_between


DEFAULT_LOAN_DAYS = 14
DEFAULT_FINE_PER_DAY = 0.5
MAX_ACTIVE_LOANS = 5


@dataclass(frozen=True)
class Loan:
    """The borrowed/due state of a single checked-out book.

    ``member_id`` names the borrower, so only that member can end the loan.
    """
    borrowed_on: CalendarDate
    due_on: CalendarDate
    member_id: Optional[int] = None

    def is_overdue(self, as_of: CalendarDate) -> bool:
        """Return True if ``as_of`` is strictly after the due date."""
        return as_of > self.due_on

    def calculate_fine(self, as_of: CalendarDate, fine_per_day: float) -> float:
        """Fine owed at ``as_of``: approximate overdue days times the daily rate."""
        if not self.is_overdue(as_of):
            return 0.0
        return days_between(as_of, self.due_on) * fine_per_day


def start_loan(borrowed_on: CalendarDate, loan_days: int = DEFAULT_LOAN_DAYS,
               member_id: Optional[int] = None) -> Loan:
    return Loan(borrowed_on=borrowed_on, due_on=borrowed_on.advance(loan_days), member_id=member_id)


@dataclass
class Book:
    """Represents a book in the catalog.

    Attributes:
        title: book title.
        author: author name.
        isbn: unique key within the library; never changes.
        fine_per_day: fine charged for each overdue day.
        loan: the active loan, or None while the book is on the shelf.
    """

    title: str
    author: str
    isbn: str
    fine_per_day: float = DEFAULT_FINE_PER_DAY
    loan: Optional[Loan] = None

    def __post_init__(self) -> None:
        if self.fine_per_day < 0:
            raise ValueError(f"fine_per_day must be >= 0, got {self.fine_per_day}")

    @property
    def borrowed(self) -> bool:
        return self.loan is not None

    @property
    def borrow_date(self) -> Optional[CalendarDate]:
        return self.loan.borrowed_on if self.loan else None

    @property
    def due_date(self) -> Optional[CalendarDate]:
        return self.loan.due_on if self.loan else None

    def borrow(self, borrow_date: CalendarDate, loan_days: int = DEFAULT_LOAN_DAYS,
               member_id: Optional[int] = None) -> bool:
        """Start a loan.  Returns False, leaving the current loan alone, if already borrowed."""
        if self.loan is not None:
            return False
        self.loan = start_loan(borrow_date, loan_days, member_id)
        return True

    def return_book(self, return_date: CalendarDate) -> bool:
        """End the loan.  Returns False if the book was not borrowed."""
        if self.loan is None:
            return False
        self.loan = None
        return True

    def is_overdue(self, as_of: CalendarDate) -> bool:
        return self.loan is not None and self.loan.is_overdue(as_of)

    def calculate_fine(self, as_of: CalendarDate) -> float:
        if self.loan is None:
            return 0.0
        return self.loan.calculate_fine(as_of, self.fine_per_day)

    def info(self) -> str:
        lines = [
            f"  {self.title}",
            f"   Author: {self.author}",
            f"   ISBN: {self.isbn}",
            f"   Status: {'Borrowed' if self.borrowed else 'Available'}",
        ]
        if self.loan is not None:
            lines.append(f"   Due Date: {self.loan.due_on}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.info()


@dataclass
class Member:
    """A library member and its loan ledger.

    ``loaned_isbns`` keeps the ISBNs of the books currently on loan, in the
    order they were borrowed.  ``total_fines`` accumulates fines charged at
    return time until they are paid.
    """

    name: str
    member_id: int
    loaned_isbns: List[str] = field(default_factory=list)
    total_fines: float = 0.0

    @property
    def borrowed_count(self) -> int:
        return len(self.loaned_isbns)

    def has_book(self, isbn: str) -> bool:
        return isbn in self.loaned_isbns

    def borrow_book(self, book: Book, as_of: CalendarDate, loan_days: int = DEFAULT_LOAN_DAYS) -> bool:
        """Borrow ``book`` on ``as_of``.

        Fails without changing anything when the member already holds
        ``MAX_ACTIVE_LOANS`` books or the book is already on loan.
        """
        if book is None or self.borrowed_count >= MAX_ACTIVE_LOANS:
            return False
        if not book.borrow(as_of, loan_days, self.member_id):
            return False
        self.loaned_isbns.append(book.isbn)
        return True

    def return_book(self, book: Book, as_of: CalendarDate) -> bool:
        """Return ``book`` on ``as_of``, charging its fine if it is overdue.

        Fails unless the book is on loan to this member.  The fine is taken
        from the loan before the loan is cleared.
        """
        if book is None or not self.has_book(book.isbn) or book.loan is None:
            return False
        if book.loan.member_id != self.member_id:
            return False
        fine = book.calculate_fine(as_of) if book.is_overdue(as_of) else 0.0
        book.return_book(as_of)
        self.loaned_isbns.remove(book.isbn)
        self.total_fines += fine
        return True

    def pay_fine(self, amount: float) -> bool:
        """Pay towards outstanding fines.  Amounts outside (0, total_fines] are ignored."""
        if 0 < amount <= self.total_fines:
            self.total_fines -= amount
            return True
        return False

    def info(self) -> str:
        return (
            f"Member: {self.name} (ID: {self.member_id})\n"
            f"   Borrowed books: {self.borrowed_count}\n"
            f"   Total fines: ${self.total_fines:.2f}"
        )

    def __str__(self) -> str:
        return self.info()
