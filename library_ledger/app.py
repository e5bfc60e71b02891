"""Console front end for the circulation tracker.

This module prints the status, book and member reports of a ``Library`` and
runs a scripted demonstration: a few books and members are added, two books
are borrowed, the clock is moved forward and an overdue book is returned,
then the snapshot is written to disk.  Registry messages go to the
``library`` logger, configured here for console output.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from dates import CalendarDate, InvalidDate
from library import Library
import storage
import utils


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

DEMO_BOOKS = [
    ("The C++ Programming Language", "Bjarne Stroustrup", "9780321563842"),
    ("Effective Modern C++", "Scott Meyers", "9781491903995"),
    ("Clean Code", "Robert C. Martin", "9780132350884"),
]
DEMO_MEMBERS = [("Anna", 1001), ("David", 1002), ("Michael", 1003)]


def status_report(library: Library) -> str:
    status = library.status()
    return "\n".join([
        "",
        " LIBRARY STATUS ",
        "=====================",
        f"Total books: {status.total_books}",
        f"Total members: {status.total_members}",
        f"Borrowed books: {status.borrowed_books}",
        f"Total fines due: {utils.format_money(status.total_fines)}",
    ])


def print_status(library: Library) -> None:
    print(status_report(library))


def list_all_books(library: Library) -> None:
    print(utils.render_section("ALL BOOKS", (b.info() for b in library.books)))


def list_all_members(library: Library) -> None:
    print(utils.render_section("ALL MEMBERS", (m.info() for m in library.members)))


def run_demo(library: Library) -> None:
    """Walk ``library`` through a borrow, an overdue return and a save."""
    for title, author, isbn in DEMO_BOOKS:
        library.add_book(title, author, isbn)
    for name, member_id in DEMO_MEMBERS:
        library.add_member(name, member_id)
    print_status(library)

    print("\n BORROWING BOOKS ")
    # Short loan so the return below is late
    library.borrow_book("9780321563842", 1001, 7)
    library.borrow_book("9781491903995", 1002)
    list_all_books(library)
    list_all_members(library)

    print("\n RETURNING BOOKS ")
    library.advance_clock(10)
    library.return_book("9780321563842", 1001)

    print("\n FINAL STATUS ")
    print_status(library)
    library.save_to_file()


def run(data_file: Union[str, Path] = storage.DEFAULT_DATA_FILE, date: Optional[str] = None) -> int:
    """Run the demonstration and return a process exit status."""
    print("  LIBRARY MANAGEMENT SYSTEM ")
    print("================================")
    try:
        current = CalendarDate.parse(date) if date else None
        run_demo(Library(data_file=data_file, current_date=current))
    except InvalidDate as exc:
        print(f"\n ERROR: {exc}", file=sys.stderr)
        return 1
    print("\n DEMO COMPLETED SUCCESSFULLY! ")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Library circulation tracker demo")
    parser.add_argument("--data-file", default=str(storage.DEFAULT_DATA_FILE),
                        help="snapshot path (default: library_data.txt)")
    parser.add_argument("--date", help="starting date of the library clock (YYYY-MM-DD)")
    parser.add_argument("--quiet", action="store_true", help="only show warnings and errors from the registry")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # Registry progress ("Book added", "borrowed") is logged at INFO
    logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO, format=LOG_FORMAT)
    return run(data_file=args.data_file, date=args.date)


if __name__ == "__main__":
    sys.exit(main())
