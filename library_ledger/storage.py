"""Snapshot writer for the circulation tracker.

The registry is kept in memory; on request it is written out as a flat text
snapshot.  The file holds a ``[BOOKS]`` section with one
``title|author|isbn|borrowed`` line per book (borrowed is ``1`` or ``0``)
followed by a ``[MEMBERS]`` section with one ``name|member_id|total_fines``
line per member.  The format is write-only: there is no loader.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Union

from models import Book, Member
import utils


DEFAULT_DATA_FILE = Path("library_data.txt")


def _book_line(book: Book) -> str:
    return "|".join([book.title, book.author, book.isbn, "1" if book.borrowed else "0"])


def _member_line(member: Member) -> str:
    return "|".join([member.name, str(member.member_id), utils.format_number(member.total_fines)])


def render_snapshot(books: Iterable[Book], members: Iterable[Member]) -> str:
    lines = ["[BOOKS]"]
    lines.extend(_book_line(b) for b in books)
    lines.append("[MEMBERS]")
    lines.extend(_member_line(m) for m in members)
    return "\n".join(lines) + "\n"


def _save_text(path: Path, text: str) -> None:
    """Write text to the given file atomically."""
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with open(tmp_path, "w", encoding="utf-8") as f:
        f.write(text)
    os.replace(tmp_path, path)


def save_snapshot(books: Iterable[Book], members: Iterable[Member],
                  path: Union[str, Path] = DEFAULT_DATA_FILE) -> Path:
    """Write the snapshot to ``path`` and return the resolved path.

    Missing parent directories are created.  ``OSError`` propagates to the
    caller.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    _save_text(path, render_snapshot(books, members))
    return path
