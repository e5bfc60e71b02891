from dates import CalendarDate
from models import Book, Member
import storage


def sample():
    books = [
        Book("Clean Code", "Robert C. Martin", "9780132350884"),
        Book("Effective Modern C++", "Scott Meyers", "9781491903995"),
    ]
    books[1].borrow(CalendarDate(2024, 1, 28))
    members = [
        Member("Anna", 1001, total_fines=1.5),
        Member("David", 1002, loaned_isbns=["9781491903995"]),
        Member("Michael", 1003, total_fines=5.0),
    ]
    return books, members


def test_render_snapshot_format():
    books, members = sample()
    assert storage.render_snapshot(books, members) == (
        "[BOOKS]\n"
        "Clean Code|Robert C. Martin|9780132350884|0\n"
        "Effective Modern C++|Scott Meyers|9781491903995|1\n"
        "[MEMBERS]\n"
        "Anna|1001|1.5\n"
        "David|1002|0\n"
        "Michael|1003|5\n"
    )


def test_render_empty_snapshot():
    assert storage.render_snapshot([], []) == "[BOOKS]\n[MEMBERS]\n"


def test_save_snapshot_creates_parent_and_leaves_no_temp_file(tmp_path):
    books, members = sample()
    target = tmp_path / "nested" / "library_data.txt"
    written = storage.save_snapshot(books, members, target)
    assert written == target
    assert target.read_text(encoding="utf-8") == storage.render_snapshot(books, members)
    assert [p.name for p in target.parent.iterdir()] == ["library_data.txt"]


def test_save_snapshot_overwrites(tmp_path):
    target = tmp_path / "library_data.txt"
    target.write_text("stale", encoding="utf-8")
    storage.save_snapshot([], [], str(target))
    assert target.read_text(encoding="utf-8") == "[BOOKS]\n[MEMBERS]\n"
