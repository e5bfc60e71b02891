import logging
from pathlib import Path

import app
from app import build_parser
from library import Library


def test_status_report(lib):
    report = app.status_report(lib)
    assert "Total books: 3" in report
    assert "Total members: 2" in report
    assert "Borrowed books: 0" in report
    assert "Total fines due: $0.00" in report


def test_list_all_books(lib, capsys):
    lib.borrow_book("9780132350884", 1001)
    app.list_all_books(lib)
    out = capsys.readouterr().out
    assert " ALL BOOKS " in out
    assert out.count("---") == 3
    assert "Due Date: 2024-02-11" in out


def test_list_all_members(lib, capsys):
    app.list_all_members(lib)
    out = capsys.readouterr().out
    assert "Member: Anna (ID: 1001)" in out
    assert "Member: David (ID: 1002)" in out


def test_run_demo(tmp_path, capsys):
    library = Library(data_file=tmp_path / "library_data.txt")
    app.run_demo(library)
    out = capsys.readouterr().out
    assert "Total fines due: $1.50" in out
    assert library.current_date.format() == "2024-02-07"
    assert library.find_member_by_id(1001).total_fines == 1.5
    assert library.find_book_by_isbn("9781491903995").borrowed
    snapshot = (tmp_path / "library_data.txt").read_text(encoding="utf-8")
    assert "Anna|1001|1.5" in snapshot
    assert "Effective Modern C++|Scott Meyers|9781491903995|1" in snapshot


def test_run_returns_zero(tmp_path, capsys):
    assert app.run(data_file=tmp_path / "out.txt") == 0
    assert "DEMO COMPLETED SUCCESSFULLY!" in capsys.readouterr().out
    assert (tmp_path / "out.txt").exists()


def test_run_with_invalid_date_reports_error(tmp_path, capsys):
    assert app.run(data_file=tmp_path / "out.txt", date="2023-02-29") == 1
    assert "ERROR: Invalid date" in capsys.readouterr().err
    assert not (tmp_path / "out.txt").exists()


def test_main_parses_arguments(tmp_path, capsys):
    target = tmp_path / "cli.txt"
    assert app.main(["--data-file", str(target), "--date", "2024-03-01"]) == 0
    assert Path(target).read_text(encoding="utf-8").startswith("[BOOKS]")


def test_parser_quiet_flag_defaults_off():
    assert build_parser().parse_args([]).quiet is False
    assert build_parser().parse_args(["--quiet"]).quiet is True


def test_run_demo_logs_registry_progress(tmp_path, caplog):
    with caplog.at_level(logging.INFO, logger="library"):
        app.run_demo(Library(data_file=tmp_path / "library_data.txt"))
    assert "Book added: Clean Code" in caplog.text
    assert "Anna borrowed: The C++ Programming Language (due 2024-02-04)" in caplog.text
