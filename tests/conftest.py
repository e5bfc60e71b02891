import pytest

from library import Library


@pytest.fixture
def lib(tmp_path):
    """Fresh library with three books and two members, clock at the seed date."""
    l = Library(data_file=tmp_path / "library_data.txt")
    l.add_book("The C++ Programming Language", "Bjarne Stroustrup", "9780321563842")
    l.add_book("Effective Modern C++", "Scott Meyers", "9781491903995")
    l.add_book("Clean Code", "Robert C. Martin", "9780132350884")
    l.add_member("Anna", 1001)
    l.add_member("David", 1002)
    return l
