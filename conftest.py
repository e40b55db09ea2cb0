import pytest

from library import Library


@pytest.fixture
def data_file(tmp_path):
    # Her test için benzersiz bir katalog dosyası
    return str(tmp_path / "library.csv")


@pytest.fixture
def lib(data_file):
    """A Library loaded from a freshly seeded data file."""
    lib = Library(data_file=data_file)
    lib.load()
    return lib


@pytest.fixture
def empty_lib(data_file):
    """A Library whose data file holds no records (a lone blank line, so it is not seeded)."""
    with open(data_file, "w", encoding="utf-8") as f:
        f.write("\n")
    lib = Library(data_file=data_file)
    lib.load()
    return lib
