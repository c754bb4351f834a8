import pytest

from library_catalogue.catalogue import Catalogue
from library_catalogue.items import AudioBook, Book
from main import CatalogueManager
from utils.ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture(autouse=True)
def reset_catalogue(monkeypatch):
    # Every test starts with a fresh singleton and plain output
    monkeypatch.delenv(OUTPUT_MODE_ENV, raising=False)
    CatalogueManager.reset()
    yield
    CatalogueManager.reset()

@pytest.fixture
def catalogue():
    return Catalogue()

@pytest.fixture
def scenario_items():
    return [
        Book(1, "The Great Gatsby", "F. Scott Fitzgerald", "978-0-7432-7356-5"),
        Book(2, "1984", "George Orwell", "978-0-452-28423-4"),
        AudioBook(3, "Dune", "Scott Brick", 1263),
    ]
