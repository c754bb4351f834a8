import logging

import pytest

from library_catalogue.catalogue import Catalogue
from library_catalogue.items import AudioBook, Book, ItemType


def test_empty_catalogue(catalogue):
    assert catalogue.get_item_count() == 0
    assert catalogue.get_all_items() == []
    assert catalogue.get_statistics() == {"total": 0, "by_type": {}}

def test_scenario(catalogue, scenario_items):
    gatsby, nineteen, dune = scenario_items
    for item in scenario_items:
        catalogue.add_item(item)

    assert catalogue.get_item_count() == 3
    assert catalogue.find_items_by_type("Book") == [gatsby, nineteen]
    assert catalogue.get_statistics() == {"total": 3, "by_type": {"Book": 2, "AudioBook": 1}}

    assert catalogue.remove_item(2) is True
    assert catalogue.get_item_count() == 2
    assert catalogue.find_item_by_title("1984") is None
    assert catalogue.get_all_items() == [gatsby, dune]

def test_add_preserves_order_and_allows_duplicates(catalogue):
    first = Book(7, "Emma", "Jane Austen", "111")
    second = Book(7, "Emma", "Jane Austen", "111")
    catalogue.add_item(first)
    catalogue.add_item(second)

    items = catalogue.get_all_items()
    assert len(items) == 2
    assert items[0] is first
    assert items[1] is second

def test_remove_deletes_only_first_match(catalogue):
    first = Book(1, "First", "A", "1")
    duplicate = AudioBook(1, "Second", "N", 30)
    other = Book(2, "Other", "B", "2")
    for item in (first, duplicate, other):
        catalogue.add_item(item)

    assert catalogue.remove_item(1) is True
    assert catalogue.get_all_items() == [duplicate, other]

def test_remove_unknown_id(catalogue, scenario_items):
    for item in scenario_items:
        catalogue.add_item(item)

    assert catalogue.remove_item(99) is False
    assert catalogue.get_item_count() == 3

def test_remove_twice(catalogue):
    catalogue.add_item(Book(1, "Test", "Author", "123"))
    assert catalogue.remove_item(1) is True
    assert catalogue.remove_item(1) is False # Should return False if not found

def test_count_tracks_adds_minus_successful_removes(catalogue):
    for i in range(5):
        catalogue.add_item(Book(i, f"Title {i}", "Author", str(i)))
    removed = [catalogue.remove_item(i) for i in (0, 2, 42)]

    assert removed == [True, True, False]
    assert catalogue.get_item_count() == 5 - 2
    assert len(catalogue) == catalogue.get_item_count()

def test_find_by_title_is_case_insensitive(catalogue, scenario_items):
    for item in scenario_items:
        catalogue.add_item(item)
    gatsby = scenario_items[0]

    assert catalogue.find_item_by_title("The Great Gatsby") is gatsby
    assert catalogue.find_item_by_title("the great gatsby") is gatsby
    assert catalogue.find_item_by_title("THE GREAT GATSBY") is gatsby
    assert catalogue.find_item_by_title("1984") is scenario_items[1]

def test_find_by_title_never_partial(catalogue, scenario_items):
    for item in scenario_items:
        catalogue.add_item(item)

    assert catalogue.find_item_by_title("Gatsby") is None
    assert catalogue.find_item_by_title("") is None

def test_find_by_title_with_padded_title(catalogue):
    padded = Book(1, " Dune ", "Frank Herbert", "978-0441013593")
    catalogue.add_item(padded)

    assert catalogue.find_item_by_title(" Dune ") is padded
    assert catalogue.find_item_by_title(" dune ") is padded
    assert catalogue.find_item_by_title("Dune") is None # exact match, no trimming

def test_find_by_title_returns_first_match(catalogue):
    first = Book(1, "Dune", "Frank Herbert", "1")
    second = AudioBook(2, "DUNE", "Scott Brick", 1263)
    catalogue.add_item(first)
    catalogue.add_item(second)

    assert catalogue.find_item_by_title("dune") is first

def test_find_by_type_accepts_enum(catalogue, scenario_items):
    for item in scenario_items:
        catalogue.add_item(item)

    assert catalogue.find_items_by_type(ItemType.AUDIO_BOOK) == [scenario_items[2]]
    assert catalogue.find_items_by_type(ItemType.BOOK) == scenario_items[:2]

def test_find_by_unknown_type_is_empty(catalogue, scenario_items):
    for item in scenario_items:
        catalogue.add_item(item)

    assert catalogue.find_items_by_type("Magazine") == []
    assert catalogue.find_items_by_type("book") == []

def test_get_all_items_returns_copy(catalogue, scenario_items):
    for item in scenario_items:
        catalogue.add_item(item)

    items = catalogue.get_all_items()
    items.clear()
    items.append(Book(100, "Injected", "Nobody", "0"))

    assert catalogue.get_item_count() == 3
    assert catalogue.get_all_items() == scenario_items
    assert catalogue.get_all_items() is not catalogue.get_all_items()

def test_statistics_total_matches_breakdown(catalogue):
    catalogue.add_item(Book(1, "A", "x", "1"))
    catalogue.add_item(AudioBook(2, "B", "y", 10))
    catalogue.add_item(AudioBook(3, "C", "z", 20))
    catalogue.remove_item(1)

    stats = catalogue.get_statistics()
    assert stats["total"] == catalogue.get_item_count() == 2
    assert sum(stats["by_type"].values()) == stats["total"]
    assert stats["by_type"] == {"AudioBook": 2} # No zero-count entries

def test_statistics_is_a_snapshot(catalogue):
    catalogue.add_item(Book(1, "A", "x", "1"))
    stats = catalogue.get_statistics()
    stats["by_type"]["Book"] = 50

    assert catalogue.get_statistics()["by_type"] == {"Book": 1}

def test_get_instance_returns_same_catalogue():
    first = Catalogue.get_instance()
    second = Catalogue.get_instance()
    assert first is second

    first.add_item(Book(1, "Shared", "Author", "1"))
    assert second.get_item_count() == 1
    assert second.find_item_by_title("shared") is not None

def test_reset_instance_gives_fresh_catalogue():
    first = Catalogue.get_instance()
    first.add_item(Book(1, "Old", "Author", "1"))
    Catalogue.reset_instance()

    second = Catalogue.get_instance()
    assert second is not first
    assert second.get_item_count() == 0

def test_direct_construction_is_independent(catalogue):
    catalogue.add_item(Book(1, "Local", "Author", "1"))
    assert Catalogue.get_instance().get_item_count() == 0

def test_mutations_are_logged(catalogue, caplog):
    with caplog.at_level(logging.INFO, logger="library_catalogue.catalogue"):
        catalogue.add_item(AudioBook(3, "Dune", "Scott Brick", 1263))
        catalogue.remove_item(3)

    assert 'AudioBook "Dune" has been added to the catalogue.' in caplog.text
    assert 'AudioBook "Dune" has been removed from the catalogue.' in caplog.text

def test_deprecated_aliases(catalogue):
    book = Book(1, "1984", "George Orwell", "978-0-452-28423-4")

    with pytest.warns(DeprecationWarning):
        catalogue.add_book(book)
    with pytest.warns(DeprecationWarning):
        assert catalogue.get_book_count() == 1
    with pytest.warns(DeprecationWarning):
        assert catalogue.find_book_by_title("1984") is book
    with pytest.warns(DeprecationWarning):
        assert catalogue.get_all_books() == [book]
