from typing import List

from library_catalogue.items import AudioBook, Book, LibraryItem


def sample_items() -> List[LibraryItem]:
    """Fresh demo items for seeding a catalogue."""
    return [
        Book(1, "The Great Gatsby", "F. Scott Fitzgerald", "978-0-7432-7356-5"),
        Book(2, "To Kill a Mockingbird", "Harper Lee", "978-0-06-112008-4"),
        Book(3, "1984", "George Orwell", "978-0-452-28423-4"),
        Book(4, "Pride and Prejudice", "Jane Austen", "978-0-14-143951-8"),
        AudioBook(5, "Dune", "Scott Brick", 1263),
        AudioBook(6, "The Old Man and the Sea", "Donald Sutherland", 142),
    ]
