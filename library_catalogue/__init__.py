"""Library Catalogue - Core Package

This package contains the core modules:
- Item variants and their discriminator (items.py)
- Catalogue management (catalogue.py)
- Demo seed data (sample_data.py)
"""
from library_catalogue.catalogue import Catalogue
from library_catalogue.items import AudioBook, Book, ItemType, LibraryItem

__all__ = ["AudioBook", "Book", "Catalogue", "ItemType", "LibraryItem"]
