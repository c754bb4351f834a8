from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, List, Optional

from rich.console import Console

from config import settings
from utils.validators import ItemValidationError, TextValidator

_console = Console()

SEPARATOR = "-------------------"


class ItemType(str, Enum):
    """Explicit discriminator for the catalogue's item variants."""

    BOOK = "Book"
    AUDIO_BOOK = "AudioBook"


class LibraryItem(ABC):
    """Base for every entry the catalogue can hold.

    Concrete variants must declare an ``ItemType`` as ``item_type``; a
    subclass without one is rejected when the class is defined.
    """

    item_type: ClassVar[ItemType]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if not isinstance(getattr(cls, "item_type", None), ItemType):
            raise TypeError(f"{cls.__name__} must declare an ItemType as item_type")

    def __init__(self, id: int, title: str) -> None:
        self._id = id
        self._title = title

    @property
    def id(self) -> int:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    def get_id(self) -> int:
        return self._id

    def get_title(self) -> str:
        return self._title

    def get_item_type(self) -> str:
        return self.item_type.value

    @abstractmethod
    def get_basic_info(self) -> str:
        return f"ID: {self._id}, Title: {self._title}"

    def display(self, console: Optional[Console] = None) -> None:
        """Write the item's fields to the console, one per line."""
        out = console or _console
        for line in describe_item(self):
            out.print(line, markup=False, highlight=False)

    def to_dict(self) -> dict:
        return {"item_type": self.get_item_type(), "id": self._id, "title": self._title}

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.get_item_type()}: {self.get_basic_info()}"


class Book(LibraryItem):
    """A printed book."""

    item_type = ItemType.BOOK

    def __init__(self, id: int, title: str, author: str, isbn: str) -> None:
        super().__init__(id, title)
        self._author = author
        self._isbn = isbn

    @property
    def author(self) -> str:
        return self._author

    @property
    def isbn(self) -> str:
        return self._isbn

    def get_basic_info(self) -> str:
        return f"{super().get_basic_info()}, Author: {self._author}"

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update({"author": self._author, "isbn": self._isbn})
        return data


class AudioBook(LibraryItem):
    """An audio book; ``length`` is measured in minutes."""

    item_type = ItemType.AUDIO_BOOK

    def __init__(self, id: int, title: str, narrator: str, length: int) -> None:
        super().__init__(id, title)
        self._narrator = narrator
        self._length = length

    @property
    def narrator(self) -> str:
        return self._narrator

    @property
    def length(self) -> int:
        return self._length

    @property
    def length_formatted(self) -> str:
        sign = "-" if self._length < 0 else ""
        hours, minutes = divmod(abs(self._length), 60)
        if hours > 0:
            return f"{sign}{hours}h {minutes}m"
        return f"{sign}{minutes}m"

    def set_narrator(self, narrator: str) -> None:
        if not TextValidator.validate_name(narrator):
            raise ItemValidationError("Narrator name cannot be empty")
        self._narrator = narrator

    def set_length(self, length: int) -> None:
        if not TextValidator.validate_length(length):
            raise ItemValidationError("Length must be greater than 0 minutes")
        self._length = length

    def is_long_audio_book(self) -> bool:
        return self._length > settings.long_audio_book_minutes

    def get_basic_info(self) -> str:
        return f"{super().get_basic_info()}, Narrator: {self._narrator}"

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update({"narrator": self._narrator, "length": self._length})
        return data


def describe_item(item: LibraryItem) -> List[str]:
    """Return the display lines for ``item``, chosen by its discriminator."""
    item_type = getattr(item, "item_type", None)
    if item_type is ItemType.BOOK:
        return [
            f"Book ID: {item.id}",
            f"Title: {item.title}",
            f"Author: {item.author}",
            f"ISBN: {item.isbn}",
            SEPARATOR,
        ]
    if item_type is ItemType.AUDIO_BOOK:
        return [
            f"Audio Book ID: {item.id}",
            f"Title: {item.title}",
            f"Narrator: {item.narrator}",
            f"Length: {item.length_formatted}",
            SEPARATOR,
        ]
    raise TypeError(f"Unsupported library item: {item!r}")


def item_from_dict(data: dict) -> LibraryItem:
    """Build the variant named by ``data["item_type"]``.

    Accepts the payloads produced by ``to_dict()``. Unknown types, missing
    fields and non-numeric ids or lengths raise ``ValueError``.
    """
    raw_type = data.get("item_type")
    try:
        item_type = ItemType(raw_type)
    except ValueError as exc:
        raise ValueError(f"Unknown item type: {raw_type!r}") from exc

    try:
        if item_type is ItemType.BOOK:
            return Book(
                id=int(data["id"]),
                title=data["title"],
                author=data.get("author", ""),
                isbn=data.get("isbn", ""),
            )
        return AudioBook(
            id=int(data["id"]),
            title=data["title"],
            narrator=data.get("narrator", ""),
            length=int(data.get("length", 0)),
        )
    except KeyError as exc:
        raise ValueError(f"Missing field for {item_type.value}: {exc.args[0]}") from exc
    except TypeError as exc:
        raise ValueError(f"Invalid field for {item_type.value}: {exc}") from exc
