import logging
import warnings
from typing import Dict, List, Optional, Union

from library_catalogue.items import ItemType, LibraryItem

logger = logging.getLogger(__name__)


class Catalogue:
    """Ordered, in-memory collection of library items.

    Items keep their insertion order and duplicate ids are accepted. Reads
    always hand out copies so callers cannot reach the internal list.
    """

    _instance: Optional["Catalogue"] = None

    def __init__(self) -> None:
        self._items: List[LibraryItem] = []

    @classmethod
    def get_instance(cls) -> "Catalogue":
        """Return the process-wide catalogue, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
            logger.debug("Catalogue instance created")
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    # ------------------------- Core operations ------------------------- #
    def add_item(self, item: LibraryItem) -> None:
        self._items.append(item)
        logger.info('%s "%s" has been added to the catalogue.', item.get_item_type(), item.get_title())

    def remove_item(self, item_id: int) -> bool:
        for index, item in enumerate(self._items):
            if item.get_id() == item_id:
                del self._items[index]
                logger.info(
                    '%s "%s" has been removed from the catalogue.', item.get_item_type(), item.get_title()
                )
                return True
        logger.debug("No item with id %s to remove", item_id)
        return False

    def find_item_by_title(self, title: str) -> Optional[LibraryItem]:
        wanted = title.casefold()
        for item in self._items:
            if item.get_title().casefold() == wanted:
                return item
        logger.debug("No item titled %r", title)
        return None

    def find_items_by_type(self, item_type: Union[ItemType, str]) -> List[LibraryItem]:
        wanted = item_type.value if isinstance(item_type, ItemType) else item_type
        return [item for item in self._items if item.get_item_type() == wanted]

    def get_item_count(self) -> int:
        return len(self._items)

    def get_all_items(self) -> List[LibraryItem]:
        return list(self._items)

    def get_statistics(self) -> Dict[str, object]:
        """Total item count plus a per-type breakdown of the types present."""
        by_type: Dict[str, int] = {}
        for item in self._items:
            key = item.get_item_type()
            by_type[key] = by_type.get(key, 0) + 1
        return {"total": len(self._items), "by_type": by_type}

    def __len__(self) -> int:
        return len(self._items)

    # ------------------------- Deprecated aliases ------------------------- #
    def add_book(self, book: LibraryItem) -> None:
        warnings.warn("add_book() is deprecated; use add_item()", DeprecationWarning, stacklevel=2)
        self.add_item(book)

    def get_book_count(self) -> int:
        warnings.warn("get_book_count() is deprecated; use get_item_count()", DeprecationWarning, stacklevel=2)
        return self.get_item_count()

    def find_book_by_title(self, title: str) -> Optional[LibraryItem]:
        warnings.warn(
            "find_book_by_title() is deprecated; use find_item_by_title()", DeprecationWarning, stacklevel=2
        )
        return self.find_item_by_title(title)

    def get_all_books(self) -> List[LibraryItem]:
        warnings.warn("get_all_books() is deprecated; use get_all_items()", DeprecationWarning, stacklevel=2)
        return self.get_all_items()
