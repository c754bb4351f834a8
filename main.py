import json
import logging
from typing import Optional

import typer
from rich.console import Console

from config import settings
from library_catalogue.catalogue import Catalogue
from library_catalogue.items import AudioBook, Book, ItemType, item_from_dict
from library_catalogue.sample_data import sample_items
from utils.ui_helpers import set_output_mode, print_items_result, print_stats_result
from utils.validators import ItemValidationError, TextValidator

APP_NAME = settings.app_name

console = Console()
logger = logging.getLogger(__name__)


class CatalogueManager:
    """Owns the CLI's catalogue and seeds it with demo data on first use."""

    _seeded: bool = False

    @classmethod
    def get_catalogue(cls) -> Catalogue:
        catalogue = Catalogue.get_instance()
        if settings.seed_demo_data and not cls._seeded:
            for item in sample_items():
                catalogue.add_item(item)
            cls._seeded = True
            logger.debug("Catalogue seeded with %d demo items", catalogue.get_item_count())
        return catalogue

    @classmethod
    def reset(cls) -> None:
        Catalogue.reset_instance()
        cls._seeded = False


def get_catalogue() -> Catalogue:
    return CatalogueManager.get_catalogue()


# --- Typer CLI Application ---
app = typer.Typer(help=APP_NAME)

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Global CLI options (output mode, logging)."""
    level = logging.DEBUG if verbose or settings.debug else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    if output and not set_output_mode(output):
        print(f"Unknown output mode: {output}. Use plain, json or rich.")
        raise typer.Exit(code=1)

@app.command("list")
def cli_list():
    """List every item in the catalogue."""
    print_items_result(get_catalogue().get_all_items())

@app.command("find")
def cli_find(title: str = typer.Argument(..., help="Exact title, case-insensitive")):
    """Find an item by title and show its details."""
    item = get_catalogue().find_item_by_title(title)
    if item is None:
        print(f"Item titled {title} not found.")
        return
    print("Item Found")
    item.display(console)

@app.command("by-type")
def cli_by_type(item_type: str = typer.Argument(..., help="Book or AudioBook")):
    """List the items of one type, in catalogue order."""
    items = get_catalogue().find_items_by_type(item_type)
    if not items:
        print(f"No items of type {item_type}.")
        return
    print_items_result(items)

@app.command("stats")
def cli_stats():
    """Show catalogue statistics."""
    print_stats_result(get_catalogue().get_statistics())

@app.command("remove")
def cli_remove(item_id: int = typer.Argument(..., help="Item ID")):
    """Remove the first item with the given ID."""
    if get_catalogue().remove_item(item_id):
        print(f"Item with ID {item_id} has been removed.")
    else:
        print(f"Item with ID {item_id} not found.")

@app.command("add-book")
def cli_add_book(item_id: int, title: str, author: str, isbn: str):
    """Add a book to the catalogue."""
    if not TextValidator.validate_title(title):
        print("Error: Title cannot be empty")
        raise typer.Exit(code=1)
    catalogue = get_catalogue()
    book = Book(item_id, title, author, isbn)
    catalogue.add_item(book)
    print(f"Successfully added: {book.get_basic_info()}")
    print(f"Total items: {catalogue.get_item_count()}")

@app.command("add-audiobook")
def cli_add_audiobook(item_id: int, title: str, narrator: str, length: int = typer.Argument(..., help="Length in minutes")):
    """Add an audio book to the catalogue."""
    if not TextValidator.validate_title(title):
        print("Error: Title cannot be empty")
        raise typer.Exit(code=1)
    audio_book = AudioBook(item_id, title, narrator, length)
    try:
        audio_book.set_narrator(narrator)
        audio_book.set_length(length)
    except ItemValidationError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=1)
    catalogue = get_catalogue()
    catalogue.add_item(audio_book)
    print(f"Successfully added: {audio_book.get_basic_info()}")
    print(f"Total items: {catalogue.get_item_count()}")

@app.command("add-json")
def cli_add_json(payload: str = typer.Argument(..., help="JSON object, e.g. one entry of `list -o json`")):
    """Add an item from its JSON form."""
    try:
        data = json.loads(payload)
        if not isinstance(data, dict):
            raise ValueError("Payload must be a JSON object")
        item = item_from_dict(data)
    except ValueError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=1)
    catalogue = get_catalogue()
    catalogue.add_item(item)
    print(f"Successfully added: {item.get_basic_info()}")
    print(f"Total items: {catalogue.get_item_count()}")

@app.command("show")
def cli_show():
    """Display every item with its full details."""
    items = get_catalogue().get_all_items()
    if not items:
        print("The library catalogue is empty.")
        return
    print("=== LIBRARY CATALOGUE ===")
    print(f"Total items: {len(items)}")
    for index, item in enumerate(items, 1):
        print(f"Item {index}:")
        item.display(console)

@app.command("types")
def cli_types():
    """List the item types the catalogue understands."""
    for item_type in ItemType:
        print(item_type.value)

@app.command("version")
def cli_version():
    """Show the application name and version."""
    print(f"{settings.app_name} {settings.app_version}")


if __name__ == "__main__":
    app()
