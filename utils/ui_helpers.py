import os
import json
from typing import List, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> bool:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
        return True
    return False

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_items_result(items: List[Any]) -> None:
    """Print catalogue items in the current output mode.
    - plain: '{id} - [{type}] {title}' lines, or 'The library catalogue is empty.'
    - json: JSON array of each item's to_dict()
    - rich: Rich table
    """
    mode = get_output_mode()

    if not items:
        print("The library catalogue is empty.")
        return

    if mode == "json":
        print(json.dumps([item.to_dict() for item in items], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Catalogue", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Type", style="cyan")
        table.add_column("Title", style="white")
        table.add_column("Details", style="white")
        for item in items:
            table.add_row(str(item.get_id()), item.get_item_type(), item.get_title(), item.get_basic_info())
        _console.print(table)
    else:
        for item in items:
            print(f"{item.get_id()} - [{item.get_item_type()}] {item.get_title()}")

def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print catalogue statistics in the current output mode.
    - plain: total line, then one indented line per type
    - json: the statistics object
    - rich: Panel with the same figures
    """
    mode = get_output_mode()

    total = stats.get("total", 0)
    by_type = stats.get("by_type", {})

    if mode == "json":
        print(json.dumps({"total": total, "by_type": by_type}, ensure_ascii=False))
    elif mode == "rich":
        lines = [f"[bold]Total Items:[/] {total}"]
        lines.extend(f"[bold]{item_type}:[/] {count}" for item_type, count in by_type.items())
        _console.print(Panel.fit("\n".join(lines), title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Items: {total}")
        for item_type, count in by_type.items():
            print(f"  {item_type}: {count}")
