"""Shared utility functions for crudgen.

Provides Rich-based console reporting, YAML/JSON definition loading, and the
naming helpers used when turning column and class names into labels,
Livewire aliases and table names.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

console = Console()

INDENT = "    "


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def new_lines(count: int = 1, indent: int = 0) -> str:
    """Return *count* newlines followed by *indent* levels of indentation.

    This is the line-separator policy shared by every fragment generator.

    Examples::

        new_lines(1, 2) -> "\\n        "
        new_lines(2)    -> "\\n\\n"
    """
    return "\n" * count + INDENT * indent


def title_case(value: str) -> str:
    """Turn a column or table name into a display title.

    Examples::

        title_case("first_name") -> "First Name"
        title_case("user-roles") -> "User Roles"
    """
    words = re.split(r"[-_\s]+", value.strip())
    return " ".join(word.capitalize() for word in words if word)


def class_basename(path: str) -> str:
    """Return the last segment of a PHP (``\\``) or dotted class path."""
    parts = [p for p in re.split(r"[\\./]+", path.strip()) if p]
    return parts[-1] if parts else ""


def snake_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s]+", "_", s2).lower()


def studly_case(value: str) -> str:
    """Turn a component name into a PHP class name.

    Examples::

        studly_case("user-crud") -> "UserCrud"
        studly_case("user_crud") -> "UserCrud"
        studly_case("UserCrud")  -> "UserCrud"
    """
    words = re.split(r"[-_\s]+", value.strip())
    return "".join(word[:1].upper() + word[1:] for word in words if word)


def kebab_case(value: str) -> str:
    """Convert ``UserCrudChild`` to ``user-crud-child`` (the Livewire alias)."""
    return snake_case(value).replace("_", "-")


def pluralize(word: str) -> str:
    """Naive English plural, good enough for table-name conventions.

    Examples::

        pluralize("user")     -> "users"
        pluralize("category") -> "categories"
        pluralize("address")  -> "addresses"
    """
    if not word:
        return word
    if word.endswith("y") and len(word) > 1 and word[-2] not in "aeiou":
        return word[:-1] + "ies"
    if word.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    return word + "s"


def table_name_for(model_path: str) -> str:
    """Derive the conventional table name for a model class path.

    ``App\\Models\\BlogPost`` -> ``blog_posts``
    """
    snake = snake_case(class_basename(model_path))
    head, _, last = snake.rpartition("_")
    return f"{head}_{pluralize(last)}" if head else pluralize(last)


# ---------------------------------------------------------------------------
# Definition loading
# ---------------------------------------------------------------------------


def load_definition(path: str | Path) -> dict[str, Any]:
    """Load a CRUD definition from a YAML or JSON file.

    Args:
        path: Path to a ``.yaml``/``.yml`` or ``.json`` file.

    Returns:
        Parsed dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a mapping.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    if file_path.suffix.lower() == ".json":
        data = json.loads(raw)
    else:
        data = yaml.safe_load(raw)
    if not isinstance(data, dict):
        raise ValueError(f"{file_path} must contain a mapping at the top level")
    return data


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
