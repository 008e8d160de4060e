"""Command-line entry point.

Usage::

    python -m crudgen users.yaml --output ./my-app
    python -m crudgen users.yaml --database-url sqlite:///database.sqlite
    python -m crudgen users.yaml --dry-run
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import yaml
from pydantic import ValidationError
from rich.markup import escape
from rich.syntax import Syntax

from crudgen.config import GeneratorConfig
from crudgen.errors import CrudGenError
from crudgen.introspection import SchemaIntrospector
from crudgen.models import CrudConfig
from crudgen.scaffolder import CrudGenerator, MemoryComponentWriter
from crudgen.utils import (
    console,
    load_definition,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

EXIT_USAGE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crudgen",
        description="Generate a Livewire CRUD component pair from a field definition",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m crudgen users.yaml\n"
            "  python -m crudgen users.yaml -o ./my-app --overwrite\n"
            "  python -m crudgen users.yaml --database-url sqlite:///db.sqlite\n"
        ),
    )
    parser.add_argument(
        "definition",
        help="Path to the YAML or JSON CRUD definition",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Application root to write into (default: ./output)",
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Override the component name from the definition",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL used to read the model's table columns",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace existing component files",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated code instead of writing files",
    )
    return parser


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    config = GeneratorConfig.from_env()
    if args.output:
        config.output_dir = Path(args.output)
    if args.database_url:
        config.database_url = args.database_url
    if args.overwrite:
        config.overwrite = True
    return config


def _introspect(crud: CrudConfig, database_url: str) -> None:
    """Fill ``crud.model_props`` from the database when it was not given."""
    introspector = SchemaIntrospector(database_url)
    crud.model_props = introspector.resolve_model(
        crud.model_path, crud.model_props.table_name or None
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for ``python -m crudgen``; returns the exit code."""
    args = build_parser().parse_args(argv)

    definition_path = Path(args.definition)
    if not definition_path.exists():
        print_error(f"Error: definition file not found: {definition_path}")
        return EXIT_USAGE

    try:
        crud = CrudConfig.model_validate(load_definition(definition_path))
    except (ValueError, ValidationError, yaml.YAMLError) as exc:
        print_error(f"Error: invalid definition {definition_path}")
        console.print(str(exc), markup=False)
        return EXIT_USAGE

    if args.name:
        crud.settings.component_name = args.name

    config = _build_config(args)

    try:
        if not crud.model_props.columns:
            if config.database_url:
                _introspect(crud, config.database_url)
            else:
                print_warning("No database URL given, skipping table introspection.")
        generator = CrudGenerator(config)
        if args.dry_run:
            generator.writer = MemoryComponentWriter(config, generator.assembler)
        result = generator.generate(crud)
    except CrudGenError as exc:
        print_error(escape(f"{exc.field}: {exc.message}"))
        return EXIT_USAGE

    if not result.success or result.artifact is None:
        print_error(f"Generation failed with exit code {result.exit_code}.")
        return result.exit_code

    artifact = result.artifact
    if args.dry_run:
        for path, content in generator.writer.files.items():
            console.rule(str(path))
            console.print(Syntax(content, "php"))

    print_summary_table(
        {
            "Component": crud.settings.component_name,
            "Model": crud.model_name,
            "Child component": "yes" if artifact.child_code is not None else "no",
            "Output": "(dry run)" if args.dry_run else str(config.output_dir),
        },
        title="crudgen",
    )
    print_success("Component generated. Include it in your page with:")
    console.print(artifact.usage_snippet, markup=False, highlight=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
