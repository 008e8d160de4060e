"""Component writers: the hand-off point for generated payloads.

A writer receives the component name, the generation props and whether the
child (form) component is requested, and answers with a process-style exit
code.  ``FileComponentWriter`` writes the PHP class and Blade view below the
configured application root; ``MemoryComponentWriter`` keeps them in memory
for dry runs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from crudgen.config import GeneratorConfig
from crudgen.models import GenerationProps
from crudgen.utils import print_error

from .assembler import Assembler
from .views import component_alias, component_class_name

EXIT_OK = 0
EXIT_FAILURE = 1


def component_paths(config: GeneratorConfig, name: str) -> tuple[Path, Path]:
    """Return the ``(class_file, view_file)`` targets for component *name*."""
    return (
        config.class_path / f"{component_class_name(name)}.php",
        config.view_path / f"{component_alias(name)}.blade.php",
    )


class ComponentWriter(Protocol):
    """Anything that can emit one component and report an exit code."""

    def generate(self, name: str, props: GenerationProps, child: bool) -> int:
        ...


class FileComponentWriter:
    """Writes ``<class_dir>/<Name>.php`` and ``<view_dir>/<name>.blade.php``.

    ``written`` accumulates every file this writer has created, in order,
    across all ``generate`` calls; use a new writer per batch to get a fresh
    listing.
    """

    def __init__(self, config: GeneratorConfig, assembler: Assembler) -> None:
        self.config = config
        self.assembler = assembler
        self.written: list[Path] = []

    def generate(self, name: str, props: GenerationProps, child: bool) -> int:
        class_file, view_file = component_paths(self.config, name)
        if not self.config.overwrite:
            for target in (class_file, view_file):
                if target.exists():
                    print_error(f"{target} already exists.")
                    return EXIT_FAILURE

        code = self.assembler.render_class(props, name, child)
        view = self.assembler.render_view(props, child)
        try:
            _write_file(class_file, code)
            _write_file(view_file, view)
        except OSError as exc:
            print_error(f"Could not write component {name}: {exc}")
            return EXIT_FAILURE

        self.written.extend([class_file, view_file])
        return EXIT_OK


class MemoryComponentWriter:
    """Collects rendered files in ``files`` instead of touching the disk."""

    def __init__(self, config: GeneratorConfig, assembler: Assembler) -> None:
        self.config = config
        self.assembler = assembler
        self.files: dict[Path, str] = {}

    def generate(self, name: str, props: GenerationProps, child: bool) -> int:
        class_file, view_file = component_paths(self.config, name)
        self.files[class_file] = self.assembler.render_class(props, name, child)
        self.files[view_file] = self.assembler.render_view(props, child)
        return EXIT_OK


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
