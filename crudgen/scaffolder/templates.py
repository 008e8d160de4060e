"""Jinja2 rendering of whole-file stubs.

Provides the TemplateRenderer class which loads the component class and Blade
view stubs from the ``crudgen/scaffolder/templates/`` directory.  Fragments
inside the class stubs come from the ``##TOKEN##`` library in
:mod:`crudgen.scaffolder.library`; Jinja2 only lays out the files around them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from crudgen.utils import kebab_case


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the Jinja2 stubs of the generated component files.

    Stubs are ``.j2`` files under a configurable template directory, rendered
    with a context dictionary built by the assembler or view builder.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        # Register custom filters
        self.env.filters["kebab_case"] = kebab_case
        self.env.filters["blade_echo"] = _blade_echo_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single stub with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"component.php.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` stub paths."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            str(p.relative_to(self.template_dir))
            for p in self.template_dir.rglob("*.j2")
        )


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _blade_echo_filter(value: str) -> str:
    """Wrap a PHP expression in a Blade echo: ``$x`` -> ``{{ $x }}``."""
    return "{{ " + value + " }}"
