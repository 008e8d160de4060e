"""Assembly of the final component payloads.

Takes the fragment bundle and view markup carried by ``GenerationProps`` and
lays them out into the parent (list) and child (form) Livewire classes using
the Jinja2 class stubs.
"""

from __future__ import annotations

from typing import Any

from crudgen.models import GeneratedArtifact, GenerationProps

from .features import any_action_enabled
from .templates import TemplateRenderer
from .views import child_component_name, component_class_name

DEFAULT_NAMESPACE = "App\\Http\\Livewire"

USAGE_DIRECTIVE = "@livewire"


def usage_snippet(component_name: str) -> str:
    """The embed directive a page uses to mount the generated component."""
    return f"{USAGE_DIRECTIVE}('{component_name}')"


class Assembler:
    """Combines fragments, views and metadata into the two code payloads."""

    def __init__(
        self,
        renderer: TemplateRenderer,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        self.renderer = renderer
        self.namespace = namespace

    def render_class(self, props: GenerationProps, name: str, child: bool) -> str:
        """Render the PHP class for component *name* (the parent, or the child form).

        The class name is the studly form of *name*, so ``user-crud`` renders
        ``class UserCrud``.
        """
        template = "component_child.php.j2" if child else "component.php.j2"
        return self.renderer.render(template, self._context(props, component_class_name(name)))

    @staticmethod
    def render_view(props: GenerationProps, child: bool) -> str:
        return props.html.child if child else props.html.parent

    def assemble(self, props: GenerationProps, component_name: str) -> GeneratedArtifact:
        """Build the immutable artifact for *component_name*.

        The child payloads are present only when add, edit or delete is
        enabled.
        """
        child_code = None
        child_view = None
        if any_action_enabled(props.component_props):
            child_code = self.render_class(
                props, child_component_name(component_name), child=True
            )
            child_view = self.render_view(props, child=True)
        return GeneratedArtifact(
            parent_code=self.render_class(props, component_name, child=False),
            parent_view=self.render_view(props, child=False),
            child_code=child_code,
            child_view=child_view,
            usage_snippet=usage_snippet(component_name),
        )

    def _context(self, props: GenerationProps, name: str) -> dict[str, Any]:
        return {
            "namespace": self.namespace,
            "class_name": name,
            "model_path": props.model_path,
            "model": props.model,
            "code": props.code,
        }
