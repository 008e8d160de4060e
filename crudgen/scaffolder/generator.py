"""Main generation orchestrator.

Takes a ``CrudConfig`` snapshot, validates it, builds the fragment bundle and
view markup, and hands the result to the component writer: once for the
parent list component and, when any of add/edit/delete is enabled, once more
for the ``<Name>Child`` form component.
"""

from __future__ import annotations

from typing import Optional

from crudgen.config import GeneratorConfig
from crudgen.introspection import check_model_path
from crudgen.models import CrudConfig, GenerationProps, GenerationResult

from . import features
from .assembler import Assembler
from .fragments import FragmentBuilder
from .templates import TemplateRenderer
from .validation import ValidationPipeline
from .views import ViewBuilder, child_component_name
from .writer import EXIT_OK, ComponentWriter, FileComponentWriter


class CrudGenerator:
    """Validates a configuration and emits the component pair.

    Collaborators are injected so that callers can swap the writer (e.g. the
    in-memory writer for dry runs) or the template directory.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        writer: Optional[ComponentWriter] = None,
        renderer: Optional[TemplateRenderer] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.renderer = renderer or TemplateRenderer()
        self.assembler = Assembler(self.renderer, namespace=self.config.namespace)
        self.fragments = FragmentBuilder()
        self.views = ViewBuilder(self.renderer)
        self.validator = ValidationPipeline()
        self.writer = writer or FileComponentWriter(self.config, self.assembler)

    # -- Public API --------------------------------------------------------

    def generate(self, crud: CrudConfig) -> GenerationResult:
        """Validate *crud* and emit the parent (and child) components.

        Nothing is written when the model path or the configuration is
        rejected.

        Returns:
            A ``GenerationResult`` carrying the writer's exit code.  The
            artifact is attached only when every writer call returned 0.

        Raises:
            ModelResolutionError: If the model path is empty or malformed.
            ConfigurationError: If the validation pipeline rejects *crud*.
        """
        snapshot = crud.model_copy(deep=True)
        snapshot.model_path = check_model_path(snapshot.model_path)
        self.validator.run(snapshot)

        props = self.build_props(snapshot)
        name = snapshot.settings.component_name

        exit_code = self.writer.generate(name, props, False)
        if exit_code == EXIT_OK and features.is_child_enabled(snapshot):
            exit_code = self.writer.generate(child_component_name(name), props, True)

        if exit_code != EXIT_OK:
            return GenerationResult(exit_code=exit_code)
        return GenerationResult(
            exit_code=EXIT_OK,
            artifact=self.assembler.assemble(props, name),
        )

    def build_props(self, crud: CrudConfig) -> GenerationProps:
        """Run the fragment generators and view builder for a valid config."""
        return GenerationProps(
            model_path=crud.model_path,
            model=crud.model_name,
            model_props=crud.model_props,
            fields=crud.fields,
            component_props=crud.settings.component_props,
            primary_key_props=crud.settings.primary_key_props,
            advanced_settings=crud.settings.advanced_settings,
            html=self.views.build(crud),
            code=self.fragments.build(crud),
        )
