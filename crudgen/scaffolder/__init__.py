"""crudgen scaffolder -- turns a field definition into Livewire components.

This module takes a ``CrudConfig`` (fields, model metadata and component
settings), validates it, renders the parent list component and, when add,
edit or delete is enabled, the child form component.

Quick usage::

    from crudgen.models import CrudConfig, FieldSpec
    from crudgen.scaffolder import CrudGenerator

    config = CrudConfig(
        model_path="App\\\\Models\\\\User",
        fields=[FieldSpec(column="name", sortable=True, searchable=True)],
    )
    config.settings.component_name = "UserCrud"
    result = CrudGenerator().generate(config)
    print(result.artifact.usage_snippet)
"""

from crudgen.scaffolder.assembler import Assembler, usage_snippet
from crudgen.scaffolder.fragments import FragmentBuilder, build_component_code
from crudgen.scaffolder.generator import CrudGenerator
from crudgen.scaffolder.templates import TemplateRenderer
from crudgen.scaffolder.validation import (
    ConfigurationError,
    ValidationOutcome,
    ValidationPipeline,
    ValidationStage,
)
from crudgen.scaffolder.writer import (
    ComponentWriter,
    FileComponentWriter,
    MemoryComponentWriter,
)

__all__ = [
    "Assembler",
    "ComponentWriter",
    "ConfigurationError",
    "CrudGenerator",
    "FileComponentWriter",
    "FragmentBuilder",
    "MemoryComponentWriter",
    "TemplateRenderer",
    "ValidationOutcome",
    "ValidationPipeline",
    "ValidationStage",
    "build_component_code",
    "usage_snippet",
]
