"""Tests for the file and in-memory component writers."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from crudgen.scaffolder.assembler import Assembler
from crudgen.scaffolder.generator import CrudGenerator
from crudgen.scaffolder.templates import TemplateRenderer
from crudgen.scaffolder.writer import (
    EXIT_FAILURE,
    EXIT_OK,
    FileComponentWriter,
    MemoryComponentWriter,
    component_paths,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def assembler() -> Assembler:
    return Assembler(TemplateRenderer())


@pytest.fixture
def props(crud_config):
    return CrudGenerator(writer=MagicMock()).build_props(crud_config)


class TestComponentPaths:
    def test_layout(self, generator_config):
        class_file, view_file = component_paths(generator_config, "UserCrudChild")
        assert class_file == generator_config.output_dir / "app/Http/Livewire/UserCrudChild.php"
        assert view_file == (
            generator_config.output_dir / "resources/views/livewire/user-crud-child.blade.php"
        )


class TestFileComponentWriter:
    def test_writes_class_and_view(self, generator_config, assembler, props):
        writer = FileComponentWriter(generator_config, assembler)
        assert writer.generate("UserCrud", props, False) == EXIT_OK

        class_file, view_file = component_paths(generator_config, "UserCrud")
        assert "class UserCrud extends Component" in class_file.read_text(encoding="utf-8")
        assert view_file.read_text(encoding="utf-8") == props.html.parent
        assert writer.written == [class_file, view_file]

    def test_child_call_writes_child_files(self, generator_config, assembler, props):
        writer = FileComponentWriter(generator_config, assembler)
        assert writer.generate("UserCrudChild", props, True) == EXIT_OK

        class_file, view_file = component_paths(generator_config, "UserCrudChild")
        assert "class UserCrudChild extends Component" in class_file.read_text(encoding="utf-8")
        assert view_file.read_text(encoding="utf-8") == props.html.child

    def test_refuses_to_overwrite(self, generator_config, assembler, props):
        class_file, _ = component_paths(generator_config, "UserCrud")
        class_file.parent.mkdir(parents=True)
        class_file.write_text("existing", encoding="utf-8")

        writer = FileComponentWriter(generator_config, assembler)
        assert writer.generate("UserCrud", props, False) == EXIT_FAILURE
        assert class_file.read_text(encoding="utf-8") == "existing"
        assert writer.written == []

    def test_overwrite_allowed(self, generator_config, assembler, props):
        generator_config.overwrite = True
        class_file, _ = component_paths(generator_config, "UserCrud")
        class_file.parent.mkdir(parents=True)
        class_file.write_text("existing", encoding="utf-8")

        writer = FileComponentWriter(generator_config, assembler)
        assert writer.generate("UserCrud", props, False) == EXIT_OK
        assert "class UserCrud" in class_file.read_text(encoding="utf-8")

    def test_os_error_reported_as_failure(self, generator_config, assembler, props):
        writer = FileComponentWriter(generator_config, assembler)
        with patch("crudgen.scaffolder.writer._write_file", side_effect=OSError("disk full")):
            assert writer.generate("UserCrud", props, False) == EXIT_FAILURE
        assert writer.written == []


class TestMemoryComponentWriter:
    def test_collects_files(self, generator_config, assembler, props):
        writer = MemoryComponentWriter(generator_config, assembler)
        assert writer.generate("UserCrud", props, False) == EXIT_OK
        assert writer.generate("UserCrudChild", props, True) == EXIT_OK

        assert len(writer.files) == 4
        _, child_view = component_paths(generator_config, "UserCrudChild")
        assert writer.files[child_view] == props.html.child
        assert not generator_config.output_dir.exists()


class TestComponentNames:
    def test_dashed_name_paths(self, generator_config):
        class_file, view_file = component_paths(generator_config, "user-crud")
        assert class_file.name == "UserCrud.php"
        assert view_file.name == "user-crud.blade.php"

    def test_dashed_name_class(self, generator_config, assembler, props):
        writer = FileComponentWriter(generator_config, assembler)
        assert writer.generate("user-crud", props, False) == EXIT_OK
        code = (generator_config.class_path / "UserCrud.php").read_text(encoding="utf-8")
        assert "class UserCrud extends Component" in code


class TestWrittenListing:
    def test_accumulates_across_calls(self, generator_config, assembler, props):
        generator_config.overwrite = True
        writer = FileComponentWriter(generator_config, assembler)
        writer.generate("UserCrud", props, False)
        writer.generate("UserCrud", props, False)

        class_file, view_file = component_paths(generator_config, "UserCrud")
        assert writer.written == [class_file, view_file, class_file, view_file]
