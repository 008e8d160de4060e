"""Tests for the Jinja2 renderer and the Blade view builder."""

from __future__ import annotations

import pytest

from crudgen.models import FieldAttributes, FieldSpec, InputType
from crudgen.scaffolder.templates import TemplateRenderer
from crudgen.scaffolder.views import (
    PER_PAGE_OPTIONS,
    ViewBuilder,
    child_component_name,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def views(renderer) -> ViewBuilder:
    return ViewBuilder(renderer)


class TestTemplateRenderer:
    def test_lists_bundled_stubs(self, renderer):
        assert renderer.list_templates() == [
            "component.php.j2",
            "component_child.php.j2",
            "view.blade.php.j2",
            "view_child.blade.php.j2",
        ]

    def test_custom_template_dir(self, tmp_path):
        (tmp_path / "hello.j2").write_text("{{ name | kebab_case }} {{ '$x' | blade_echo }}")
        renderer = TemplateRenderer(tmp_path)
        assert renderer.render("hello.j2", {"name": "UserCrud"}) == "user-crud {{ $x }}"

    def test_missing_dir_lists_nothing(self, tmp_path):
        assert TemplateRenderer(tmp_path / "missing").list_templates() == []

    def test_undefined_variable_is_an_error(self, tmp_path):
        from jinja2 import UndefinedError

        (tmp_path / "t.j2").write_text("{{ missing }}")
        with pytest.raises(UndefinedError):
            TemplateRenderer(tmp_path).render("t.j2", {})


class TestChildName:
    def test_suffix(self):
        assert child_component_name("UserCrud") == "UserCrudChild"


class TestParentView:
    def test_title_falls_back_to_table_name(self, views, crud_config):
        assert '<div class="mt-8 text-2xl">Users</div>' in views.build(crud_config).parent

    def test_configured_title(self, views, crud_config):
        crud_config.settings.advanced_settings.title = "Members"
        assert "Members" in views.build(crud_config).parent

    def test_listing_columns(self, views, crud_config):
        html = views.build(crud_config).parent
        assert "{{ $result->id }}" in html
        assert "{{ $result->name }}" in html
        assert "{{ $result->email }}" in html
        assert "$result->is_active" not in html
        assert "$result->bio" not in html

    def test_sortable_headers(self, views, crud_config):
        html = views.build(crud_config).parent
        assert "sortBy('name')" in html
        assert "sortBy('email')" in html
        assert "sortBy('id')" in html

    def test_no_sort_links_when_sorting_disabled(self, views, crud_config):
        for f in crud_config.fields:
            f.sortable = False
        assert "sortBy(" not in views.build(crud_config).parent

    def test_primary_key_hidden(self, views, crud_config):
        crud_config.settings.primary_key_props.in_list = False
        html = views.build(crud_config).parent
        assert '<td class="px-4 py-2">{{ $result->id }}</td>' not in html
        assert "showEditForm', {{ $result->id }}" in html

    def test_search_and_page_size(self, views, crud_config):
        html = views.build(crud_config).parent
        assert 'wire:model.debounce.500ms="q"' in html
        for size in PER_PAGE_OPTIONS:
            assert f'<option value="{size}">' in html

    def test_custom_page_size_offered(self, views, crud_config):
        crud_config.settings.advanced_settings.table_settings.records_per_page = 20
        assert '<option value="20">' in views.build(crud_config).parent

    def test_child_embedded(self, views, crud_config):
        html = views.build(crud_config).parent
        assert "@livewire('user-crud-child')" in html
        assert "$emitTo('user-crud-child', 'showCreateForm');" in html
        assert "Create New" in html

    def test_minimal_view(self, views, minimal_config):
        minimal_config.settings.advanced_settings.table_settings.show_pagination_dropdown = False
        html = views.build(minimal_config).parent
        assert "@livewire" not in html
        assert "Actions" not in html
        assert 'wire:model="perPage"' not in html
        assert 'wire:model.debounce.500ms="q"' not in html
        assert "{{ $results->links() }}" in html


class TestChildView:
    def test_empty_without_child(self, views, minimal_config):
        assert views.build(minimal_config).child == ""

    def test_modals(self, views, crud_config):
        html = views.build(crud_config).child
        assert "@if($confirmingItemDeletion)" in html
        assert "@if($confirmingItemCreation)" in html
        assert "@if($confirmingItemEdit)" in html

    def test_only_enabled_modals(self, views, minimal_config):
        minimal_config.settings.component_props.create_edit_modal = True
        html = views.build(minimal_config).child
        assert "@if($confirmingItemEdit)" in html
        assert "confirmingItemCreation" not in html
        assert "confirmingItemDeletion" not in html

    def test_widgets_per_form(self, views, crud_config):
        html = views.build(crud_config).child
        assert 'type="checkbox" id="add-is_active"' in html
        assert 'id="add-bio"' not in html
        assert '<textarea id="edit-bio"' in html
        assert 'wire:model.defer="item.name"' in html

    def test_labels_and_errors(self, views, crud_config):
        html = views.build(crud_config).child
        assert '<label for="add-email">E-mail Address</label>' in html
        assert "@error('item.email')" in html
        assert "{{ $message }}" in html

    def test_select_options(self, views, crud_config):
        crud_config.fields.append(
            FieldSpec(
                column="role",
                attributes=FieldAttributes(
                    type=InputType.SELECT, options='{"admin": "Admin", "user": "User"}'
                ),
            )
        )
        html = views.build(crud_config).child
        assert '<select id="add-role"' in html
        assert '<option value="admin">Admin</option>' in html
        assert html.index('value="admin"') < html.index('value="user"')
