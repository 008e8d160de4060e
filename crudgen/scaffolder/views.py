"""Blade view markup for the parent and child components.

Builds the rendering context from a configuration and the feature flags,
then renders ``view.blade.php.j2`` (listing) and ``view_child.blade.php.j2``
(modals and forms) through the shared :class:`TemplateRenderer`.
"""

from __future__ import annotations

from typing import Any

from crudgen.models import CrudConfig, FieldSpec, InputType, ViewHtml
from crudgen.utils import kebab_case, studly_case, title_case

from . import features
from .templates import TemplateRenderer

PER_PAGE_OPTIONS = (10, 15, 25, 50, 100)

CHILD_SUFFIX = "Child"


def component_class_name(component_name: str) -> str:
    """PHP class of a component: ``user-crud`` -> ``UserCrud``."""
    return studly_case(component_name)


def child_component_name(component_name: str) -> str:
    """``UserCrud`` or ``user-crud`` -> ``UserCrudChild``."""
    return component_class_name(component_name) + CHILD_SUFFIX


def component_alias(component_name: str) -> str:
    """Livewire alias used by views and events: ``UserCrud`` -> ``user-crud``."""
    return kebab_case(component_class_name(component_name))


class ViewBuilder:
    """Renders the Blade views of a component pair."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def build(self, config: CrudConfig) -> ViewHtml:
        """Render both views; the child view is empty when no child exists."""
        parent = self.renderer.render("view.blade.php.j2", self._parent_context(config))
        child = ""
        if features.is_child_enabled(config):
            child = self.renderer.render(
                "view_child.blade.php.j2", self._child_context(config)
            )
        return ViewHtml(parent=parent, child=child)

    # -- Context building --------------------------------------------------

    def _common_context(self, config: CrudConfig) -> dict[str, Any]:
        return {
            "add": features.is_add_enabled(config),
            "edit": features.is_edit_enabled(config),
            "delete": features.is_delete_enabled(config),
            "text": config.settings.advanced_settings.text,
        }

    def _parent_context(self, config: CrudConfig) -> dict[str, Any]:
        per_page = config.settings.advanced_settings.table_settings.records_per_page
        return {
            **self._common_context(config),
            "title": config.title,
            "searching": features.is_searching_enabled(config),
            "pagination_dropdown": features.is_pagination_dropdown_enabled(config),
            "per_page_options": sorted({per_page, *PER_PAGE_OPTIONS}),
            "columns": self._list_columns(config),
            "primary_key": config.model_props.primary_key,
            "child": features.is_child_enabled(config),
            "child_class": child_component_name(config.settings.component_name),
        }

    def _child_context(self, config: CrudConfig) -> dict[str, Any]:
        return {
            **self._common_context(config),
            "add_fields": [_form_field(f) for f in features.add_fields(config)],
            "edit_fields": [_form_field(f) for f in features.edit_fields(config)],
        }

    def _list_columns(self, config: CrudConfig) -> list[dict[str, Any]]:
        sorting = features.is_sorting_enabled(config)
        columns: list[dict[str, Any]] = []
        pk_props = config.settings.primary_key_props
        if pk_props.in_list:
            pk = config.model_props.primary_key
            columns.append({
                "name": pk,
                "label": pk_props.label or title_case(pk),
                "sortable": sorting and pk_props.sortable,
            })
        for f in features.list_fields(config):
            columns.append({
                "name": f.column,
                "label": f.display_label,
                "sortable": sorting and f.sortable,
            })
        return columns


def _form_field(spec: FieldSpec) -> dict[str, Any]:
    options = spec.attributes.option_pairs() if spec.attributes.type == InputType.SELECT else {}
    return {
        "column": spec.column,
        "label": spec.display_label,
        "type": spec.attributes.type.value,
        "options": options,
    }
