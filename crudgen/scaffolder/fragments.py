"""Fragment generators for the parent and child Livewire components.

One method per concern.  Each returns empty strings when its feature is off
and otherwise renders the matching templates from the fragment library.  The
library is injected, so tests and alternative targets can swap the catalog
without touching the generation logic.
"""

from __future__ import annotations

from typing import Mapping

from crudgen.models import (
    Action,
    ActionFragment,
    ComponentCode,
    CrudConfig,
    InputType,
    PaginationDropdownFragment,
    PaginationFragment,
    SearchFragment,
    SortFragment,
)
from crudgen.utils import new_lines

from . import features
from .library import LIBRARY, FragmentTemplate, render_fragment
from .views import component_alias

# Listener names the child component registers for each enabled action.
DELETE_LISTENER = "showDeleteForm"
ADD_LISTENER = "showCreateForm"
EDIT_LISTENER = "showEditForm"


class FragmentBuilder:
    """Builds every ``ComponentCode`` fragment for one configuration."""

    def __init__(self, library: Mapping[str, FragmentTemplate] | None = None) -> None:
        self.library = dict(LIBRARY if library is None else library)

    def build(self, config: CrudConfig) -> ComponentCode:
        """Run all fragment generators and bundle their output."""
        return ComponentCode(
            sort=self.sort(config),
            search=self.search(config),
            pagination_dropdown=self.pagination_dropdown(config),
            pagination=self.pagination(config),
            child_delete=self.delete(config),
            child_add=self.add(config),
            child_edit=self.edit(config),
            child_listeners=self.child_listeners(config),
            child_item=self.child_item(config),
            child_rules=self.child_rules(config),
            child_validation_attributes=self.child_validation_attributes(config),
        )

    def _render(self, name: str, **values: str) -> str:
        return render_fragment(self.library[name], **values)

    # -- Parent component --------------------------------------------------

    def sort(self, config: CrudConfig) -> SortFragment:
        if not features.is_sorting_enabled(config):
            return SortFragment()
        return SortFragment(
            vars=self._render(
                "sorting_vars", SORT_COLUMN=features.default_sortable_column(config)
            ),
            query=self._render("sorting_query"),
            method=self._render("sorting_method"),
        )

    def search(self, config: CrudConfig) -> SearchFragment:
        if not features.is_searching_enabled(config):
            return SearchFragment()
        return SearchFragment(
            vars=self._render("searching_vars"),
            query=self._search_query(config),
            method=self._render("searching_method"),
        )

    def _search_query(self, config: CrudConfig) -> str:
        # The first searchable field opens the where-group; later ones chain orWhere.
        chain = ""
        for i, f in enumerate(features.searchable_fields(config)):
            first = "$query->where" if i == 0 else new_lines(1, 5) + "->orWhere"
            chain += self._render("searching_query_where", FIRST=first, COLUMN=f.column)
        return self._render("searching_query", SEARCH_QUERY=chain)

    def pagination(self, config: CrudConfig) -> PaginationFragment:
        per_page = config.settings.advanced_settings.table_settings.records_per_page
        return PaginationFragment(vars=self._render("pagination_vars", PER_PAGE=str(per_page)))

    def pagination_dropdown(self, config: CrudConfig) -> PaginationDropdownFragment:
        if not features.is_pagination_dropdown_enabled(config):
            return PaginationDropdownFragment()
        return PaginationDropdownFragment(method=self._render("pagination_dropdown_method"))

    # -- Child actions -----------------------------------------------------

    def delete(self, config: CrudConfig) -> ActionFragment:
        if not features.is_delete_enabled(config):
            return ActionFragment()
        return ActionFragment(
            vars=self._render("delete_vars"),
            method=self._render(
                "delete_method",
                MODEL=config.model_name,
                COMPONENT_NAME=component_alias(config.settings.component_name),
                FLASH_MESSAGE=self.flash_code(config, Action.DELETE),
            ),
        )

    def add(self, config: CrudConfig) -> ActionFragment:
        if not features.is_add_enabled(config):
            return ActionFragment()
        create_fields = ""
        for f in features.add_fields(config):
            default = "0" if f.attributes.type == InputType.CHECKBOX else "''"
            create_fields += new_lines(1, 2) + self._render(
                "create_field", COLUMN=f.column, DEFAULT_VALUE=default
            )
        return ActionFragment(
            vars=self._render("add_vars"),
            method=self._render(
                "add_method",
                MODEL=config.model_name,
                COMPONENT_NAME=component_alias(config.settings.component_name),
                CREATE_FIELDS=create_fields,
                FLASH_MESSAGE=self.flash_code(config, Action.ADD),
            ),
        )

    def edit(self, config: CrudConfig) -> ActionFragment:
        # Edit loads the stored record, so no per-field defaults are emitted.
        if not features.is_edit_enabled(config):
            return ActionFragment()
        return ActionFragment(
            vars=self._render("edit_vars"),
            method=self._render(
                "edit_method",
                MODEL=config.model_name,
                COMPONENT_NAME=component_alias(config.settings.component_name),
                FLASH_MESSAGE=self.flash_code(config, Action.EDIT),
            ),
        )

    def flash_code(self, config: CrudConfig, action: Action) -> str:
        """Flash trigger for *action*, or ``""`` when that message is disabled."""
        if not features.is_flash_message_enabled(config, action):
            return ""
        return self._render(
            "flash_trigger", MESSAGE=features.flash_message_text(config, action)
        )

    # -- Child component ---------------------------------------------------

    def child_listeners(self, config: CrudConfig) -> str:
        return self._render(
            "child_listeners",
            DELETE_LISTENER=DELETE_LISTENER if features.is_delete_enabled(config) else "",
            ADD_LISTENER=ADD_LISTENER if features.is_add_enabled(config) else "",
            EDIT_LISTENER=EDIT_LISTENER if features.is_edit_enabled(config) else "",
        )

    def child_item(self, config: CrudConfig) -> str:
        return self._render("child_item")

    def child_rules(self, config: CrudConfig) -> str:
        rules = ""
        for f in config.fields:
            rules += new_lines(1, 2) + self._render(
                "child_field", COLUMN_NAME=f.column, VALUE=f.attributes.rule_chain()
            )
        return self._render("child_rules", RULES=rules)

    def child_validation_attributes(self, config: CrudConfig) -> str:
        attributes = ""
        for f in config.fields:
            attributes += new_lines(1, 2) + self._render(
                "child_field", COLUMN_NAME=f.column, VALUE=f.display_label
            )
        return self._render("child_validation_attributes", ATTRIBUTES=attributes)


def build_component_code(config: CrudConfig) -> ComponentCode:
    """Build the fragment bundle with the default template library."""
    return FragmentBuilder().build(config)
