"""Feature flags derived from a CRUD configuration.

Pure predicates with no side effects.  Fragment generators, the view builder
and the generator itself all ask these functions instead of reading the
settings directly, so every part agrees on what is enabled.
"""

from __future__ import annotations

from typing import Optional

from crudgen.models import Action, ComponentProps, CrudConfig, FieldSpec


def is_sorting_enabled(config: CrudConfig) -> bool:
    return any(f.sortable for f in config.fields)


def is_searching_enabled(config: CrudConfig) -> bool:
    return any(f.searchable for f in config.fields)


def is_pagination_dropdown_enabled(config: CrudConfig) -> bool:
    return config.settings.advanced_settings.table_settings.show_pagination_dropdown


def is_add_enabled(config: CrudConfig) -> bool:
    return config.settings.component_props.create_add_modal


def is_edit_enabled(config: CrudConfig) -> bool:
    return config.settings.component_props.create_edit_modal


def is_delete_enabled(config: CrudConfig) -> bool:
    return config.settings.component_props.create_delete_button


def is_child_enabled(config: CrudConfig) -> bool:
    """The child (form) component exists when any of add/edit/delete is on."""
    return any_action_enabled(config.settings.component_props)


def any_action_enabled(props: ComponentProps) -> bool:
    return props.create_add_modal or props.create_edit_modal or props.create_delete_button


def is_flash_message_enabled(config: CrudConfig, action: Action) -> bool:
    """Flash messages are globally enabled and *action* has message text."""
    flash = config.settings.advanced_settings.flash_messages
    if not flash.enable:
        return False
    return bool(getattr(flash.text, Action(action).value))


def flash_message_text(config: CrudConfig, action: Action) -> str:
    return getattr(config.settings.advanced_settings.flash_messages.text, Action(action).value)


# ---------------------------------------------------------------------------
# Field selections (list order preserved)
# ---------------------------------------------------------------------------


def default_sortable_column(config: CrudConfig) -> Optional[str]:
    """First field in list order flagged sortable, or ``None``."""
    for f in config.fields:
        if f.sortable:
            return f.column
    return None


def searchable_fields(config: CrudConfig) -> list[FieldSpec]:
    return [f for f in config.fields if f.searchable]


def list_fields(config: CrudConfig) -> list[FieldSpec]:
    return [f for f in config.fields if f.in_list]


def add_fields(config: CrudConfig) -> list[FieldSpec]:
    return [f for f in config.fields if f.in_add]


def edit_fields(config: CrudConfig) -> list[FieldSpec]:
    return [f for f in config.fields if f.in_edit]
