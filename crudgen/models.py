"""Pydantic v2 models for the CRUD component scaffolder.

Defines the configuration snapshot the engine consumes (fields, model
metadata, component settings), the fragment bundle produced by the fragment
generators, and the immutable artifact returned after a successful run.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from crudgen.utils import class_basename, title_case


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class InputType(str, Enum):
    """Form widget used for a field in the add/edit forms."""
    INPUT = "input"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"


class Action(str, Enum):
    """Child-component actions that can carry a flash message."""
    ADD = "add"
    EDIT = "edit"
    DELETE = "delete"


DEFAULT_OPTIONS = '{"1" : "Yes", "0": "No"}'


# ---------------------------------------------------------------------------
# Field Specification Set
# ---------------------------------------------------------------------------

class FieldAttributes(BaseModel):
    """Validation rules and widget settings of a single field."""
    rules: str = Field(default="", description="Comma-delimited rule tokens, e.g. 'required,min:3'")
    type: InputType = Field(default=InputType.INPUT, description="Form widget type")
    options: str = Field(
        default=DEFAULT_OPTIONS,
        description="JSON object of key -> label, used by choice widgets",
    )

    def rule_tokens(self) -> list[str]:
        """Split ``rules`` on commas, dropping empty tokens (order preserved)."""
        return [token for token in self.rules.split(",") if token]

    def rule_chain(self) -> str:
        """Return the rules joined with the ``|`` validation separator."""
        return "|".join(self.rule_tokens())

    def option_pairs(self) -> dict[str, str]:
        """Parse ``options`` into an ordered key -> label mapping.

        Raises:
            ValueError: If the options are not a JSON object.
        """
        parsed = json.loads(self.options)
        if not isinstance(parsed, dict):
            raise ValueError("options must be a JSON object")
        return {str(key): str(label) for key, label in parsed.items()}


class FieldSpec(BaseModel):
    """One UI-bound column of the generated CRUD component."""
    column: str = Field(default="", description="Column name in the underlying table")
    label: str = Field(default="", description="Display label; derived from column when empty")
    sortable: bool = Field(default=False, description="Column header toggles sorting")
    searchable: bool = Field(default=False, description="Column takes part in the search query")
    in_list: bool = Field(default=True, description="Shown in the listing table")
    in_add: bool = Field(default=True, description="Shown in the create form")
    in_edit: bool = Field(default=True, description="Shown in the edit form")
    attributes: FieldAttributes = Field(default_factory=FieldAttributes)

    @property
    def display_label(self) -> str:
        return self.label or title_case(self.column)


# ---------------------------------------------------------------------------
# Model & component settings
# ---------------------------------------------------------------------------

class ModelProps(BaseModel):
    """Table metadata supplied by schema introspection (read-only)."""
    table_name: str = Field(default="", description="Underlying table name")
    primary_key: str = Field(default="id", description="Primary key column")
    columns: list[str] = Field(
        default_factory=list, description="Candidate columns, in table order"
    )


class ComponentProps(BaseModel):
    """Which child-component actions to generate."""
    create_add_modal: bool = True
    create_edit_modal: bool = True
    create_delete_button: bool = True


class PrimaryKeyProps(BaseModel):
    """How the primary key column is shown in the listing."""
    in_list: bool = True
    label: str = ""
    sortable: bool = True


class TextSettings(BaseModel):
    """Button and link captions."""
    add_link: str = "Create New"
    edit_link: str = "Edit"
    delete_link: str = "Delete"
    create_button: str = "Save"
    edit_button: str = "Save"
    cancel_button: str = "Cancel"
    delete_button: str = "Delete"


class TableSettings(BaseModel):
    """Listing table behaviour."""
    records_per_page: int = Field(default=15, ge=1)
    show_pagination_dropdown: bool = True


class FlashText(BaseModel):
    """Per-action flash message text; an empty string disables that message."""
    add: str = "Record Added Successfully"
    edit: str = "Record Updated Successfully"
    delete: str = "Record Deleted Successfully"


class FlashMessages(BaseModel):
    enable: bool = True
    text: FlashText = Field(default_factory=FlashText)


class AdvancedSettings(BaseModel):
    """Title, captions, table and flash-message settings."""
    title: str = ""
    text: TextSettings = Field(default_factory=TextSettings)
    table_settings: TableSettings = Field(default_factory=TableSettings)
    flash_messages: FlashMessages = Field(default_factory=FlashMessages)


class ComponentSettings(BaseModel):
    """Generation-time parameters of the component pair."""
    component_name: str = Field(default="", description="Livewire component class name")
    component_props: ComponentProps = Field(default_factory=ComponentProps)
    primary_key_props: PrimaryKeyProps = Field(default_factory=PrimaryKeyProps)
    advanced_settings: AdvancedSettings = Field(default_factory=AdvancedSettings)


class CrudConfig(BaseModel):
    """A complete configuration snapshot handed to the generator."""
    model_config = ConfigDict(protected_namespaces=())

    model_path: str = Field(default="", description="Model class path, e.g. 'App\\Models\\User'")
    model_props: ModelProps = Field(default_factory=ModelProps)
    fields: list[FieldSpec] = Field(default_factory=list)
    settings: ComponentSettings = Field(default_factory=ComponentSettings)

    @property
    def model_name(self) -> str:
        """Class basename of ``model_path`` (``App\\Models\\User`` -> ``User``)."""
        return class_basename(self.model_path)

    @property
    def title(self) -> str:
        """Configured title, falling back to the title-cased table name."""
        title = self.settings.advanced_settings.title
        return title or title_case(self.model_props.table_name)


# ---------------------------------------------------------------------------
# Fragment bundle
# ---------------------------------------------------------------------------

class SortFragment(BaseModel):
    vars: str = ""
    query: str = ""
    method: str = ""


class SearchFragment(BaseModel):
    vars: str = ""
    query: str = ""
    method: str = ""


class PaginationFragment(BaseModel):
    vars: str = ""


class PaginationDropdownFragment(BaseModel):
    method: str = ""


class ActionFragment(BaseModel):
    """Vars/method pair of an add, edit or delete action."""
    vars: str = ""
    method: str = ""


class ComponentCode(BaseModel):
    """Every generated fragment, keyed by concern."""
    sort: SortFragment = Field(default_factory=SortFragment)
    search: SearchFragment = Field(default_factory=SearchFragment)
    pagination_dropdown: PaginationDropdownFragment = Field(
        default_factory=PaginationDropdownFragment
    )
    pagination: PaginationFragment = Field(default_factory=PaginationFragment)
    child_delete: ActionFragment = Field(default_factory=ActionFragment)
    child_add: ActionFragment = Field(default_factory=ActionFragment)
    child_edit: ActionFragment = Field(default_factory=ActionFragment)
    child_listeners: str = ""
    child_item: str = ""
    child_rules: str = ""
    child_validation_attributes: str = ""


class ViewHtml(BaseModel):
    """Blade markup of the parent and child views."""
    parent: str = ""
    child: str = ""


# ---------------------------------------------------------------------------
# Generation payloads
# ---------------------------------------------------------------------------

class GenerationProps(BaseModel):
    """Payload handed to the component writer for both artifact calls."""
    model_config = ConfigDict(protected_namespaces=())

    model_path: str
    model: str
    model_props: ModelProps
    fields: list[FieldSpec]
    component_props: ComponentProps
    primary_key_props: PrimaryKeyProps
    advanced_settings: AdvancedSettings
    html: ViewHtml
    code: ComponentCode


class GeneratedArtifact(BaseModel):
    """Immutable result of a successful generation run."""
    model_config = ConfigDict(frozen=True)

    parent_code: str
    parent_view: str
    child_code: Optional[str] = None
    child_view: Optional[str] = None
    usage_snippet: str


class GenerationResult(BaseModel):
    """Exit status of a generation run plus the artifact when it succeeded."""
    exit_code: int = 0
    artifact: Optional[GeneratedArtifact] = None

    @property
    def success(self) -> bool:
        return self.exit_code == 0
