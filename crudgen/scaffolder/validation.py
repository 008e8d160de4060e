"""Fail-fast validation of a CRUD configuration.

The checks run in a fixed order and stop at the first failure.  Each stage
names the check that is about to run, so a rejected configuration reports
exactly where it stopped; a configuration that passes every check ends in the
``GENERATE`` stage.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel

from crudgen.errors import CrudGenError
from crudgen.models import CrudConfig, FieldSpec, InputType


class ValidationStage(str, Enum):
    """Pipeline states, in the order the checks run."""
    EMPTY = "empty"
    NO_EMPTY_COLUMNS = "no_empty_columns"
    UNIQUE_COLUMNS = "unique_columns"
    PER_ROW_VALID = "per_row_valid"
    HAS_LIST_COLUMN = "has_list_column"
    HAS_ADD_COLUMN = "has_add_column"
    HAS_EDIT_COLUMN = "has_edit_column"
    NAME_VALID = "name_valid"
    GENERATE = "generate"


class ConfigurationError(CrudGenError):
    """Raised when a configuration is rejected by the validation pipeline."""

    def __init__(self, stage: ValidationStage, field: str, message: str) -> None:
        self.stage = stage
        super().__init__(field, message)


class ValidationOutcome(BaseModel):
    """Where the pipeline stopped and why (``error`` is ``None`` on success)."""
    stage: ValidationStage
    field: str = ""
    error: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.stage == ValidationStage.GENERATE


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

MSG_NO_FIELDS = "At least 1 Field should be added."
MSG_EMPTY_COLUMN = "Please select column for all fields."
MSG_DUPLICATE_COLUMN = "Please do not select a column more than once."
MSG_NO_LIST_COLUMN = "Please select at least 1 Field to Display in Listing Column."
MSG_NO_ADD_COLUMN = "Please select at least 1 Field to Display in Create Column."
MSG_NO_EDIT_COLUMN = "Please select at least 1 Field to Display in Edit Column."
MSG_NAME_REQUIRED = "Please enter the name of your component"
MSG_NAME_ALPHA_DASH = "Only alphanumeric, dashes and underscore are allowed"
MSG_NAME_MIN = "Must be minimum of 3 characters"

COMPONENT_NAME_MIN_LENGTH = 3

_COMPONENT_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")
_RULE_TOKEN_RE = re.compile(r"^[A-Za-z_]+(:[^|]*)?$")


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------
# Each check returns ``None`` when it passes, else ``(field, message)``.

Failure = Optional[tuple[str, str]]


def _check_not_empty(config: CrudConfig) -> Failure:
    if not config.fields:
        return ("fields", MSG_NO_FIELDS)
    return None


def _check_no_empty_columns(config: CrudConfig) -> Failure:
    if any(not f.column.strip() for f in config.fields):
        return ("fields", MSG_EMPTY_COLUMN)
    return None


def _check_unique_columns(config: CrudConfig) -> Failure:
    columns = [f.column.strip() for f in config.fields]
    if len(columns) != len(set(columns)):
        return ("fields", MSG_DUPLICATE_COLUMN)
    return None


def check_field(index: int, spec: FieldSpec) -> Failure:
    """Per-row check: rule token syntax and choice options of one field."""
    for token in spec.attributes.rule_tokens():
        if not _RULE_TOKEN_RE.match(token):
            return (
                f"fields.{index}.attributes.rules",
                f"Invalid rule '{token}' for column {spec.column}.",
            )
    if spec.attributes.type == InputType.SELECT:
        try:
            options = spec.attributes.option_pairs()
        except ValueError:
            options = {}
        if not options:
            return (
                f"fields.{index}.attributes.options",
                f"Please enter valid options for column {spec.column}.",
            )
    return None


def _check_each_row(config: CrudConfig) -> Failure:
    for i, spec in enumerate(config.fields):
        failure = check_field(i, spec)
        if failure is not None:
            return failure
    return None


def _check_list_column(config: CrudConfig) -> Failure:
    if not any(f.in_list for f in config.fields):
        return ("fields", MSG_NO_LIST_COLUMN)
    return None


def _check_add_column(config: CrudConfig) -> Failure:
    if not any(f.in_add for f in config.fields):
        return ("fields", MSG_NO_ADD_COLUMN)
    return None


def _check_edit_column(config: CrudConfig) -> Failure:
    if not any(f.in_edit for f in config.fields):
        return ("fields", MSG_NO_EDIT_COLUMN)
    return None


def check_component_name(name: str) -> Failure:
    """Component names are alpha-dash identifiers of at least 3 characters."""
    if not name:
        return ("component_name", MSG_NAME_REQUIRED)
    if not _COMPONENT_NAME_RE.match(name):
        return ("component_name", MSG_NAME_ALPHA_DASH)
    if len(name) < COMPONENT_NAME_MIN_LENGTH:
        return ("component_name", MSG_NAME_MIN)
    return None


def _check_name(config: CrudConfig) -> Failure:
    return check_component_name(config.settings.component_name)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class ValidationPipeline:
    """Ordered, fail-fast configuration checks."""

    CHECKS: tuple[tuple[ValidationStage, Callable[[CrudConfig], Failure]], ...] = (
        (ValidationStage.EMPTY, _check_not_empty),
        (ValidationStage.NO_EMPTY_COLUMNS, _check_no_empty_columns),
        (ValidationStage.UNIQUE_COLUMNS, _check_unique_columns),
        (ValidationStage.PER_ROW_VALID, _check_each_row),
        (ValidationStage.HAS_LIST_COLUMN, _check_list_column),
        (ValidationStage.HAS_ADD_COLUMN, _check_add_column),
        (ValidationStage.HAS_EDIT_COLUMN, _check_edit_column),
        (ValidationStage.NAME_VALID, _check_name),
    )

    def check(self, config: CrudConfig) -> ValidationOutcome:
        """Run the checks and report the stage reached."""
        for stage, check in self.CHECKS:
            failure = check(config)
            if failure is not None:
                field, message = failure
                return ValidationOutcome(stage=stage, field=field, error=message)
        return ValidationOutcome(stage=ValidationStage.GENERATE)

    def run(self, config: CrudConfig) -> None:
        """Run the checks, raising on the first failure.

        Raises:
            ConfigurationError: Carrying the failing stage, the field the
                message belongs to, and the user-facing message.
        """
        outcome = self.check(config)
        if not outcome.passed:
            raise ConfigurationError(outcome.stage, outcome.field, outcome.error or "")
