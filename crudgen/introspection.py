"""Model resolution and table introspection.

Maps a model class path (``App\\Models\\User``) to its table and reads the
table's column listing and primary key through SQLAlchemy's runtime
inspector.  Failures are reported as ``ModelResolutionError`` scoped to the
``model_path`` input, before any configuration validation runs.
"""

from __future__ import annotations

import re
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from crudgen.errors import CrudGenError
from crudgen.models import ModelProps
from crudgen.utils import table_name_for

MSG_MODEL_REQUIRED = "Please enter Path to your Model"
MSG_MODEL_MISSING = "File does not exists"
MSG_MODEL_INVALID = "Not a Valid Model Class."

# A class path: identifier segments joined by backslashes (PHP) or dots.
_CLASS_PATH_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*([\\.][A-Za-z_][A-Za-z0-9_]*)*$")


class ModelResolutionError(CrudGenError):
    """Raised when a model path cannot be resolved to an inspectable table."""

    def __init__(self, message: str) -> None:
        super().__init__("model_path", message)


def check_model_path(model_path: str) -> str:
    """Return the trimmed *model_path*, rejecting empty or malformed paths.

    Raises:
        ModelResolutionError: If the path is empty or is not a class path.
    """
    model_path = model_path.strip()
    if not model_path:
        raise ModelResolutionError(MSG_MODEL_REQUIRED)
    if not _CLASS_PATH_RE.match(model_path):
        raise ModelResolutionError(MSG_MODEL_MISSING)
    return model_path


class SchemaIntrospector:
    """Reads column listings from a database through SQLAlchemy.

    Args:
        database_url: Any SQLAlchemy URL, e.g. ``sqlite:///app.db``.
        engine: An existing engine to reuse instead of creating one.
    """

    def __init__(self, database_url: Optional[str] = None, engine: Optional[Engine] = None) -> None:
        if engine is None:
            if not database_url:
                raise ValueError("Either database_url or engine is required")
            engine = create_engine(database_url)
        self.engine = engine

    def has_table(self, table: str) -> bool:
        return sa_inspect(self.engine).has_table(table)

    def describe(self, table: str) -> tuple[list[str], str]:
        """Return ``(columns, primary_key)`` for *table*, columns in table order.

        Raises:
            sqlalchemy.exc.NoSuchTableError: If the table does not exist.
        """
        inspector = sa_inspect(self.engine)
        columns = [col["name"] for col in inspector.get_columns(table)]
        pk_columns = inspector.get_pk_constraint(table).get("constrained_columns") or []
        primary_key = pk_columns[0] if pk_columns else "id"
        return columns, primary_key

    def resolve_model(self, model_path: str, table_name: Optional[str] = None) -> ModelProps:
        """Resolve *model_path* to the ``ModelProps`` of its table.

        The table defaults to the conventional snake-case plural of the class
        basename.  The primary key is removed from the candidate columns.

        Raises:
            ModelResolutionError: If the path is empty, is not a class path,
                or its table cannot be inspected.
        """
        model_path = check_model_path(model_path)

        table = table_name or table_name_for(model_path)
        try:
            if not self.has_table(table):
                raise ModelResolutionError(MSG_MODEL_INVALID)
            columns, primary_key = self.describe(table)
        except SQLAlchemyError as exc:
            raise ModelResolutionError(MSG_MODEL_INVALID) from exc

        return ModelProps(
            table_name=table,
            primary_key=primary_key,
            columns=[c for c in columns if c != primary_key],
        )

