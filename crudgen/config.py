"""crudgen configuration.

Typed settings for where and how generated components are written.  All
settings use Pydantic v2 models so they can be validated at construction time
and serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


class GeneratorConfig(BaseModel):
    """Output layout and behaviour of the component writer.

    Instances are typically created once by the CLI entry point and passed to
    ``CrudGenerator`` and the writer.
    """

    output_dir: Path = Field(default=Path("./output"), description="Application root to write into")
    namespace: str = Field(default="App\\Http\\Livewire", description="PHP namespace of the classes")
    class_dir: str = Field(default="app/Http/Livewire", description="Class directory below output_dir")
    view_dir: str = Field(
        default="resources/views/livewire", description="Blade view directory below output_dir"
    )
    overwrite: bool = Field(default=False, description="Replace existing component files")
    database_url: Optional[str] = Field(
        default=None, description="SQLAlchemy URL used to introspect the model's table"
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def class_path(self) -> Path:
        """Directory the PHP component classes are written to."""
        return self.output_dir / self.class_dir

    @property
    def view_path(self) -> Path:
        """Directory the Blade views are written to."""
        return self.output_dir / self.view_dir

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            CRUDGEN_OUTPUT_DIR, CRUDGEN_NAMESPACE, CRUDGEN_OVERWRITE,
            CRUDGEN_DATABASE_URL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CRUDGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["CRUDGEN_OUTPUT_DIR"])
        if os.environ.get("CRUDGEN_NAMESPACE"):
            kwargs["namespace"] = os.environ["CRUDGEN_NAMESPACE"]
        if os.environ.get("CRUDGEN_OVERWRITE"):
            kwargs["overwrite"] = os.environ["CRUDGEN_OVERWRITE"].strip().lower() in _TRUTHY
        if os.environ.get("CRUDGEN_DATABASE_URL"):
            kwargs["database_url"] = os.environ["CRUDGEN_DATABASE_URL"]
        return cls(**kwargs)
