"""Shared pytest fixtures for the crudgen test suite.

Provides reusable fixtures for:
- Field definitions and complete CRUD configurations
- Generator configuration pointing at a temporary application root
- A SQLite database with a sample ``users`` table
- CRUD definition files (YAML) for CLI tests
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any

import pytest

from crudgen.config import GeneratorConfig
from crudgen.models import (
    ComponentProps,
    ComponentSettings,
    CrudConfig,
    FieldAttributes,
    FieldSpec,
    ModelProps,
)


# ---------------------------------------------------------------------------
# Field definitions
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_fields() -> list[FieldSpec]:
    """Three fields covering sorting, searching and every widget kind."""
    return [
        FieldSpec(
            column="name",
            sortable=True,
            searchable=True,
            attributes=FieldAttributes(rules="required,,min:3,"),
        ),
        FieldSpec(
            column="email",
            label="E-mail Address",
            sortable=True,
            searchable=True,
            attributes=FieldAttributes(rules="required,email"),
        ),
        FieldSpec(
            column="is_active",
            in_list=False,
            attributes=FieldAttributes(type="checkbox"),
        ),
        FieldSpec(
            column="bio",
            in_list=False,
            in_add=False,
            attributes=FieldAttributes(type="textarea", rules="max:500"),
        ),
    ]


@pytest.fixture
def crud_config(sample_fields) -> CrudConfig:
    """A complete, valid configuration with every feature enabled."""
    return CrudConfig(
        model_path="App\\Models\\User",
        model_props=ModelProps(
            table_name="users",
            primary_key="id",
            columns=["name", "email", "is_active", "bio"],
        ),
        fields=sample_fields,
        settings=ComponentSettings(component_name="UserCrud"),
    )


@pytest.fixture
def minimal_config() -> CrudConfig:
    """A single listed/added/edited field with every toggle switched off."""
    return CrudConfig(
        model_path="App\\Models\\User",
        model_props=ModelProps(table_name="users", primary_key="id", columns=["name"]),
        fields=[FieldSpec(column="name", in_list=True, in_add=True, in_edit=True)],
        settings=ComponentSettings(
            component_name="UserCrud",
            component_props=ComponentProps(
                create_add_modal=False,
                create_edit_modal=False,
                create_delete_button=False,
            ),
        ),
    )


# ---------------------------------------------------------------------------
# Generator configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def generator_config(tmp_path: Path) -> GeneratorConfig:
    """Writes below a temporary application root."""
    return GeneratorConfig(output_dir=tmp_path / "app")


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    """SQLite database with ``users`` and ``blog_posts`` tables."""
    from sqlalchemy import create_engine, text

    url = f"sqlite:///{tmp_path / 'app.db'}"
    engine = create_engine(url)
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE TABLE users ("
            "id INTEGER PRIMARY KEY, name TEXT NOT NULL, email TEXT, "
            "is_active INTEGER DEFAULT 1, created_at TEXT)"
        ))
        conn.execute(text(
            "CREATE TABLE blog_posts (post_id INTEGER PRIMARY KEY, title TEXT, body TEXT)"
        ))
    engine.dispose()
    return url


# ---------------------------------------------------------------------------
# Definition files
# ---------------------------------------------------------------------------

@pytest.fixture
def definition_dict() -> dict[str, Any]:
    return {
        "model_path": "App\\Models\\User",
        "model_props": {"table_name": "users", "primary_key": "id", "columns": ["name", "email"]},
        "fields": [
            {"column": "name", "sortable": True, "searchable": True,
             "attributes": {"rules": "required,min:3"}},
            {"column": "email", "searchable": True, "attributes": {"rules": "required,email"}},
        ],
        "settings": {"component_name": "UserCrud"},
    }


@pytest.fixture
def definition_file(tmp_path: Path) -> Path:
    """A YAML definition equivalent to ``definition_dict``."""
    path = tmp_path / "users.yaml"
    path.write_text(
        textwrap.dedent(
            """\
            model_path: App\\Models\\User
            model_props:
              table_name: users
              primary_key: id
              columns: [name, email]
            fields:
              - column: name
                sortable: true
                searchable: true
                attributes:
                  rules: required,min:3
              - column: email
                searchable: true
                attributes:
                  rules: required,email
            settings:
              component_name: UserCrud
            """
        ),
        encoding="utf-8",
    )
    return path
