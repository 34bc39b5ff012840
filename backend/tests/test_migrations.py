import warnings
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


@pytest.fixture
def db_path(tmp_path) -> Path:
    return tmp_path / "migrations.db"


@pytest.fixture
def alembic_config(db_path) -> Config:
    config = Config(str(ALEMBIC_INI))
    config.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_path}")
    config.attributes["configure_logger"] = False
    return config


def _inspect(db_path):
    engine = create_engine(f"sqlite:///{db_path}")
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names())
        if "users" not in tables:
            return tables, None, None, None
        columns = {c["name"]: c for c in inspector.get_columns("users")}
        pk = inspector.get_pk_constraint("users")["constrained_columns"]
        uniques = {tuple(u["column_names"]) for u in inspector.get_unique_constraints("users")}
        return tables, columns, pk, uniques
    finally:
        engine.dispose()


def test_upgrade_creates_users_table(alembic_config, db_path):
    command.upgrade(alembic_config, "head")

    tables, columns, pk, uniques = _inspect(db_path)
    assert "users" in tables
    assert list(columns) == ["id", "email", "username", "created_at"]
    assert all(not c["nullable"] for c in columns.values())
    assert pk == ["id"]
    assert uniques == {("email",), ("username",)}


def test_downgrade_drops_users_table(alembic_config, db_path):
    command.upgrade(alembic_config, "head")
    command.downgrade(alembic_config, "base")

    tables, *_ = _inspect(db_path)
    assert "users" not in tables


def test_single_head_is_create_user_table(alembic_config):
    from alembic.script import ScriptDirectory

    script = ScriptDirectory.from_config(alembic_config)
    assert script.get_heads() == ["20260219171637"]
    assert script.get_revision("20260219171637").down_revision is None


def test_script_directory_loads_without_separator_warning(alembic_config):
    from alembic.script import ScriptDirectory

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        ScriptDirectory.from_config(alembic_config)
    assert not [w for w in caught if "separator" in str(w.message)]
