"""The Alembic migration builds the same schema the ORM expects."""
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from records_api.core.config import settings

ALEMBIC_DIR = Path(__file__).resolve().parents[1] / "alembic"


@pytest.fixture()
def migrated_url(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.setattr(settings, "DATABASE_URL", url)
    config = Config()
    config.set_main_option("script_location", str(ALEMBIC_DIR))
    command.upgrade(config, "head")
    return url


def test_upgrade_creates_person_tables(migrated_url):
    inspector = inspect(create_engine(migrated_url))
    assert {"pacientes", "medicos", "funcionarios"} <= set(inspector.get_table_names())

    medico_columns = {c["name"] for c in inspector.get_columns("medicos")}
    assert {"id", "nome", "idade", "cpf", "crm", "dob", "created_at", "updated_at"} <= medico_columns

    unique_indexes = {
        tuple(ix["column_names"]) for ix in inspector.get_indexes("medicos") if ix["unique"]
    }
    assert ("cpf",) in unique_indexes
    assert ("crm",) in unique_indexes
