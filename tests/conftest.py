import os
from datetime import datetime
from pathlib import Path

import pytest

from src.adapters.clock import FrozenClock
from src.adapters.rules_port import RulesPortAdapter
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import SQLiteInspectionNumberRepo
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def migrations_dir() -> str:
    return str(PROJECT_ROOT / "migrations")


@pytest.fixture
def rules() -> Rules:
    """The real rules.yaml from the project root."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def rules_port(rules: Rules) -> RulesPortAdapter:
    return RulesPortAdapter(rules)


@pytest.fixture
def frozen_clock() -> FrozenClock:
    return FrozenClock(datetime(2025, 1, 30, 9, 15))


@pytest.fixture
def db_path(tmp_path: Path, migrations_dir: str) -> str:
    """
    A temporary SQLite DB with all migrations applied.
    """
    path = os.path.join(str(tmp_path), "qc.db")
    SQLiteMigrator(path, migrations_dir).run_migrations()
    return path


@pytest.fixture
def inspection_repo(db_path: str) -> SQLiteInspectionNumberRepo:
    return SQLiteInspectionNumberRepo(db_path)
