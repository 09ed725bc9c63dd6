import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.clock import SystemClock
from src.adapters.rules_port import RulesPortAdapter
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import SQLiteInspectionNumberRepo
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("QC_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "qc.db")
        self.migrations_dir = self.base_dir / "migrations"
        self.rules_path = Path(os.environ.get("QC_RULES_PATH", str(self.base_dir / "rules.yaml")))
        self.timezone = os.environ.get("QC_TIMEZONE") or None


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_rules_cached(path: Path) -> Rules:
    return load_rules(path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules_cached(settings.rules_path)


def get_rules_port(rules: Rules = Depends(get_rules)) -> RulesPortAdapter:
    return RulesPortAdapter(rules)


# --- Clock ---
def get_clock(settings: Settings = Depends(get_settings)) -> SystemClock:
    return SystemClock(settings.timezone)


# --- Repos ---
@lru_cache
def _migrate(db_path: str, migrations_dir: str) -> None:
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    SQLiteMigrator(db_path, migrations_dir).run_migrations()


def get_inspection_repo(settings: Settings = Depends(get_settings)) -> SQLiteInspectionNumberRepo:
    _migrate(settings.db_path, str(settings.migrations_dir))
    return SQLiteInspectionNumberRepo(settings.db_path)
