from __future__ import annotations

from dataclasses import dataclass

from adapters.base import UnsupportedEngineError
from adapters.factory import normalize_engine


DISPLAY_NAMES = {
    "sqlite": "SQLite",
    "sqlserver": "SQL Server",
    "postgresql": "PostgreSQL",
}

_LIST_TABLES_SQL = {
    "sqlite": "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'",
    "sqlserver": "SELECT TABLE_NAME FROM INFORMATION_SCHEMA.TABLES WHERE TABLE_TYPE = 'BASE TABLE'",
    "postgresql": (
        "SELECT tablename FROM pg_catalog.pg_tables "
        "WHERE schemaname != 'pg_catalog' AND schemaname != 'information_schema'"
    ),
}


def display_name(db_engine: str) -> str:
    return DISPLAY_NAMES.get(normalize_engine(db_engine), "Unknown")


@dataclass(frozen=True)
class SQLDialect:
    engine: str

    def list_tables_sql(self) -> str:
        return _LIST_TABLES_SQL[self.engine]

    def describe_table_sql(self, table_name: str) -> str:
        # table_name is interpolated as-is; callers validate it.
        if self.engine == "sqlite":
            return f"PRAGMA table_info({table_name})"
        if self.engine == "sqlserver":
            return (
                "SELECT COLUMN_NAME, DATA_TYPE, CHARACTER_MAXIMUM_LENGTH, IS_NULLABLE "
                f"FROM INFORMATION_SCHEMA.COLUMNS WHERE TABLE_NAME = '{table_name}'"
            )
        return (
            "SELECT column_name, data_type, character_maximum_length, is_nullable "
            f"FROM information_schema.columns WHERE table_name = '{table_name}'"
        )


def get_sql_dialect(db_engine: str) -> SQLDialect:
    engine = normalize_engine(db_engine)
    if engine not in _LIST_TABLES_SQL:
        raise UnsupportedEngineError(f"Database type not supported: {db_engine}")
    return SQLDialect(engine=engine)
