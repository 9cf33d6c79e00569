import os
from pathlib import Path
from typing import Optional


def load_environments(env_path: str = ".env") -> None:
    env_file = Path(env_path)
    if not env_file.exists():
        return

    for raw_line in env_file.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip("'").strip('"')
        if key and key not in os.environ:
            os.environ[key] = value


def env_flag(name: str, default: bool = False) -> bool:
    raw: Optional[str] = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes"}


def resolve_database_config() -> tuple:
    """Return ``(connection_info, db_engine)`` from DB_ENGINE and friends."""
    load_environments()
    engine = (os.getenv("DB_ENGINE") or "sqlite").strip().lower()
    if engine == "sqlite":
        return os.getenv("SQLITE_DB_PATH", "data/app.db"), engine
    connection = os.getenv("DB_CONNECTION")
    if not connection:
        raise ValueError(f"DB_CONNECTION is required for db_engine={engine}")
    return connection, engine
