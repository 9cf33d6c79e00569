from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from adapters.base import DatabaseAdapter, UnsupportedEngineError
from adapters.sqlite import SQLiteAdapter


AdapterConstructor = Callable[[Any], DatabaseAdapter]

# Engines the service knows how to describe. Only some have an adapter registered.
KNOWN_ENGINES = ("sqlite", "sqlserver", "postgresql")
ENGINE_ALIASES = {"postgres": "postgresql"}

_DEFAULT_ADAPTERS: Dict[str, AdapterConstructor] = {
    "sqlite": SQLiteAdapter,
}


def normalize_engine(db_engine: Optional[str]) -> str:
    engine = (db_engine or "").strip().lower()
    return ENGINE_ALIASES.get(engine, engine)


class AdapterRegistry:
    def __init__(self, adapters: Optional[Dict[str, AdapterConstructor]] = None):
        self._adapters: Dict[str, AdapterConstructor] = dict(_DEFAULT_ADAPTERS if adapters is None else adapters)

    def register(self, db_engine: str, constructor: AdapterConstructor) -> None:
        engine = normalize_engine(db_engine)
        if not engine:
            raise ValueError("db_engine is required")
        self._adapters[engine] = constructor

    def create(self, db_engine: str, connection_info: Any) -> DatabaseAdapter:
        engine = normalize_engine(db_engine)
        constructor = self._adapters.get(engine)
        if constructor is not None:
            return constructor(connection_info)
        if engine in KNOWN_ENGINES:
            raise UnsupportedEngineError(f"Database type not implemented yet: {engine}")
        raise UnsupportedEngineError(f"Unsupported database type: {db_engine}")


default_registry = AdapterRegistry()


def register_adapter(db_engine: str, constructor: AdapterConstructor) -> None:
    default_registry.register(db_engine, constructor)


def create_adapter(db_engine: str, connection_info: Any) -> DatabaseAdapter:
    return default_registry.create(db_engine, connection_info)
