from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class AdapterError(RuntimeError):
    pass


class AdapterConnectionError(AdapterError):
    pass


class NotInitializedError(AdapterError):
    pass


class UnsupportedEngineError(AdapterError):
    pass


class QueryError(AdapterError):
    pass


class DatabaseAdapter(ABC):
    """Contract every database backend implements.

    An adapter owns exactly one underlying connection between ``open()`` and
    ``close()``. Parameters are handed to the driver for binding; adapters
    never splice them into the statement text.
    """

    engine: str = "unknown"

    def __init__(self, connection_info: Any):
        if connection_info is None:
            raise AdapterConnectionError("connection_info is required")
        self._connection_info = connection_info

    @property
    def connection_info(self) -> Any:
        return self._connection_info

    @abstractmethod
    def open(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def query(self, sql: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    def execute(self, sql: str, params: Optional[Dict[str, Any]] = None) -> int:
        raise NotImplementedError
