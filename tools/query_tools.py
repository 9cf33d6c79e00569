from typing import Any, Dict

from services.database import DatabaseService
from tools.validation import SQLToolError, require_prefix
from utils.format import convert_to_csv, format_success_response


def read_query(service: DatabaseService, query: str) -> Dict[str, Any]:
    try:
        require_prefix(query, ("select",), "Only SELECT queries are allowed with read_query")
        rows = service.query(query)
        return format_success_response(rows)
    except Exception as exc:
        raise SQLToolError(f"SQL Error: {exc}") from exc


def write_query(service: DatabaseService, query: str) -> Dict[str, Any]:
    try:
        require_prefix(
            query,
            ("insert", "update", "delete"),
            "Only INSERT, UPDATE, or DELETE queries are allowed with write_query",
        )
        affected_rows = service.execute(query)
        return format_success_response({"affectedRows": affected_rows})
    except Exception as exc:
        raise SQLToolError(f"SQL Error: {exc}") from exc


def export_query(service: DatabaseService, query: str) -> str:
    try:
        require_prefix(query, ("select",), "Only SELECT queries are allowed with export_query")
        rows = service.query(query)
        return convert_to_csv(rows)
    except Exception as exc:
        raise SQLToolError(f"SQL Error: {exc}") from exc
