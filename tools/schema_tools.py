from typing import Any, Dict

from services.database import DatabaseService
from tools.validation import SQLToolError, require_prefix, require_table_name
from utils.format import format_success_response


def _run_ddl(service: DatabaseService, query: str, prefix: str, message: str) -> Dict[str, Any]:
    try:
        require_prefix(query, (prefix,), f"Only {prefix.upper()} statements are allowed")
        service.execute(query)
        return format_success_response({"success": True, "message": message})
    except Exception as exc:
        raise SQLToolError(f"SQL Error: {exc}") from exc


def create_table(service: DatabaseService, query: str) -> Dict[str, Any]:
    return _run_ddl(service, query, "create table", "Table created successfully")


def alter_table(service: DatabaseService, query: str) -> Dict[str, Any]:
    return _run_ddl(service, query, "alter table", "Table altered successfully")


def drop_table(service: DatabaseService, query: str) -> Dict[str, Any]:
    return _run_ddl(service, query, "drop table", "Table dropped successfully")


def list_tables(service: DatabaseService) -> Dict[str, Any]:
    try:
        rows = service.query(service.get_list_tables_query())
        return format_success_response(rows)
    except Exception as exc:
        raise SQLToolError(f"SQL Error: {exc}") from exc


def describe_table(service: DatabaseService, table_name: str) -> Dict[str, Any]:
    try:
        require_table_name(table_name)
        rows = service.query(service.get_describe_table_query(table_name))
        return format_success_response(rows)
    except Exception as exc:
        raise SQLToolError(f"SQL Error: {exc}") from exc


def database_info(service: DatabaseService) -> Dict[str, Any]:
    return format_success_response(service.get_metadata())
