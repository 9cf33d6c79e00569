from typing import Iterable


class SQLValidationError(ValueError):
    pass


class SQLToolError(RuntimeError):
    pass


def _normalize_sql(sql: str) -> str:
    return (sql or "").strip().lower()


def require_prefix(sql: str, prefixes: Iterable[str], message: str) -> str:
    """Reject ``sql`` unless it starts with one of ``prefixes``.

    Only the leading keyword is inspected. The statement is returned
    unchanged so callers execute exactly what they were given.
    """
    normalized = _normalize_sql(sql)
    if not any(normalized.startswith(prefix) for prefix in prefixes):
        raise SQLValidationError(message)
    return sql


def require_table_name(table_name: str) -> str:
    if table_name is None or not table_name.strip():
        raise SQLValidationError("Table name is required")
    return table_name
