"""SQL tools exposed to tool-calling clients.

Every tool takes the active ``DatabaseService`` plus at most one string
argument, and raises ``SQLToolError`` ("SQL Error: ...") on any failure.
"""

from tools.query_tools import export_query, read_query, write_query
from tools.schema_tools import alter_table, create_table, database_info, describe_table, drop_table, list_tables
from tools.validation import SQLToolError, SQLValidationError

__all__ = [
    "SQLToolError",
    "SQLValidationError",
    "alter_table",
    "create_table",
    "database_info",
    "describe_table",
    "drop_table",
    "export_query",
    "list_tables",
    "read_query",
    "write_query",
]
