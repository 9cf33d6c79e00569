"""MCP stdio server exposing the SQL tools.

Run:  python -m api.mcp_server
Configure with DB_ENGINE / SQLITE_DB_PATH (or DB_CONNECTION), see .env.
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Annotated, Any, AsyncIterator, Dict

from mcp.server.fastmcp import FastMCP
from pydantic import Field

import tools
from services.database import DatabaseService
from utils.env_loader import env_flag, load_environments, resolve_database_config
from utils.format import to_jsonable
from utils.logging_config import setup_logging

database = DatabaseService()


@asynccontextmanager
async def lifespan(_server: FastMCP) -> AsyncIterator[DatabaseService]:
    connection_info, db_engine = resolve_database_config()
    database.initialize(connection_info, db_engine)
    try:
        yield database
    finally:
        database.close()


mcp = FastMCP("sql-tools", lifespan=lifespan)

SelectQuery = Annotated[str, Field(description="SQL SELECT query to execute")]


@mcp.tool()
def read_query(query: SelectQuery) -> Dict[str, Any]:
    """Execute SELECT queries to read data from the database"""
    return to_jsonable(tools.read_query(database, query))


@mcp.tool()
def write_query(
    query: Annotated[str, Field(description="SQL query to execute (INSERT, UPDATE, DELETE)")],
) -> Dict[str, Any]:
    """Execute INSERT, UPDATE, or DELETE queries to modify data in the database"""
    return tools.write_query(database, query)


@mcp.tool()
def export_query(query: SelectQuery) -> str:
    """Execute a SELECT query and export the results as CSV"""
    return tools.export_query(database, query)


@mcp.tool()
def create_table(query: Annotated[str, Field(description="CREATE TABLE SQL statement")]) -> Dict[str, Any]:
    """Create a new table in the database"""
    return tools.create_table(database, query)


@mcp.tool()
def alter_table(query: Annotated[str, Field(description="ALTER TABLE SQL statement")]) -> Dict[str, Any]:
    """Alter an existing table in the database"""
    return tools.alter_table(database, query)


@mcp.tool()
def drop_table(query: Annotated[str, Field(description="DROP TABLE SQL statement")]) -> Dict[str, Any]:
    """Drop an existing table from the database"""
    return tools.drop_table(database, query)


@mcp.tool()
def list_tables() -> Dict[str, Any]:
    """List all tables in the database"""
    return tools.list_tables(database)


@mcp.tool()
def describe_table(table_name: Annotated[str, Field(description="Name of the table to describe")]) -> Dict[str, Any]:
    """Describe a table's schema"""
    return to_jsonable(tools.describe_table(database, table_name))


@mcp.tool()
def database_info() -> Dict[str, Any]:
    """Show the active database type and connection"""
    return tools.database_info(database)


def main() -> None:
    load_environments()
    setup_logging(level=os.getenv("LOG_LEVEL", "INFO"), json=env_flag("LOG_JSON"))
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
