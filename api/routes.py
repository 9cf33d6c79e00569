from typing import Any, Callable, Dict

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from loguru import logger

from adapters.base import AdapterConnectionError, NotInitializedError, UnsupportedEngineError
from api.schemas import DatabaseInfoResponse, EnvelopeResponse, StatementRequest, TableRequest
from services.database import DatabaseService
from tools import (
    SQLToolError,
    alter_table,
    create_table,
    database_info,
    describe_table,
    drop_table,
    export_query,
    list_tables,
    read_query,
    write_query,
)
from utils.format import to_jsonable

router = APIRouter()

_UNAVAILABLE = (NotInitializedError, UnsupportedEngineError, AdapterConnectionError)


def get_database(request: Request) -> DatabaseService:
    return request.app.state.database


def _status_for(exc: SQLToolError) -> int:
    # Validation and query failures are the caller's; a missing database is not.
    if isinstance(exc.__cause__, _UNAVAILABLE):
        return 503
    return 400


def _call(tool: Callable[..., Any], *args: Any) -> Any:
    try:
        return tool(*args)
    except SQLToolError as exc:
        logger.warning("{} failed: {}", tool.__name__, exc)
        raise HTTPException(status_code=_status_for(exc), detail=str(exc)) from exc


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.get("/database", response_model=DatabaseInfoResponse)
def get_database_info(database: DatabaseService = Depends(get_database)) -> Dict[str, Any]:
    return database_info(database)


@router.post("/query/read", response_model=EnvelopeResponse)
def read(request: StatementRequest, database: DatabaseService = Depends(get_database)) -> Dict[str, Any]:
    return to_jsonable(_call(read_query, database, request.query))


@router.post("/query/write", response_model=EnvelopeResponse)
def write(request: StatementRequest, database: DatabaseService = Depends(get_database)) -> Dict[str, Any]:
    return _call(write_query, database, request.query)


@router.post("/query/export", response_class=PlainTextResponse)
def export(request: StatementRequest, database: DatabaseService = Depends(get_database)) -> str:
    return _call(export_query, database, request.query)


@router.post("/tables/create", response_model=EnvelopeResponse)
def create(request: StatementRequest, database: DatabaseService = Depends(get_database)) -> Dict[str, Any]:
    return _call(create_table, database, request.query)


@router.post("/tables/alter", response_model=EnvelopeResponse)
def alter(request: StatementRequest, database: DatabaseService = Depends(get_database)) -> Dict[str, Any]:
    return _call(alter_table, database, request.query)


@router.post("/tables/drop", response_model=EnvelopeResponse)
def drop(request: StatementRequest, database: DatabaseService = Depends(get_database)) -> Dict[str, Any]:
    return _call(drop_table, database, request.query)


@router.get("/tables", response_model=EnvelopeResponse)
def tables(database: DatabaseService = Depends(get_database)) -> Dict[str, Any]:
    return _call(list_tables, database)


@router.post("/tables/describe", response_model=EnvelopeResponse)
def describe(request: TableRequest, database: DatabaseService = Depends(get_database)) -> Dict[str, Any]:
    return to_jsonable(_call(describe_table, database, request.table_name))
