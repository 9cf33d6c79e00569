from typing import Any, Dict

from pydantic import BaseModel, Field


class StatementRequest(BaseModel):
    query: str = Field(..., description="SQL statement to run")


class TableRequest(BaseModel):
    table_name: str = Field(default="", description="Name of the table to describe")


class EnvelopeResponse(BaseModel):
    success: bool
    data: Any


class DatabaseInfoResponse(BaseModel):
    success: bool
    data: Dict[str, Any]
