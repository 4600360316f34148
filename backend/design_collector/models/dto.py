"""Pydantic DTOs exposed via API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from design_collector.models.snapshot import DesignSnapshot

_WIRE_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class ExtractRequest(BaseModel):
    url: str = Field(description="Page to render and extract")


class ExtractResponse(BaseModel):
    success: bool
    data: DesignSnapshot | None = None
    error: str | None = None


class AnalyzeResponse(BaseModel):
    model_config = _WIRE_CONFIG

    success: bool
    analysis: str | None = None
    saved_to: list[str] = Field(default_factory=list)
    record_id: str | None = None
    note: str | None = None


class ListResponse(BaseModel):
    success: bool = True
    designs: list[dict[str, Any]]


class DeleteRequest(BaseModel):
    id: str | int


class DeleteResponse(BaseModel):
    success: bool
    deleted: int = 0
    error: str | None = None


__all__ = [
    "HealthResponse",
    "ExtractRequest",
    "ExtractResponse",
    "AnalyzeResponse",
    "ListResponse",
    "DeleteRequest",
    "DeleteResponse",
]
