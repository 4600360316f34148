"""Query routes over the collected design table."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from design_collector.api.dependencies import get_app_settings, get_table
from design_collector.core.config import Settings
from design_collector.core.metrics import metrics_response
from design_collector.models.dto import DeleteRequest, DeleteResponse, ListResponse
from design_collector.store.csv_table import DesignTable, TableMissingError, table_stats

router = APIRouter()


@router.get("/data", response_model=dict[str, int], summary="Row counts per data table")
def data_stats(settings: Settings = Depends(get_app_settings)) -> dict[str, int]:
    return table_stats(settings.data_dir, settings.stats_files)


@router.get("/list", response_model=ListResponse, summary="List collected designs, newest first")
def list_designs(table: DesignTable = Depends(get_table)) -> ListResponse:
    return ListResponse(designs=table.list_records())


@router.post("/delete", response_model=DeleteResponse, summary="Delete a collected design by ID")
def delete_design(request: DeleteRequest, table: DesignTable = Depends(get_table)) -> DeleteResponse:
    try:
        deleted = table.delete(request.id)
    except TableMissingError as exc:
        return DeleteResponse(success=False, error=str(exc))
    return DeleteResponse(success=True, deleted=deleted)


@router.get("/metrics", summary="Prometheus metrics")
async def get_metrics():
    return metrics_response()


__all__ = ["router"]
