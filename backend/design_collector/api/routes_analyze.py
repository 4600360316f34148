"""Extraction and analysis routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from design_collector.api.dependencies import get_app_settings, get_pipeline
from design_collector.core.config import Settings
from design_collector.extract.browser import snapshot_url
from design_collector.models.dto import AnalyzeResponse, ExtractRequest, ExtractResponse
from design_collector.models.snapshot import DesignSnapshot
from design_collector.service.pipeline import AnalysisPipeline

router = APIRouter()


@router.post("/extract", response_model=ExtractResponse, summary="Capture a design snapshot from a URL")
async def extract(
    request: ExtractRequest,
    settings: Settings = Depends(get_app_settings),
) -> ExtractResponse:
    result = await snapshot_url(request.url, settings)
    return ExtractResponse(success=result.success, data=result.snapshot, error=result.error)


@router.post("/analyze", response_model=AnalyzeResponse, summary="Analyze and store a design snapshot")
def analyze(
    snapshot: DesignSnapshot,
    pipeline: AnalysisPipeline = Depends(get_pipeline),
) -> AnalyzeResponse:
    # sync route: FastAPI runs it in the threadpool, the generator call blocks
    outcome = pipeline.analyze(snapshot)
    return AnalyzeResponse(
        success=outcome.success,
        analysis=outcome.analysis,
        saved_to=outcome.saved_to,
        record_id=outcome.record_id,
        note=outcome.note,
    )


__all__ = ["router"]
