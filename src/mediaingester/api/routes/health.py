"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from mediaingester.api.routes.admin import get_workflow_config
from mediaingester.core.exceptions import ConfigurationError
from mediaingester.core.workflow_config import WorkflowConfig

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
def ready(config: WorkflowConfig = Depends(get_workflow_config)):
    """Ready once the core workflow parameters resolve."""
    try:
        table = config.pending_jobs_table()
        config.outputs_root_path()
    except ConfigurationError as exc:
        return JSONResponse(status_code=503, content={"status": "not ready", "detail": str(exc)})
    return {"status": "ready", "pending_jobs_table": table}
