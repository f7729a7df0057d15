"""Admin endpoints for inspecting suspended workflows."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from mediaingester.core.protocols import IJobStateStore
from mediaingester.core.workflow_config import WorkflowConfig
from mediaingester.models.state import MediaState
from mediaingester.orchestration.router import entry_stage
from mediaingester.persistence import create_config, create_persistence

router = APIRouter(tags=["admin"])


def get_workflow_config(request: Request) -> WorkflowConfig:
    return create_config(request.app.state.settings)


def get_job_store(request: Request) -> IJobStateStore:
    if request.app.state.job_store is None:
        _, job_store, _ = create_persistence(request.app.state.settings)
        request.app.state.job_store = job_store
    return request.app.state.job_store


@router.get("/jobs/{job_id}")
def get_job(job_id: str, job_store: IJobStateStore = Depends(get_job_store)) -> dict:
    """Return the workflow state waiting on an async job."""
    state = job_store.get(job_id)
    if state is None:
        raise HTTPException(status_code=404, detail=f"No pending workflow for job {job_id}")
    return state.to_payload()


@router.post("/route")
def route(payload: dict) -> dict:
    """Return the stage an execution seeded with this state would start at."""
    try:
        state = MediaState.from_payload(payload)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return {"Stage": str(entry_stage(state)), "State": state.to_payload()}
