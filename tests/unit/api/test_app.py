"""Tests for the admin FastAPI app using TestClient."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from mediaingester.api.app import create_app
from mediaingester.api.routes.admin import get_job_store, get_workflow_config
from mediaingester.core.workflow_config import WorkflowConfig
from mediaingester.models.state import ContentType, MediaState, PendingScan
from tests.fakes import DEFAULT_PARAMETERS, MemoryJobStateStore, MemoryParameterSource


@pytest.fixture
def job_store():
    return MemoryJobStateStore()


@pytest.fixture
def parameters():
    return MemoryParameterSource(DEFAULT_PARAMETERS)


@pytest.fixture
def client(job_store, parameters):
    app = create_app()
    app.dependency_overrides[get_job_store] = lambda: job_store
    app.dependency_overrides[get_workflow_config] = lambda: WorkflowConfig(parameters)
    with TestClient(app) as test_client:
        yield test_client


def _suspended() -> MediaState:
    state = MediaState(bucket="media-in", input_object_key="clip.mp4", content_type=ContentType.VIDEO)
    state.suspend(PendingScan.CELEBRITY_DETECTION, "job-77")
    return state


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_ready(self, client):
        resp = client.get("/ready")
        assert resp.status_code == 200
        assert resp.json()["pending_jobs_table"] == "pending-jobs"

    def test_not_ready_without_parameters(self, client, parameters):
        parameters.remove("/mediaingester/pending-jobs-table")
        resp = client.get("/ready")
        assert resp.status_code == 503
        assert resp.json()["status"] == "not ready"


class TestJobs:
    def test_returns_stored_state(self, client, job_store):
        job_store.put("job-77", _suspended())
        resp = client.get("/admin/jobs/job-77")
        assert resp.status_code == 200
        assert resp.json()["PendingScanResults"] == "CelebrityDetection"
        assert resp.json()["PendingJobId"] == "job-77"

    def test_unknown_job_is_404(self, client):
        assert client.get("/admin/jobs/nope").status_code == 404


class TestRoute:
    def test_fresh_state_routes_to_classify(self, client):
        resp = client.post("/admin/route", json={"Bucket": "b", "InputObjectKey": "a.jpg"})
        assert resp.status_code == 200
        assert resp.json()["Stage"] == "Classify"

    def test_suspended_state_routes_to_resume_stage(self, client):
        resp = client.post("/admin/route", json=_suspended().to_payload())
        assert resp.json()["Stage"] == "ResumeAfterCelebrityDetection"

    def test_inconsistent_state_rejected(self, client):
        resp = client.post("/admin/route", json={
            "Bucket": "b", "InputObjectKey": "a.mp4", "PendingScanResults": "Moderation",
        })
        assert resp.status_code == 422
