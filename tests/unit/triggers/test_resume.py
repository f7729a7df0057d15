"""Tests for ResumeTrigger."""

from __future__ import annotations

import json

import pytest

from mediaingester.core.exceptions import OrchestrationError
from mediaingester.models.state import ContentType, MediaState, PendingScan
from mediaingester.triggers.resume import ResumeTrigger
from tests.fakes import MemoryJobStateStore


class RecordingOrchestrator:
    def __init__(self, fail: bool = False) -> None:
        self.started = []
        self._fail = fail

    def start_execution(self, name, state):
        if self._fail:
            raise OrchestrationError("throttled")
        self.started.append((name, state))
        return f"arn:execution:{name}"


# ---------- helpers ----------

def _event(*messages) -> dict:
    return {
        "Records": [
            {"Sns": {"Message": m if isinstance(m, str) else json.dumps(m), "Subject": None}}
            for m in messages
        ]
    }


def _suspended(job_id: str = "job-123", key: str = "inputs/clip.mp4") -> MediaState:
    state = MediaState(bucket="media-in", input_object_key=key, content_type=ContentType.VIDEO,
                       extension="mp4")
    state.suspend(PendingScan.MODERATION, job_id)
    return state


@pytest.fixture
def store():
    store = MemoryJobStateStore()
    store.put("job-123", _suspended())
    return store


@pytest.fixture
def orchestrator():
    return RecordingOrchestrator()


@pytest.fixture
def trigger(store, orchestrator):
    return ResumeTrigger(job_store=store, orchestrator=orchestrator)


# ---------- handle ----------

class TestSucceeded:
    def test_restarts_with_stored_state(self, trigger, store, orchestrator):
        names = trigger.handle(_event({"JobId": "job-123", "Status": "SUCCEEDED", "API": "StartContentModeration"}))

        [(name, state)] = orchestrator.started
        assert names == [name]
        assert name.startswith("clip.mp4")
        assert state.pending_scan_results is PendingScan.MODERATION
        assert state.pending_job_id == "job-123"
        assert "job-123" not in store

    def test_duplicate_delivery_is_noop(self, trigger, store, orchestrator):
        message = {"JobId": "job-123", "Status": "SUCCEEDED"}
        trigger.handle(_event(message))
        assert trigger.handle(_event(message)) == []
        assert len(orchestrator.started) == 1


class TestNotSucceeded:
    def test_failed_job_abandoned_and_entry_removed(self, trigger, store, orchestrator):
        assert trigger.handle(_event({"JobId": "job-123", "Status": "FAILED"})) == []
        assert orchestrator.started == []
        assert len(store) == 0


class TestFailures:
    def test_malformed_message_logged_and_skipped(self, trigger, store, orchestrator):
        assert trigger.handle(_event("not json", {"Status": "SUCCEEDED"})) == []
        assert orchestrator.started == []
        assert "job-123" in store

    def test_missing_status_still_deletes_entry(self, trigger, store):
        trigger.handle(_event({"JobId": "job-123"}))
        assert "job-123" not in store

    def test_orchestrator_failure_does_not_stop_other_records(self, store):
        store.put("job-456", _suspended("job-456", "inputs/other.mp4"))
        orchestrator = RecordingOrchestrator(fail=True)
        trigger = ResumeTrigger(job_store=store, orchestrator=orchestrator)

        names = trigger.handle(_event({"JobId": "job-123", "Status": "SUCCEEDED"},
                                      {"JobId": "job-456", "Status": "SUCCEEDED"}))

        assert names == []
        assert len(store) == 0
