"""ResumeTrigger: restarts a workflow when an async inference job completes."""

from __future__ import annotations

import json
import logging
from typing import Optional

from pydantic import ValidationError

from mediaingester.core.constants import JOB_COMPLETION_JOB_ID_FIELD
from mediaingester.core.exceptions import StorageError
from mediaingester.core.protocols import IJobStateStore, IOrchestrator
from mediaingester.models.events import JobCompletionMessage, SNSEvent
from mediaingester.triggers.naming import make_workflow_name

logger = logging.getLogger(__name__)


def _salvage_job_id(raw: str) -> str:
    """Best-effort job id from a message that failed validation."""
    try:
        payload = json.loads(raw)
    except ValueError:
        return ""
    if isinstance(payload, dict):
        value = payload.get(JOB_COMPLETION_JOB_ID_FIELD)
        return value if isinstance(value, str) else ""
    return ""


class ResumeTrigger:
    """Turns a job completion notice back into a running workflow.

    The stored continuation is deleted whatever the outcome, so a second
    notice for the same job finds nothing and does nothing.
    """

    def __init__(self, *, job_store: IJobStateStore, orchestrator: IOrchestrator) -> None:
        self._job_store = job_store
        self._orchestrator = orchestrator

    def handle(self, event: SNSEvent | dict) -> list[str]:
        """Process every record; returns the names of the executions started."""
        if isinstance(event, dict):
            event = SNSEvent.model_validate(event)

        started: list[str] = []
        for record in event.records:
            name = self.handle_message(record.sns.message)
            if name:
                started.append(name)
        return started

    def handle_message(self, raw: str) -> Optional[str]:
        job_id = ""
        try:
            message = JobCompletionMessage.model_validate_json(raw)
            job_id = message.job_id
            logger.info("Job %s completed with status %s", job_id, message.status,
                        extra={"job_id": job_id, "status": message.status})

            state = self._job_store.get(job_id)
            if state is None:
                logger.info("No pending workflow state for job %s, already handled", job_id,
                            extra={"job_id": job_id})
                return None

            if not message.succeeded:
                logger.warning("Job %s on object %s failed, cancelling further processing",
                               job_id, state.location, extra={"job_id": job_id})
                return None

            name = make_workflow_name(state.input_object_key)
            logger.info("Restarting workflow for object %s after %s scan", state.location,
                        state.pending_scan_results, extra={"job_id": job_id, "execution": name})
            self._orchestrator.start_execution(name, state)
            return name
        except ValidationError:
            job_id = _salvage_job_id(raw)
            logger.exception("Malformed job completion message for job %r", job_id)
            return None
        except Exception:
            logger.exception("Failed to restart workflow for job %s", job_id, extra={"job_id": job_id})
            return None
        finally:
            try:
                self._job_store.delete(job_id)
            except StorageError:
                logger.exception("Failed to remove pending workflow state for job %s", job_id,
                                 extra={"job_id": job_id})
