"""NewObjectTrigger: starts a workflow execution for each newly created object."""

from __future__ import annotations

import logging

from mediaingester.core.constants import FOLDER_MARKER_SUFFIX
from mediaingester.core.protocols import IOrchestrator
from mediaingester.core.workflow_config import WorkflowConfig
from mediaingester.models.events import S3Event
from mediaingester.models.state import MediaState
from mediaingester.triggers.naming import make_workflow_name

logger = logging.getLogger(__name__)


def is_folder_marker(key: str, inputs_root: str) -> bool:
    """Pseudo-objects some client tools create to represent folders."""
    root = inputs_root.strip("/")
    if key.endswith("/") or key.endswith(FOLDER_MARKER_SUFFIX):
        return True
    return key.strip("/") == root or key == f"{root}/{root}{FOLDER_MARKER_SUFFIX}"


class NewObjectTrigger:
    """Cold start: one execution per object-created record."""

    def __init__(self, *, config: WorkflowConfig, orchestrator: IOrchestrator) -> None:
        self._config = config
        self._orchestrator = orchestrator

    def handle(self, event: S3Event | dict) -> list[str]:
        """Start executions for the event's records; returns the execution names."""
        if isinstance(event, dict):
            event = S3Event.model_validate(event)

        inputs_root = self._config.inputs_root_path()
        started: list[str] = []
        for record in event.records:
            key = record.s3.object.decoded_key
            bucket = record.s3.bucket.name
            if is_folder_marker(key, inputs_root):
                logger.info("Skipping folder marker object %s::/%s", bucket, key)
                continue

            name = make_workflow_name(key)
            logger.info("Starting workflow for object %s::/%s", bucket, key,
                        extra={"execution": name, "object": f"{bucket}::/{key}"})
            self._orchestrator.start_execution(name, MediaState(bucket=bucket, input_object_key=key))
            started.append(name)
        return started
