"""Shared test doubles: re-exports of the memory backends and mock services."""

from __future__ import annotations

from typing import Optional

from mediaingester.core import constants
from mediaingester.core.config import TranscriptionConfig
from mediaingester.core.workflow_config import WorkflowConfig
from mediaingester.models.state import MediaState
from mediaingester.persistence.memory_backend import (
    MemoryCacheBackend,
    MemoryJobStateStore,
    MemoryNotifier,
    MemoryObjectStore,
    MemoryParameterSource,
)
from mediaingester.services.mock_services import (
    MockInference,
    MockSpeechSynthesizer,
    MockTranscriber,
)
from mediaingester.stages import StageServices

BUCKET = "media-bucket"
INGEST_TOPIC = "arn:aws:sns:us-east-1:123456789012:ingest-completed"
ASYNC_TOPIC = "arn:aws:sns:us-east-1:123456789012:async-completed"
ROLE_ARN = "arn:aws:iam::123456789012:role/rekognition"

DEFAULT_PARAMETERS: dict[str, str] = {
    constants.STATE_MACHINE_ARN_PARAM: "arn:aws:states:us-east-1:123456789012:stateMachine:ingest",
    constants.INPUTS_ROOT_PATH_PARAM: "inputs",
    constants.OUTPUTS_ROOT_PATH_PARAM: "outputs",
    constants.MIN_MODERATION_CONFIDENCE_PARAM: "60",
    constants.MIN_KEYWORD_CONFIDENCE_PARAM: "70",
    constants.VOICE_ID_PARAM: "Joanna",
    constants.THUMBNAIL_MAX_DIMENSION_PARAM: "100",
    constants.PENDING_JOBS_TABLE_PARAM: "pending-jobs",
    constants.ASYNC_COMPLETED_TOPIC_PARAM: ASYNC_TOPIC,
    constants.INGEST_COMPLETED_TOPIC_PARAM: INGEST_TOPIC,
    constants.REKOGNITION_ROLE_PARAM: ROLE_ARN,
}


def make_services(
    parameters: Optional[dict[str, str]] = None,
    transcriber: Optional[MockTranscriber] = None,
    transcription: Optional[TranscriptionConfig] = None,
) -> StageServices:
    """StageServices wired entirely to in-memory fakes; sleeps are recorded, not taken."""
    values = dict(DEFAULT_PARAMETERS)
    values.update(parameters or {})
    inference = MockInference()
    sleeps: list[float] = []
    services = StageServices(
        config=WorkflowConfig(MemoryParameterSource(values)),
        object_store=MemoryObjectStore(),
        inference=inference,
        async_inference=inference,
        transcriber=transcriber or MockTranscriber(),
        synthesizer=MockSpeechSynthesizer(),
        notifier=MemoryNotifier(),
        job_store=MemoryJobStateStore(),
        transcription=transcription,
        sleep=sleeps.append,
    )
    services.sleeps = sleeps
    return services


def make_state(key: str = "inputs/photo.jpg", **fields) -> MediaState:
    return MediaState(bucket=BUCKET, input_object_key=key, **fields)


__all__ = [
    "ASYNC_TOPIC",
    "BUCKET",
    "DEFAULT_PARAMETERS",
    "INGEST_TOPIC",
    "MemoryCacheBackend",
    "MemoryJobStateStore",
    "MemoryNotifier",
    "MemoryObjectStore",
    "MemoryParameterSource",
    "MockInference",
    "MockSpeechSynthesizer",
    "MockTranscriber",
    "ROLE_ARN",
    "make_services",
    "make_state",
]
