"""Media ingester exception hierarchy."""

from __future__ import annotations


class MediaIngesterError(Exception):
    """Base exception for all media ingester errors."""


class ConfigurationError(MediaIngesterError):
    """A required workflow parameter could not be resolved."""

    def __init__(self, parameter: str, message: str = "") -> None:
        self.parameter = parameter
        detail = f": {message}" if message else ""
        super().__init__(f"Configuration parameter {parameter!r} unavailable{detail}")


class StorageError(MediaIngesterError):
    """Object storage or job-state storage operation failed."""


class InferenceError(MediaIngesterError):
    """An inference, transcription or speech synthesis call failed."""


class NotificationError(MediaIngesterError):
    """Publishing to a notification topic failed."""


class OrchestrationError(MediaIngesterError):
    """Starting a workflow execution failed."""


class InvalidStateError(MediaIngesterError):
    """A workflow state record violates its invariants."""


class RoutingError(MediaIngesterError):
    """The router has no transition for the completed stage."""

    def __init__(self, stage: str, content_type: str) -> None:
        self.stage = stage
        self.content_type = content_type
        super().__init__(f"No transition after stage {stage} for content type {content_type}")


class StageFailedError(MediaIngesterError):
    """A workflow stage failed."""

    def __init__(self, stage: str, message: str) -> None:
        self.stage = stage
        super().__init__(f"Stage {stage} failed: {message}")


class AsyncJobFailedError(MediaIngesterError):
    """An asynchronous inference job reported a terminal failure."""

    def __init__(self, job_id: str, status: str) -> None:
        self.job_id = job_id
        self.status = status
        super().__init__(f"Async job {job_id} finished with status {status}")


class TranscriptionTimeoutError(MediaIngesterError):
    """A transcription job did not finish within the polling budget."""

    def __init__(self, job_name: str, waited_seconds: float) -> None:
        self.job_name = job_name
        self.waited_seconds = waited_seconds
        super().__init__(f"Transcription job {job_name} still running after {waited_seconds:.0f}s")
