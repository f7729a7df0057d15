"""Protocol interfaces for every external capability the workflow uses.

Stages depend on these Protocols only; boto3-backed adapters and the
in-memory fakes both satisfy them structurally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mediaingester.core.types import TagSet
    from mediaingester.models.inference import DetectionPage, TranscriptionJob
    from mediaingester.models.state import MediaState


# ---------------------------------------------------------------------------
# Object storage
# ---------------------------------------------------------------------------

@runtime_checkable
class IObjectStore(Protocol):
    """S3-compatible object storage."""

    def get(self, bucket: str, key: str) -> bytes: ...

    def put(self, bucket: str, key: str, data: bytes,
            tags: Optional[TagSet] = None) -> None: ...

    def copy(self, src_bucket: str, src_key: str, dst_bucket: str, dst_key: str,
             tags: Optional[TagSet] = None) -> None: ...

    def delete(self, bucket: str, key: str) -> None: ...

    def locate(self, bucket: str) -> str: ...


# ---------------------------------------------------------------------------
# Inference
# ---------------------------------------------------------------------------

@runtime_checkable
class ISyncInference(Protocol):
    """Image-sized detection calls that answer in a single request."""

    def detect_moderation_labels(self, bucket: str, key: str, min_confidence: float) -> list[str]: ...

    def detect_labels(self, bucket: str, key: str, min_confidence: float) -> list[str]: ...

    def recognize_celebrities(self, bucket: str, key: str) -> list[str]: ...


@runtime_checkable
class IAsyncInference(Protocol):
    """Video-sized detection jobs that report completion to a topic."""

    def start_content_moderation(self, bucket: str, key: str, min_confidence: float,
                                 topic_arn: str, role_arn: str) -> str: ...

    def start_label_detection(self, bucket: str, key: str, min_confidence: float,
                              topic_arn: str, role_arn: str) -> str: ...

    def start_celebrity_recognition(self, bucket: str, key: str,
                                    topic_arn: str, role_arn: str) -> str: ...

    def get_content_moderation(self, job_id: str, next_token: Optional[str] = None) -> DetectionPage: ...

    def get_label_detection(self, job_id: str, next_token: Optional[str] = None) -> DetectionPage: ...

    def get_celebrity_recognition(self, job_id: str, next_token: Optional[str] = None) -> DetectionPage: ...


# ---------------------------------------------------------------------------
# Speech
# ---------------------------------------------------------------------------

@runtime_checkable
class ITranscriber(Protocol):
    """Speech-to-text jobs."""

    def start_transcription(self, media_uri: str, job_name: str, media_format: str) -> str: ...

    def get_transcription_job(self, job_name: str) -> TranscriptionJob: ...

    def fetch_transcript(self, transcript_uri: str) -> str: ...


@runtime_checkable
class ISpeechSynthesizer(Protocol):
    """Text-to-speech synthesis."""

    def synthesize(self, text: str, voice_id: str) -> bytes: ...


# ---------------------------------------------------------------------------
# Notification bus
# ---------------------------------------------------------------------------

@runtime_checkable
class INotifier(Protocol):
    def publish(self, topic_arn: str, subject: str, message: str) -> str: ...


# ---------------------------------------------------------------------------
# Job-state store
# ---------------------------------------------------------------------------

@runtime_checkable
class IJobStateStore(Protocol):
    """Durable continuation storage keyed by async job id.

    ``get`` returns ``None`` and ``delete`` does nothing for ids that were
    already removed, so duplicate completion notices are harmless.
    """

    def put(self, job_id: str, state: MediaState) -> None: ...

    def get(self, job_id: str) -> Optional[MediaState]: ...

    def delete(self, job_id: str) -> None: ...


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------

@runtime_checkable
class IOrchestrator(Protocol):
    """Starts a named workflow execution seeded with a state record."""

    def start_execution(self, name: str, state: MediaState) -> str: ...


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@runtime_checkable
class IParameterSource(Protocol):
    """Resolves a workflow parameter by name; raises ConfigurationError if unset."""

    def get_parameter(self, name: str) -> str: ...


@runtime_checkable
class ICacheBackend(Protocol):
    """Redis-compatible cache interface."""

    def get(self, key: str) -> str | None: ...

    def setex(self, key: str, ttl: int, value: str) -> None: ...

    def delete(self, key: str) -> None: ...
