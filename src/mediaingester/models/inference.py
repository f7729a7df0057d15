"""Result shapes returned by the inference, transcription and orchestration adapters."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field


class JobStatus(StrEnum):
    IN_PROGRESS = "IN_PROGRESS"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


class DetectionPage(BaseModel):
    """One page of results from an async detection job."""

    items: list[str] = Field(default_factory=list)
    next_token: Optional[str] = None
    status: JobStatus = JobStatus.SUCCEEDED


class TranscriptionStatus(StrEnum):
    QUEUED = "QUEUED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class TranscriptionJob(BaseModel):
    job_name: str
    status: TranscriptionStatus
    transcript_uri: Optional[str] = None
    failure_reason: str = ""

    @property
    def finished(self) -> bool:
        return self.status in (TranscriptionStatus.COMPLETED, TranscriptionStatus.FAILED)
