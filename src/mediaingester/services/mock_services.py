"""Mock inference and speech services for local development and testing.

Return canned responses. No AWS calls.
"""

from __future__ import annotations

import itertools
from typing import Optional

from mediaingester.core.exceptions import InferenceError
from mediaingester.models.inference import (
    DetectionPage,
    JobStatus,
    TranscriptionJob,
    TranscriptionStatus,
)


class MockInference:
    """ISyncInference + IAsyncInference returning deterministic canned results.

    Sync results are registered per object key; async jobs return the pages
    registered with ``set_pages`` under the job id they were started with.
    """

    def __init__(self, job_id_prefix: str = "job") -> None:
        self._job_ids = (f"{job_id_prefix}-{n}" for n in itertools.count(1))
        self.moderation_labels: dict[str, list[str]] = {}
        self.labels: dict[str, list[str]] = {}
        self.celebrities: dict[str, list[str]] = {}
        self.next_job_ids: list[str] = []
        self.started_jobs: list[dict[str, object]] = []
        self._pages: dict[str, list[DetectionPage]] = {}

    # ---- canned data ----

    def set_pages(self, job_id: str, pages: list[list[str]],
                  status: JobStatus = JobStatus.SUCCEEDED) -> None:
        """Register result pages for a job; tokens chain the pages in order."""
        built = []
        for index, items in enumerate(pages):
            token = f"{job_id}-page-{index + 1}" if index + 1 < len(pages) else None
            built.append(DetectionPage(items=items, next_token=token, status=status))
        self._pages[job_id] = built or [DetectionPage(status=status)]

    def _next_job_id(self) -> str:
        if self.next_job_ids:
            return self.next_job_ids.pop(0)
        return next(self._job_ids)

    def _page(self, job_id: str, next_token: Optional[str]) -> DetectionPage:
        pages = self._pages.get(job_id)
        if pages is None:
            raise InferenceError(f"Unknown job {job_id!r}")
        if next_token is None:
            return pages[0]
        index = int(next_token.rsplit("-", 1)[-1])
        return pages[index]

    # ---- ISyncInference ----

    def detect_moderation_labels(self, bucket: str, key: str, min_confidence: float) -> list[str]:
        return list(self.moderation_labels.get(key, []))

    def detect_labels(self, bucket: str, key: str, min_confidence: float) -> list[str]:
        return list(self.labels.get(key, []))

    def recognize_celebrities(self, bucket: str, key: str) -> list[str]:
        return list(self.celebrities.get(key, []))

    # ---- IAsyncInference ----

    def _start(self, kind: str, bucket: str, key: str, **extra: object) -> str:
        job_id = self._next_job_id()
        self.started_jobs.append({"kind": kind, "job_id": job_id, "bucket": bucket, "key": key, **extra})
        return job_id

    def start_content_moderation(self, bucket: str, key: str, min_confidence: float,
                                 topic_arn: str, role_arn: str) -> str:
        return self._start("moderation", bucket, key, min_confidence=min_confidence,
                           topic_arn=topic_arn, role_arn=role_arn)

    def start_label_detection(self, bucket: str, key: str, min_confidence: float,
                              topic_arn: str, role_arn: str) -> str:
        return self._start("labels", bucket, key, min_confidence=min_confidence,
                           topic_arn=topic_arn, role_arn=role_arn)

    def start_celebrity_recognition(self, bucket: str, key: str,
                                    topic_arn: str, role_arn: str) -> str:
        return self._start("celebrities", bucket, key, topic_arn=topic_arn, role_arn=role_arn)

    def get_content_moderation(self, job_id: str, next_token: Optional[str] = None) -> DetectionPage:
        return self._page(job_id, next_token)

    def get_label_detection(self, job_id: str, next_token: Optional[str] = None) -> DetectionPage:
        return self._page(job_id, next_token)

    def get_celebrity_recognition(self, job_id: str, next_token: Optional[str] = None) -> DetectionPage:
        return self._page(job_id, next_token)


class MockTranscriber:
    """ITranscriber that reports a scripted sequence of job statuses."""

    def __init__(self, transcript: str = "mock transcript",
                 statuses: Optional[list[TranscriptionStatus]] = None,
                 failure_reason: str = "") -> None:
        self._transcript = transcript
        self._statuses = list(statuses or [TranscriptionStatus.COMPLETED])
        self._failure_reason = failure_reason
        self.started: list[dict[str, str]] = []
        self.polls = 0

    def start_transcription(self, media_uri: str, job_name: str, media_format: str) -> str:
        self.started.append({"media_uri": media_uri, "job_name": job_name, "media_format": media_format})
        return job_name

    def get_transcription_job(self, job_name: str) -> TranscriptionJob:
        self.polls += 1
        status = self._statuses.pop(0) if len(self._statuses) > 1 else self._statuses[0]
        return TranscriptionJob(
            job_name=job_name,
            status=status,
            transcript_uri=f"https://transcripts.example/{job_name}.json"
            if status is TranscriptionStatus.COMPLETED else None,
            failure_reason=self._failure_reason if status is TranscriptionStatus.FAILED else "",
        )

    def fetch_transcript(self, transcript_uri: str) -> str:
        return self._transcript


class MockSpeechSynthesizer:
    """ISpeechSynthesizer returning fake mp3 bytes derived from the input."""

    def __init__(self) -> None:
        self.requests: list[dict[str, str]] = []

    def synthesize(self, text: str, voice_id: str) -> bytes:
        self.requests.append({"text": text, "voice_id": voice_id})
        return b"ID3" + text.encode("utf-8")
