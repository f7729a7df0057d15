"""Amazon Transcribe adapter implementing ITranscriber."""

from __future__ import annotations

from typing import Any

import boto3
import requests
from botocore.exceptions import ClientError

from mediaingester.core.exceptions import InferenceError
from mediaingester.models.inference import TranscriptionJob, TranscriptionStatus


class TranscribeTranscriber:
    """Speech-to-text jobs; transcripts are fetched from the service-managed URI."""

    def __init__(self, region: str = "us-east-1", endpoint_url: str | None = None,
                 language_code: str = "en-US", http_timeout: float = 30.0) -> None:
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("transcribe", **kwargs)
        self._language_code = language_code
        self._http_timeout = http_timeout

    def start_transcription(self, media_uri: str, job_name: str, media_format: str) -> str:
        try:
            self._client.start_transcription_job(
                TranscriptionJobName=job_name,
                LanguageCode=self._language_code,
                MediaFormat=media_format,
                Media={"MediaFileUri": media_uri},
            )
        except ClientError as exc:
            raise InferenceError(f"Transcribe start failed for job {job_name!r}: {exc}") from exc
        return job_name

    def get_transcription_job(self, job_name: str) -> TranscriptionJob:
        try:
            resp = self._client.get_transcription_job(TranscriptionJobName=job_name)
        except ClientError as exc:
            raise InferenceError(f"Transcribe status failed for job {job_name!r}: {exc}") from exc
        job: dict[str, Any] = resp["TranscriptionJob"]
        return TranscriptionJob(
            job_name=job_name,
            status=TranscriptionStatus(job["TranscriptionJobStatus"]),
            transcript_uri=job.get("Transcript", {}).get("TranscriptFileUri"),
            failure_reason=job.get("FailureReason", ""),
        )

    def fetch_transcript(self, transcript_uri: str) -> str:
        """Download the transcript document and return its plain text."""
        try:
            resp = requests.get(transcript_uri, timeout=self._http_timeout)
            resp.raise_for_status()
            document = resp.json()
        except (requests.RequestException, ValueError) as exc:
            raise InferenceError(f"Transcript download failed: {exc}") from exc
        try:
            return document["results"]["transcripts"][0]["transcript"]
        except (KeyError, IndexError, TypeError) as exc:
            raise InferenceError("Transcript document has no transcript text") from exc
