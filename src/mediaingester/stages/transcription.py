"""AudioToText stage: transcribe audio objects into plain text objects."""

from __future__ import annotations

import logging
import posixpath
import re
import time
from urllib.parse import quote

from mediaingester.core.constants import TEXT_FROM_AUDIO_OUTPUT_SUBPATH
from mediaingester.core.exceptions import TranscriptionTimeoutError
from mediaingester.models.inference import TranscriptionJob, TranscriptionStatus
from mediaingester.models.stage import Stage
from mediaingester.models.state import ContentType, MediaState
from mediaingester.stages.base import StageServices, output_key
from mediaingester.stages.registry import stage

logger = logging.getLogger(__name__)

_JOB_NAME_DISALLOWED = re.compile(r"[^0-9A-Za-z._-]")
_MAX_JOB_NAME_LENGTH = 200


def make_job_name(bucket: str, key: str, now_ns: int | None = None) -> str:
    suffix = str(now_ns if now_ns is not None else time.time_ns())
    base = _JOB_NAME_DISALLOWED.sub("_", f"{bucket}_{key}")
    return f"{base[:_MAX_JOB_NAME_LENGTH - len(suffix) - 1]}_{suffix}"


def wait_for_transcription(services: StageServices, job_name: str) -> TranscriptionJob:
    """Poll a transcription job with bounded exponential backoff.

    Raises TranscriptionTimeoutError once the configured budget is spent.
    """
    cfg = services.transcription
    delay = cfg.initial_poll_seconds
    waited = 0.0
    while waited < cfg.max_wait_seconds:
        pause = min(delay, cfg.max_poll_seconds, cfg.max_wait_seconds - waited)
        services.sleep(pause)
        waited += pause

        job = services.transcriber.get_transcription_job(job_name)
        logger.info("Transcription job %s status is %s", job_name, job.status,
                    extra={"job_name": job_name, "waited_seconds": waited})
        if job.finished:
            return job
        delay *= cfg.backoff_factor

    raise TranscriptionTimeoutError(job_name, waited)


@stage(Stage.AUDIO_TO_TEXT)
def convert_audio_to_text(state: MediaState, services: StageServices) -> MediaState:
    if state.content_type is not ContentType.AUDIO:
        logger.info("Transcription only applies to audio, skipping %s", state.location)
        return state

    logger.info("Converting audio in %s to text", state.location)
    outputs_root = services.config.outputs_root_path()

    region = services.object_store.locate(state.bucket)
    media_uri = f"https://s3.{region}.amazonaws.com/{state.bucket}/{quote(state.input_object_key)}"
    job_name = make_job_name(state.bucket, state.input_object_key)
    logger.info("Starting transcription job %s", job_name)
    services.transcriber.start_transcription(media_uri, job_name, state.extension or "mp3")

    job = wait_for_transcription(services, job_name)
    if job.status is not TranscriptionStatus.COMPLETED:
        logger.error("Audio conversion of %s failed with reason %r", state.location, job.failure_reason,
                     extra={"object": state.location, "job_name": job_name})
        return state

    text = services.transcriber.fetch_transcript(job.transcript_uri or "")
    base_name, _ = posixpath.splitext(posixpath.basename(state.input_object_key))
    text_key = output_key(outputs_root, TEXT_FROM_AUDIO_OUTPUT_SUBPATH, f"{base_name}.txt")
    logger.info("Writing transcript to %s::/%s", state.bucket, text_key)
    services.object_store.put(state.bucket, text_key, text.encode("utf-8"))
    state.output_object_key = text_key
    return state
