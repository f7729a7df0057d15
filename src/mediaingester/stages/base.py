"""Shared dependency wiring and helpers for stage functions."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Optional

from mediaingester.core.config import TranscriptionConfig
from mediaingester.core.constants import MAX_KEYWORDS_OR_CELEBRITIES
from mediaingester.core.exceptions import AsyncJobFailedError, StageFailedError
from mediaingester.core.protocols import (
    IAsyncInference,
    IJobStateStore,
    INotifier,
    IObjectStore,
    ISpeechSynthesizer,
    ISyncInference,
    ITranscriber,
)
from mediaingester.core.workflow_config import WorkflowConfig
from mediaingester.models.inference import DetectionPage, JobStatus
from mediaingester.models.state import MediaState, PendingScan

logger = logging.getLogger(__name__)

PageFetcher = Callable[[str, Optional[str]], DetectionPage]


class StageServices:
    """Capabilities injected into every stage function.

    Stages hold no clients of their own; object storage, inference, speech,
    notification, the job-state store and configuration are all supplied here
    at construction time.
    """

    def __init__(
        self,
        *,
        config: WorkflowConfig,
        object_store: IObjectStore,
        inference: ISyncInference,
        async_inference: IAsyncInference,
        transcriber: ITranscriber,
        synthesizer: ISpeechSynthesizer,
        notifier: INotifier,
        job_store: IJobStateStore,
        transcription: TranscriptionConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config
        self.object_store = object_store
        self.inference = inference
        self.async_inference = async_inference
        self.transcriber = transcriber
        self.synthesizer = synthesizer
        self.notifier = notifier
        self.job_store = job_store
        self.transcription = transcription or TranscriptionConfig()
        self.sleep = sleep


def output_key(*parts: str) -> str:
    """Join key segments with '/', dropping empty segments and stray slashes."""
    return "/".join(part.strip("/") for part in parts if part and part.strip("/"))


def suspend_for_job(state: MediaState, services: StageServices,
                    scan: PendingScan, job_id: str) -> None:
    """Mark the state as waiting on an async job and persist it as the continuation."""
    state.suspend(scan, job_id)
    services.job_store.put(job_id, state)
    logger.info("Suspending workflow for %s pending %s job %s", state.location, scan, job_id,
                extra={"job_id": job_id, "object": state.location})


def require_pending(state: MediaState, scan: PendingScan, stage: str) -> str:
    if state.pending_scan_results is not scan or not state.pending_job_id:
        raise StageFailedError(stage, f"expected a pending {scan} job, state has "
                                      f"{state.pending_scan_results} ({state.pending_job_id})")
    return state.pending_job_id


def check_page(job_id: str, page: DetectionPage) -> None:
    if page.status is not JobStatus.SUCCEEDED:
        raise AsyncJobFailedError(job_id, page.status)


def collect_names(fetch: PageFetcher, job_id: str) -> list[str]:
    """Pull every result page for a job, de-duplicating names case-insensitively.

    Names keep the casing and order in which they were first seen.
    """
    seen: set[str] = set()
    names: list[str] = []
    next_token = None
    while True:
        page = fetch(job_id, next_token)
        check_page(job_id, page)
        for name in page.items:
            if name.casefold() not in seen:
                seen.add(name.casefold())
                names.append(name)
        next_token = page.next_token
        if not next_token:
            return names


def log_added(kind: str, state: MediaState, added: Iterable[str]) -> None:
    added = list(added)
    logger.info("Added %d %s for %s (limit %d)", len(added), kind, state.location,
                MAX_KEYWORDS_OR_CELEBRITIES, extra={"object": state.location, kind: added})
