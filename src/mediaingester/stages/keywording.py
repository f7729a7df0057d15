"""Keyword stages: label detection for images and videos."""

from __future__ import annotations

import logging

from mediaingester.models.stage import Stage
from mediaingester.models.state import ContentType, MediaState, PendingScan
from mediaingester.stages.base import (
    StageServices,
    collect_names,
    log_added,
    require_pending,
    suspend_for_job,
)
from mediaingester.stages.registry import stage

logger = logging.getLogger(__name__)


@stage(Stage.KEYWORD)
def detect_keywords(state: MediaState, services: StageServices) -> MediaState:
    min_confidence = services.config.min_keyword_confidence()

    if state.content_type is ContentType.IMAGE:
        logger.info("Looking for labels in image %s at or above confidence %s",
                    state.location, min_confidence)
        labels = services.inference.detect_labels(state.bucket, state.input_object_key, min_confidence)
        log_added("keywords", state, state.add_keywords(labels))

    elif state.content_type is ContentType.VIDEO:
        logger.info("Starting label detection job for video %s at or above confidence %s",
                    state.location, min_confidence)
        topic_arn = services.config.async_completed_topic_arn()
        role_arn = services.config.rekognition_role_arn()
        job_id = services.async_inference.start_label_detection(
            state.bucket, state.input_object_key, min_confidence, topic_arn, role_arn)
        suspend_for_job(state, services, PendingScan.KEYWORDING, job_id)

    else:
        logger.info("Keywording does not apply to %s content in %s, skipping",
                    state.content_type, state.location)

    return state


@stage(Stage.RESUME_AFTER_KEYWORDING)
def resume_after_keywording(state: MediaState, services: StageServices) -> MediaState:
    job_id = require_pending(state, PendingScan.KEYWORDING, Stage.RESUME_AFTER_KEYWORDING)
    names = collect_names(services.async_inference.get_label_detection, job_id)
    log_added("keywords", state, state.add_keywords(names))
    state.clear_pending()
    return state
