"""Celebrity stages: only run when keywording found a person in the content."""

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


@stage(Stage.CELEBRITY_CHECK)
def detect_celebrities(state: MediaState, services: StageServices) -> MediaState:
    if not state.has_person():
        logger.info("Keywords for %s do not indicate a person, skipping celebrity check", state.location)
        return state

    if state.content_type is ContentType.IMAGE:
        logger.info("Performing celebrity check on image %s", state.location)
        names = services.inference.recognize_celebrities(state.bucket, state.input_object_key)
        log_added("celebrities", state, state.add_celebrities(names))

    elif state.content_type is ContentType.VIDEO:
        logger.info("Starting celebrity recognition job for video %s", state.location)
        topic_arn = services.config.async_completed_topic_arn()
        role_arn = services.config.rekognition_role_arn()
        job_id = services.async_inference.start_celebrity_recognition(
            state.bucket, state.input_object_key, topic_arn, role_arn)
        suspend_for_job(state, services, PendingScan.CELEBRITY_DETECTION, job_id)

    else:
        logger.info("Celebrity check does not apply to %s content in %s, skipping",
                    state.content_type, state.location)

    return state


@stage(Stage.RESUME_AFTER_CELEBRITY_DETECTION)
def resume_after_celebrity_detection(state: MediaState, services: StageServices) -> MediaState:
    job_id = require_pending(state, PendingScan.CELEBRITY_DETECTION,
                             Stage.RESUME_AFTER_CELEBRITY_DETECTION)
    names = collect_names(services.async_inference.get_celebrity_recognition, job_id)
    log_added("celebrities", state, state.add_celebrities(names))
    state.clear_pending()
    return state
