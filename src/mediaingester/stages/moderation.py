"""Moderation stages: flag unsafe images synchronously, videos via an async job."""

from __future__ import annotations

import logging

from mediaingester.classifier import MODERATABLE_IMAGE_EXTENSIONS
from mediaingester.models.stage import Stage
from mediaingester.models.state import ContentType, MediaState, PendingScan
from mediaingester.stages.base import StageServices, check_page, require_pending, suspend_for_job
from mediaingester.stages.registry import stage

logger = logging.getLogger(__name__)


@stage(Stage.MODERATE)
def moderate(state: MediaState, services: StageServices) -> MediaState:
    logger.info("Checking content %s for unsafe content", state.location)
    min_confidence = services.config.min_moderation_confidence()

    if state.content_type is ContentType.IMAGE:
        if state.extension not in MODERATABLE_IMAGE_EXTENSIONS:
            logger.info("Image extension %s is not supported for moderation, skipping", state.extension)
            return state

        labels = services.inference.detect_moderation_labels(
            state.bucket, state.input_object_key, min_confidence)
        if labels:
            state.mark_unsafe()
            logger.warning("Content %s triggered moderation labels, tagging as unsafe", state.location,
                           extra={"object": state.location, "moderation_labels": labels})
        else:
            logger.info("Image %s passed moderation check", state.location)

    elif state.content_type is ContentType.VIDEO:
        topic_arn = services.config.async_completed_topic_arn()
        role_arn = services.config.rekognition_role_arn()
        job_id = services.async_inference.start_content_moderation(
            state.bucket, state.input_object_key, min_confidence, topic_arn, role_arn)
        suspend_for_job(state, services, PendingScan.MODERATION, job_id)

    else:
        logger.info("Moderation does not apply to %s content, skipping", state.content_type)

    return state


@stage(Stage.RESUME_AFTER_MODERATION)
def resume_after_moderation(state: MediaState, services: StageServices) -> MediaState:
    """Read the finished moderation job's pages until one flags the video."""
    job_id = require_pending(state, PendingScan.MODERATION, Stage.RESUME_AFTER_MODERATION)

    next_token = None
    while True:
        page = services.async_inference.get_content_moderation(job_id, next_token)
        check_page(job_id, page)
        if page.items:
            state.mark_unsafe()
            logger.warning("Content %s triggered moderation labels, tagging as unsafe", state.location,
                           extra={"object": state.location, "job_id": job_id,
                                  "moderation_labels": page.items})
        next_token = page.next_token
        if not next_token or state.is_unsafe:
            break

    if not state.is_unsafe:
        logger.info("Video %s passed moderation", state.location)

    state.clear_pending()
    return state
