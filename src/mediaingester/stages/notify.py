"""Notify stage: publish the final state to the ingest-completed topic."""

from __future__ import annotations

import logging

from mediaingester.core.constants import INGEST_COMPLETED_TOPIC_PARAM, MAX_NOTIFICATION_SUBJECT_LENGTH
from mediaingester.core.exceptions import ConfigurationError
from mediaingester.models.stage import Stage
from mediaingester.models.state import MediaState
from mediaingester.stages.base import StageServices
from mediaingester.stages.registry import stage

logger = logging.getLogger(__name__)

FALLBACK_SUBJECT = "Ingest completed"


def notification_subject(state: MediaState) -> str:
    subject = f"Ingest completed for {state.location}"
    # topic subjects must be shorter than 100 characters
    if len(subject) >= MAX_NOTIFICATION_SUBJECT_LENGTH:
        return FALLBACK_SUBJECT
    return subject


@stage(Stage.NOTIFY)
def send_completion_notification(state: MediaState, services: StageServices) -> MediaState:
    try:
        topic_arn = services.config.ingest_completed_topic_arn()
    except ConfigurationError:
        logger.warning("Notification topic not set in parameter %s, skipping notification",
                       INGEST_COMPLETED_TOPIC_PARAM)
        return state

    logger.info("Sending ingest notification for %s, category %s", state.location, state.content_type)
    services.notifier.publish(topic_arn, notification_subject(state), state.to_json())
    return state
