"""The workflow state machine: which stage runs next for a given state.

Routing lives here rather than inside the stages. A fresh execution starts at
``entry_stage``; after each stage ``next_stage`` looks at what just ran and
the state it produced.

    Classify -> Moderate -> [unsafe: RemoveInput] -> Keyword -> CelebrityCheck
             -> Thumbnail (images) -> CopyAndTag -> RemoveInput -> Notify -> End
    Classify -> TextToAudio | AudioToText -> RemoveInput -> Notify -> End
    Classify -> RemoveInput (unknown content) -> Notify -> End

A stage that leaves an async job pending ends the execution; the execution
started for the job's completion notice enters at the matching resume stage.
"""

from __future__ import annotations

from typing import Optional

from mediaingester.core.exceptions import RoutingError
from mediaingester.models.stage import Stage
from mediaingester.models.state import ContentType, MediaState, PendingScan

RESUME_STAGES: dict[PendingScan, Stage] = {
    PendingScan.MODERATION: Stage.RESUME_AFTER_MODERATION,
    PendingScan.KEYWORDING: Stage.RESUME_AFTER_KEYWORDING,
    PendingScan.CELEBRITY_DETECTION: Stage.RESUME_AFTER_CELEBRITY_DETECTION,
}

MODERATION_STAGES = frozenset({Stage.MODERATE, Stage.RESUME_AFTER_MODERATION})

# (completed stage, content type) -> next stage; a None content type matches any
TRANSITIONS: dict[tuple[Stage, Optional[ContentType]], Stage] = {
    (Stage.CLASSIFY, ContentType.IMAGE): Stage.MODERATE,
    (Stage.CLASSIFY, ContentType.VIDEO): Stage.MODERATE,
    (Stage.CLASSIFY, ContentType.TEXT): Stage.TEXT_TO_AUDIO,
    (Stage.CLASSIFY, ContentType.AUDIO): Stage.AUDIO_TO_TEXT,
    (Stage.CLASSIFY, ContentType.UNKNOWN): Stage.REMOVE_INPUT,

    (Stage.MODERATE, ContentType.IMAGE): Stage.KEYWORD,
    (Stage.MODERATE, ContentType.VIDEO): Stage.KEYWORD,
    (Stage.RESUME_AFTER_MODERATION, ContentType.VIDEO): Stage.KEYWORD,

    (Stage.KEYWORD, ContentType.IMAGE): Stage.CELEBRITY_CHECK,
    (Stage.KEYWORD, ContentType.VIDEO): Stage.CELEBRITY_CHECK,
    (Stage.RESUME_AFTER_KEYWORDING, ContentType.VIDEO): Stage.CELEBRITY_CHECK,

    (Stage.CELEBRITY_CHECK, ContentType.IMAGE): Stage.THUMBNAIL,
    (Stage.CELEBRITY_CHECK, ContentType.VIDEO): Stage.COPY_AND_TAG,
    (Stage.RESUME_AFTER_CELEBRITY_DETECTION, ContentType.VIDEO): Stage.COPY_AND_TAG,

    (Stage.THUMBNAIL, ContentType.IMAGE): Stage.COPY_AND_TAG,

    (Stage.TEXT_TO_AUDIO, ContentType.TEXT): Stage.REMOVE_INPUT,
    (Stage.AUDIO_TO_TEXT, ContentType.AUDIO): Stage.REMOVE_INPUT,

    (Stage.COPY_AND_TAG, None): Stage.REMOVE_INPUT,
    (Stage.REMOVE_INPUT, None): Stage.NOTIFY,
    (Stage.NOTIFY, None): Stage.END,
}


def entry_stage(state: MediaState) -> Stage:
    """First stage of an execution: a resume stage if a job is pending, else Classify."""
    if state.pending_scan_results is PendingScan.NONE:
        return Stage.CLASSIFY
    return RESUME_STAGES[state.pending_scan_results]


def next_stage(completed: Stage | str, state: MediaState) -> Stage:
    """Stage to run after ``completed`` produced ``state``."""
    completed = Stage(completed)
    if completed is Stage.END:
        return Stage.END
    if state.is_suspended:
        return Stage.END
    if state.is_unsafe and completed in MODERATION_STAGES:
        return Stage.REMOVE_INPUT

    for key in ((completed, state.content_type), (completed, None)):
        if key in TRANSITIONS:
            return TRANSITIONS[key]
    raise RoutingError(completed, state.content_type)
