"""Names of the workflow stages the orchestrator can invoke."""

from __future__ import annotations

from enum import StrEnum


class Stage(StrEnum):
    CLASSIFY = "Classify"
    MODERATE = "Moderate"
    RESUME_AFTER_MODERATION = "ResumeAfterModeration"
    KEYWORD = "Keyword"
    RESUME_AFTER_KEYWORDING = "ResumeAfterKeywording"
    CELEBRITY_CHECK = "CelebrityCheck"
    RESUME_AFTER_CELEBRITY_DETECTION = "ResumeAfterCelebrityDetection"
    THUMBNAIL = "Thumbnail"
    AUDIO_TO_TEXT = "AudioToText"
    TEXT_TO_AUDIO = "TextToAudio"
    COPY_AND_TAG = "CopyAndTag"
    REMOVE_INPUT = "RemoveInput"
    NOTIFY = "Notify"
    END = "End"
