"""Stage functions, registered by name on import."""

from __future__ import annotations

from mediaingester.stages import (  # noqa: F401
    celebrities,
    classify,
    cleanup,
    copy_and_tag,
    keywording,
    moderation,
    notify,
    speech,
    thumbnail,
    transcription,
)
from mediaingester.stages.base import StageServices
from mediaingester.stages.registry import STAGE_REGISTRY, get_stage, run_stage

__all__ = ["STAGE_REGISTRY", "StageServices", "get_stage", "run_stage"]
