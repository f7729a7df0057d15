"""TextToAudio stage: synthesize speech from text objects."""

from __future__ import annotations

import logging
import posixpath

from mediaingester.core.constants import AUDIO_FROM_TEXT_OUTPUT_SUBPATH
from mediaingester.models.stage import Stage
from mediaingester.models.state import ContentType, MediaState
from mediaingester.stages.base import StageServices, output_key
from mediaingester.stages.registry import stage

logger = logging.getLogger(__name__)


@stage(Stage.TEXT_TO_AUDIO)
def convert_text_to_audio(state: MediaState, services: StageServices) -> MediaState:
    if state.content_type is not ContentType.TEXT:
        logger.info("Speech synthesis only applies to text, skipping %s", state.location)
        return state

    logger.info("Converting text in %s to audio (mp3)", state.location)
    outputs_root = services.config.outputs_root_path()
    voice_id = services.config.voice_id()

    text = services.object_store.get(state.bucket, state.input_object_key).decode("utf-8", errors="replace")
    if not text.strip():
        logger.warning("Text object %s is empty, nothing to synthesize", state.location)
        return state

    logger.info("Synthesizing mp3 audio with voice %s", voice_id)
    audio = services.synthesizer.synthesize(text, voice_id)

    base_name, _ = posixpath.splitext(posixpath.basename(state.input_object_key))
    audio_key = output_key(outputs_root, AUDIO_FROM_TEXT_OUTPUT_SUBPATH, f"{base_name}.mp3")
    logger.info("Writing audio file to %s::/%s", state.bucket, audio_key)
    services.object_store.put(state.bucket, audio_key, audio)
    state.output_object_key = audio_key
    return state
