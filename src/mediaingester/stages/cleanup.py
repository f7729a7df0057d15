"""RemoveInput stage: delete the original object once the workflow is done with it."""

from __future__ import annotations

import logging

from mediaingester.models.stage import Stage
from mediaingester.models.state import MediaState
from mediaingester.stages.base import StageServices
from mediaingester.stages.registry import stage

logger = logging.getLogger(__name__)


@stage(Stage.REMOVE_INPUT)
def remove_input(state: MediaState, services: StageServices) -> MediaState:
    if state.is_unsafe:
        logger.warning("Removing input object %s as it was declared unsafe", state.location)
    else:
        logger.info("Removing input object %s now that it has been processed", state.location)
    services.object_store.delete(state.bucket, state.input_object_key)
    return state
