"""Stage registration and invocation."""

from __future__ import annotations

import functools
import logging
from typing import Callable

from mediaingester.core.exceptions import InvalidStateError
from mediaingester.models.stage import Stage
from mediaingester.models.state import MediaState
from mediaingester.stages.base import StageServices

logger = logging.getLogger(__name__)

StageFunction = Callable[[MediaState, StageServices], MediaState]

STAGE_REGISTRY: dict[Stage, StageFunction] = {}


def stage(name: Stage) -> Callable[[StageFunction], StageFunction]:
    """Register a function as the implementation of a named stage.

    The registered wrapper hands the function a deep copy of its input, so a
    stage behaves as ``State -> State`` for callers, and rejects any result
    whose pending-job fields disagree.
    """

    def decorator(func: StageFunction) -> StageFunction:
        if name in STAGE_REGISTRY:
            raise ValueError(f"Stage {name} already registered")

        @functools.wraps(func)
        def wrapper(state: MediaState, services: StageServices) -> MediaState:
            logger.info("Running stage %s for %s", name, state.location,
                        extra={"stage": str(name), "object": state.location})
            result = func(state.model_copy(deep=True), services)
            if not result.pending_fields_consistent:
                raise InvalidStateError(
                    f"Stage {name} returned PendingScanResults={result.pending_scan_results} "
                    f"with PendingJobId={result.pending_job_id!r}"
                )
            return result

        STAGE_REGISTRY[name] = wrapper
        return wrapper

    return decorator


def get_stage(name: Stage | str) -> StageFunction:
    try:
        return STAGE_REGISTRY[Stage(name)]
    except (KeyError, ValueError):
        raise KeyError(f"No stage registered under {name!r}") from None


def run_stage(name: Stage | str, state: MediaState, services: StageServices) -> MediaState:
    return get_stage(name)(state, services)
