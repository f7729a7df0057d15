"""Lambda entry points.

``new_object_handler`` and ``resume_workflow_handler`` are the two triggers;
``step_handler`` is the task the state machine invokes once per stage with
``{"Stage": <name>, "State": <state>}`` and which answers with the stage to
run next.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from mediaingester.bootstrap import build_orchestrator, build_services
from mediaingester.core.config import AppSettings
from mediaingester.core.logger_setup import configure_logging
from mediaingester.core.types import JsonDict
from mediaingester.models.state import MediaState
from mediaingester.orchestration.router import entry_stage, next_stage
from mediaingester.persistence import create_config
from mediaingester.stages import StageServices, run_stage
from mediaingester.triggers.new_object import NewObjectTrigger
from mediaingester.triggers.resume import ResumeTrigger

logger = logging.getLogger(__name__)

# Built on first use and reused for the lifetime of the Lambda container
_settings: Optional[AppSettings] = None
_services: Optional[StageServices] = None


def _get_settings() -> AppSettings:
    global _settings
    if _settings is None:
        _settings = AppSettings()
        configure_logging(_settings.log_level)
    return _settings


def _get_services() -> StageServices:
    global _services
    if _services is None:
        _services = build_services(_get_settings())
    return _services


def reset() -> None:
    """Forget cached settings and services (tests, configuration changes)."""
    global _settings, _services
    _settings = None
    _services = None


def new_object_handler(event: JsonDict, context: Any = None) -> JsonDict:
    settings = _get_settings()
    config = create_config(settings)
    trigger = NewObjectTrigger(config=config, orchestrator=build_orchestrator(settings, config))
    return {"Executions": trigger.handle(event)}


def resume_workflow_handler(event: JsonDict, context: Any = None) -> JsonDict:
    settings = _get_settings()
    services = _get_services()
    trigger = ResumeTrigger(
        job_store=services.job_store,
        orchestrator=build_orchestrator(settings, services.config),
    )
    return {"Executions": trigger.handle(event)}


def execute_step(event: JsonDict, services: StageServices) -> JsonDict:
    """Run the named stage (or the entry stage) and name the one after it."""
    state = MediaState.from_payload(event["State"])
    current = event.get("Stage") or entry_stage(state)
    state = run_stage(current, state, services)
    following = next_stage(current, state)
    logger.info("Stage %s complete for %s, next is %s", current, state.location, following,
                extra={"stage": str(current), "object": state.location})
    return {"Stage": str(following), "State": state.to_payload()}


def step_handler(event: JsonDict, context: Any = None) -> JsonDict:
    _get_settings()
    return execute_step(event, _get_services())
