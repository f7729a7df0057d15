"""WorkflowRunner: drives one execution through the router in-process."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from mediaingester.models.stage import Stage
from mediaingester.models.state import MediaState
from mediaingester.orchestration.router import entry_stage, next_stage
from mediaingester.stages import StageServices, run_stage

logger = logging.getLogger(__name__)

# Longest route through the state machine is well below this
MAX_STAGES_PER_EXECUTION = 32


@dataclass
class WorkflowRun:
    """Outcome of one execution."""

    name: str
    state: MediaState
    stages: list[Stage] = field(default_factory=list)

    @property
    def suspended(self) -> bool:
        return self.state.is_suspended

    @property
    def completed(self) -> bool:
        return bool(self.stages) and self.stages[-1] is Stage.NOTIFY


class WorkflowRunner:
    """Executes stages sequentially until the router answers End.

    This is the execution engine used for local runs and tests; in AWS the
    same router and stages are driven by the state machine through
    ``handlers.step_handler``.
    """

    def __init__(self, services: StageServices) -> None:
        self._services = services

    def run(self, state: MediaState, name: str = "") -> WorkflowRun:
        run = WorkflowRun(name=name, state=state)
        current = entry_stage(state)
        while current is not Stage.END:
            if len(run.stages) >= MAX_STAGES_PER_EXECUTION:
                raise RuntimeError(f"Execution {name!r} exceeded {MAX_STAGES_PER_EXECUTION} stages")
            run.state = run_stage(current, run.state, self._services)
            run.stages.append(current)
            current = next_stage(current, run.state)

        if run.suspended:
            logger.info("Execution %s suspended pending %s job %s", name,
                        run.state.pending_scan_results, run.state.pending_job_id,
                        extra={"execution": name, "job_id": run.state.pending_job_id})
        else:
            logger.info("Execution %s finished after %d stages", name, len(run.stages),
                        extra={"execution": name})
        return run
