"""IOrchestrator that runs executions synchronously in-process."""

from __future__ import annotations

from mediaingester.core.exceptions import OrchestrationError
from mediaingester.models.state import MediaState
from mediaingester.orchestration.runner import WorkflowRun, WorkflowRunner


class LocalOrchestrator:
    """Runs each started execution to completion (or suspension) immediately."""

    def __init__(self, runner: WorkflowRunner) -> None:
        self._runner = runner
        self.runs: list[WorkflowRun] = []

    def start_execution(self, name: str, state: MediaState) -> str:
        if any(run.name == name for run in self.runs):
            raise OrchestrationError(f"Execution name {name!r} already used")
        self.runs.append(self._runner.run(state, name=name))
        return f"local:{name}"
