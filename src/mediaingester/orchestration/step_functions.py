"""Step Functions orchestrator adapter and state machine definition."""

from __future__ import annotations

import json
import logging
from typing import Any

import boto3
from botocore.exceptions import ClientError

from mediaingester.core.exceptions import OrchestrationError
from mediaingester.models.stage import Stage
from mediaingester.models.state import MediaState

logger = logging.getLogger(__name__)

RUN_STAGE_STATE = "RunStage"
CHOOSE_NEXT_STATE = "ChooseNextStage"
DONE_STATE = "Done"


class StepFunctionsOrchestrator:
    """Production IOrchestrator starting executions of the ingest state machine."""

    def __init__(self, state_machine_arn: str, region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._state_machine_arn = state_machine_arn
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("stepfunctions", **kwargs)

    def start_execution(self, name: str, state: MediaState) -> str:
        logger.info("Starting execution %s for %s", name, state.location,
                    extra={"execution": name, "object": state.location})
        try:
            resp = self._client.start_execution(
                stateMachineArn=self._state_machine_arn,
                name=name,
                input=json.dumps({"State": state.to_payload()}),
            )
        except ClientError as exc:
            raise OrchestrationError(f"StartExecution {name!r} failed: {exc}") from exc
        return resp["executionArn"]


def build_state_machine_definition(step_function_arn: str, max_attempts: int = 3) -> dict[str, Any]:
    """Amazon States Language document looping the step Lambda until End.

    Each iteration invokes ``handlers.step_handler`` with ``{"Stage", "State"}``
    and gets back the same shape naming the following stage.
    """
    return {
        "Comment": "Media ingest workflow; stage routing is decided by the step function",
        "StartAt": RUN_STAGE_STATE,
        "States": {
            RUN_STAGE_STATE: {
                "Type": "Task",
                "Resource": step_function_arn,
                "Retry": [
                    {
                        "ErrorEquals": [
                            "Lambda.ServiceException",
                            "Lambda.TooManyRequestsException",
                            "Lambda.SdkClientException",
                        ],
                        "IntervalSeconds": 2,
                        "MaxAttempts": max_attempts,
                        "BackoffRate": 2.0,
                    }
                ],
                "Next": CHOOSE_NEXT_STATE,
            },
            CHOOSE_NEXT_STATE: {
                "Type": "Choice",
                "Choices": [
                    {"Variable": "$.Stage", "StringEquals": str(Stage.END), "Next": DONE_STATE},
                ],
                "Default": RUN_STAGE_STATE,
            },
            DONE_STATE: {"Type": "Succeed"},
        },
    }
