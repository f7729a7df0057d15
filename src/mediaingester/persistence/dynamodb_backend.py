"""DynamoDB backend implementing IJobStateStore."""

from __future__ import annotations

import logging
from typing import Optional

import boto3
from botocore.exceptions import ClientError
from pydantic import ValidationError

from mediaingester.core.constants import PENDING_JOBS_JOB_ID_ATTR, PENDING_JOBS_STATE_ATTR
from mediaingester.core.exceptions import InvalidStateError, StorageError
from mediaingester.models.state import MediaState

logger = logging.getLogger(__name__)


class DynamoDBJobStateStore:
    """Production IJobStateStore: one item per outstanding async job.

    Item layout is ``{JobId: <job id>, WorkflowState: <state JSON>}``.
    """

    def __init__(self, table_name: str, region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._table_name = table_name
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)
        self._table = self._ddb.Table(table_name)

    @property
    def table_name(self) -> str:
        return self._table_name

    def put(self, job_id: str, state: MediaState) -> None:
        logger.info("Persisting workflow state for job %s to table %s", job_id, self._table_name,
                    extra={"job_id": job_id, "object": state.location})
        try:
            self._table.put_item(Item={
                PENDING_JOBS_JOB_ID_ATTR: job_id,
                PENDING_JOBS_STATE_ATTR: state.to_json(),
            })
        except ClientError as exc:
            raise StorageError(f"DynamoDB put failed for job {job_id!r}: {exc}") from exc

    def get(self, job_id: str) -> Optional[MediaState]:
        if not job_id:
            return None
        try:
            resp = self._table.get_item(
                Key={PENDING_JOBS_JOB_ID_ATTR: job_id},
                ProjectionExpression=PENDING_JOBS_STATE_ATTR,
            )
        except ClientError as exc:
            raise StorageError(f"DynamoDB get failed for job {job_id!r}: {exc}") from exc

        item = resp.get("Item")
        if not item:
            return None
        logger.info("Read workflow state for job %s from table %s", job_id, self._table_name,
                    extra={"job_id": job_id})
        try:
            return MediaState.from_json(item[PENDING_JOBS_STATE_ATTR])
        except (KeyError, ValidationError) as exc:
            raise InvalidStateError(f"Stored state for job {job_id!r} is unreadable: {exc}") from exc

    def delete(self, job_id: str) -> None:
        if not job_id:
            return
        logger.info("Deleting job %s from table %s", job_id, self._table_name, extra={"job_id": job_id})
        try:
            self._table.delete_item(Key={PENDING_JOBS_JOB_ID_ATTR: job_id})
        except ClientError as exc:
            raise StorageError(f"DynamoDB delete failed for job {job_id!r}: {exc}") from exc
