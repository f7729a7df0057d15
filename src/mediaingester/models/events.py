"""Trigger event payloads: S3 object notifications and SNS job completion messages."""

from __future__ import annotations

from typing import Optional
from urllib.parse import unquote_plus

from pydantic import BaseModel, ConfigDict, Field

from mediaingester.core.constants import JOB_SUCCEEDED_STATUS


class S3BucketRef(BaseModel):
    name: str


class S3ObjectRef(BaseModel):
    key: str
    size: Optional[int] = None

    @property
    def decoded_key(self) -> str:
        """Object keys arrive url-encoded, with spaces as '+'."""
        return unquote_plus(self.key)


class S3Entity(BaseModel):
    bucket: S3BucketRef
    object: S3ObjectRef


class S3EventRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event_name: str = Field(default="", alias="eventName")
    s3: S3Entity


class S3Event(BaseModel):
    records: list[S3EventRecord] = Field(default_factory=list, alias="Records")


class SNSMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(alias="Message")
    subject: Optional[str] = Field(default=None, alias="Subject")
    topic_arn: Optional[str] = Field(default=None, alias="TopicArn")


class SNSEventRecord(BaseModel):
    sns: SNSMessage = Field(alias="Sns")


class SNSEvent(BaseModel):
    records: list[SNSEventRecord] = Field(default_factory=list, alias="Records")


class JobCompletionMessage(BaseModel):
    """Completion notice published by the inference service for an async job."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    job_id: str = Field(alias="JobId", min_length=1)
    status: str = Field(alias="Status")
    api: Optional[str] = Field(default=None, alias="API")

    @property
    def succeeded(self) -> bool:
        return self.status == JOB_SUCCEEDED_STATUS
