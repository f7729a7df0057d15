"""SNS adapter implementing INotifier."""

from __future__ import annotations

import boto3
from botocore.exceptions import ClientError

from mediaingester.core.exceptions import NotificationError


class SNSNotifier:
    def __init__(self, region: str = "us-east-1", endpoint_url: str | None = None) -> None:
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("sns", **kwargs)

    def publish(self, topic_arn: str, subject: str, message: str) -> str:
        try:
            resp = self._client.publish(TopicArn=topic_arn, Subject=subject, Message=message)
        except ClientError as exc:
            raise NotificationError(f"SNS publish to {topic_arn} failed: {exc}") from exc
        return resp["MessageId"]
