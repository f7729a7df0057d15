"""Rekognition adapter implementing ISyncInference and IAsyncInference."""

from __future__ import annotations

import logging
from typing import Any, Optional

import boto3
from botocore.exceptions import ClientError

from mediaingester.core.exceptions import InferenceError
from mediaingester.models.inference import DetectionPage, JobStatus

logger = logging.getLogger(__name__)


def _s3_object(bucket: str, key: str) -> dict[str, dict[str, str]]:
    return {"S3Object": {"Bucket": bucket, "Name": key}}


def _notification_channel(topic_arn: str, role_arn: str) -> dict[str, str]:
    return {"SNSTopicArn": topic_arn, "RoleArn": role_arn}


class RekognitionInference:
    """Image detection calls and video detection jobs backed by Amazon Rekognition."""

    def __init__(self, region: str = "us-east-1", endpoint_url: str | None = None) -> None:
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("rekognition", **kwargs)

    def _call(self, operation: str, **kwargs: Any) -> dict[str, Any]:
        try:
            return getattr(self._client, operation)(**kwargs)
        except ClientError as exc:
            raise InferenceError(f"Rekognition {operation} failed: {exc}") from exc

    # ---- ISyncInference ----

    def detect_moderation_labels(self, bucket: str, key: str, min_confidence: float) -> list[str]:
        resp = self._call("detect_moderation_labels",
                          Image=_s3_object(bucket, key), MinConfidence=min_confidence)
        labels = resp.get("ModerationLabels", [])
        for label in labels:
            logger.debug("Moderation label %s, confidence %s", label["Name"], label.get("Confidence"))
        return [label["Name"] for label in labels]

    def detect_labels(self, bucket: str, key: str, min_confidence: float) -> list[str]:
        resp = self._call("detect_labels", Image=_s3_object(bucket, key), MinConfidence=min_confidence)
        return [label["Name"] for label in resp.get("Labels", [])]

    def recognize_celebrities(self, bucket: str, key: str) -> list[str]:
        resp = self._call("recognize_celebrities", Image=_s3_object(bucket, key))
        return [face["Name"] for face in resp.get("CelebrityFaces", [])]

    # ---- IAsyncInference ----

    def start_content_moderation(self, bucket: str, key: str, min_confidence: float,
                                 topic_arn: str, role_arn: str) -> str:
        resp = self._call("start_content_moderation",
                          Video=_s3_object(bucket, key),
                          MinConfidence=min_confidence,
                          NotificationChannel=_notification_channel(topic_arn, role_arn))
        return resp["JobId"]

    def start_label_detection(self, bucket: str, key: str, min_confidence: float,
                              topic_arn: str, role_arn: str) -> str:
        resp = self._call("start_label_detection",
                          Video=_s3_object(bucket, key),
                          MinConfidence=min_confidence,
                          NotificationChannel=_notification_channel(topic_arn, role_arn))
        return resp["JobId"]

    def start_celebrity_recognition(self, bucket: str, key: str,
                                    topic_arn: str, role_arn: str) -> str:
        resp = self._call("start_celebrity_recognition",
                          Video=_s3_object(bucket, key),
                          NotificationChannel=_notification_channel(topic_arn, role_arn))
        return resp["JobId"]

    def _get_page(self, operation: str, job_id: str, next_token: Optional[str],
                  items_field: str, item_key: str) -> DetectionPage:
        kwargs: dict[str, Any] = {"JobId": job_id}
        if next_token:
            kwargs["NextToken"] = next_token
        resp = self._call(operation, **kwargs)
        return DetectionPage(
            items=[entry[item_key]["Name"] for entry in resp.get(items_field, [])],
            next_token=resp.get("NextToken") or None,
            status=JobStatus(resp.get("JobStatus", JobStatus.SUCCEEDED)),
        )

    def get_content_moderation(self, job_id: str, next_token: Optional[str] = None) -> DetectionPage:
        return self._get_page("get_content_moderation", job_id, next_token,
                              "ModerationLabels", "ModerationLabel")

    def get_label_detection(self, job_id: str, next_token: Optional[str] = None) -> DetectionPage:
        return self._get_page("get_label_detection", job_id, next_token, "Labels", "Label")

    def get_celebrity_recognition(self, job_id: str, next_token: Optional[str] = None) -> DetectionPage:
        return self._get_page("get_celebrity_recognition", job_id, next_token,
                              "Celebrities", "Celebrity")
