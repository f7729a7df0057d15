"""S3 object storage backend implementing IObjectStore."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlencode

import boto3
from botocore.exceptions import ClientError

from mediaingester.core.exceptions import StorageError
from mediaingester.core.types import TagSet


def _tagging_header(tags: TagSet) -> str:
    return urlencode(tags)


class S3ObjectStore:
    """Production IObjectStore backed by S3."""

    def __init__(self, region: str = "us-east-1", endpoint_url: str | None = None) -> None:
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def get(self, bucket: str, key: str) -> bytes:
        try:
            resp = self._client.get_object(Bucket=bucket, Key=key)
            return resp["Body"].read()
        except ClientError as exc:
            raise StorageError(f"S3 read failed for {bucket}::/{key}: {exc}") from exc

    def put(self, bucket: str, key: str, data: bytes,
            tags: Optional[TagSet] = None) -> None:
        kwargs: dict = {"Bucket": bucket, "Key": key, "Body": data}
        if tags:
            kwargs["Tagging"] = _tagging_header(tags)
        try:
            self._client.put_object(**kwargs)
        except ClientError as exc:
            raise StorageError(f"S3 write failed for {bucket}::/{key}: {exc}") from exc

    def copy(self, src_bucket: str, src_key: str, dst_bucket: str, dst_key: str,
             tags: Optional[TagSet] = None) -> None:
        kwargs: dict = {
            "Bucket": dst_bucket,
            "Key": dst_key,
            "CopySource": {"Bucket": src_bucket, "Key": src_key},
        }
        if tags is not None:
            kwargs["Tagging"] = _tagging_header(tags)
            kwargs["TaggingDirective"] = "REPLACE"
        try:
            self._client.copy_object(**kwargs)
        except ClientError as exc:
            raise StorageError(
                f"S3 copy {src_bucket}::/{src_key} -> {dst_bucket}::/{dst_key} failed: {exc}"
            ) from exc

    def delete(self, bucket: str, key: str) -> None:
        try:
            self._client.delete_object(Bucket=bucket, Key=key)
        except ClientError as exc:
            raise StorageError(f"S3 delete failed for {bucket}::/{key}: {exc}") from exc

    def locate(self, bucket: str) -> str:
        try:
            resp = self._client.get_bucket_location(Bucket=bucket)
        except ClientError as exc:
            raise StorageError(f"S3 location lookup failed for bucket {bucket!r}: {exc}") from exc
        # us-east-1 buckets report no constraint (or the legacy 'US' value)
        location = resp.get("LocationConstraint")
        if not location or location == "US":
            return "us-east-1"
        if location == "EU":
            return "eu-west-1"
        return location

    def get_tags(self, bucket: str, key: str) -> TagSet:
        try:
            resp = self._client.get_object_tagging(Bucket=bucket, Key=key)
        except ClientError as exc:
            raise StorageError(f"S3 tag read failed for {bucket}::/{key}: {exc}") from exc
        return {tag["Key"]: tag["Value"] for tag in resp.get("TagSet", [])}
