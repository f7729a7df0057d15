"""Unit tests for S3ObjectStore using moto."""

from __future__ import annotations

import boto3
import pytest
from moto import mock_aws

from mediaingester.core.exceptions import StorageError
from mediaingester.persistence.s3_backend import S3ObjectStore

BUCKET = "test-media"


@pytest.fixture
def s3_backend():
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket=BUCKET)
        yield S3ObjectStore(region="us-east-1")


class TestPutGet:
    def test_put_stores_bytes(self, s3_backend):
        s3_backend.put(BUCKET, "inputs/data.bin", b"\x00\x01\x02")
        assert s3_backend.get(BUCKET, "inputs/data.bin") == b"\x00\x01\x02"

    def test_put_with_tags(self, s3_backend):
        s3_backend.put(BUCKET, "a.jpg", b"x", tags={"Keywords": "Beach/Sky"})
        assert s3_backend.get_tags(BUCKET, "a.jpg") == {"Keywords": "Beach/Sky"}

    def test_get_missing_key_raises(self, s3_backend):
        with pytest.raises(StorageError):
            s3_backend.get(BUCKET, "does/not/exist.txt")


class TestCopy:
    def test_copy_replaces_tags(self, s3_backend):
        s3_backend.put(BUCKET, "inputs/a.jpg", b"jpeg", tags={"Source": "upload"})
        s3_backend.copy(BUCKET, "inputs/a.jpg", BUCKET, "outputs/images/a.jpg",
                        tags={"Keywords": "Person/Beach", "Celebrities": "Jane Doe"})

        assert s3_backend.get(BUCKET, "outputs/images/a.jpg") == b"jpeg"
        assert s3_backend.get_tags(BUCKET, "outputs/images/a.jpg") == {
            "Keywords": "Person/Beach",
            "Celebrities": "Jane Doe",
        }

    def test_copy_without_tags_keeps_source_object(self, s3_backend):
        s3_backend.put(BUCKET, "a.png", b"png")
        s3_backend.copy(BUCKET, "a.png", BUCKET, "thumbs/a.png")
        assert s3_backend.get(BUCKET, "a.png") == b"png"
        assert s3_backend.get(BUCKET, "thumbs/a.png") == b"png"

    def test_copy_missing_source_raises(self, s3_backend):
        with pytest.raises(StorageError):
            s3_backend.copy(BUCKET, "missing", BUCKET, "dst")


class TestDelete:
    def test_delete_removes_object(self, s3_backend):
        s3_backend.put(BUCKET, "inputs/a.txt", b"x")
        s3_backend.delete(BUCKET, "inputs/a.txt")
        with pytest.raises(StorageError):
            s3_backend.get(BUCKET, "inputs/a.txt")

    def test_delete_missing_object_is_fine(self, s3_backend):
        s3_backend.delete(BUCKET, "never/there")


class TestLocate:
    def test_us_east_1_bucket(self, s3_backend):
        assert s3_backend.locate(BUCKET) == "us-east-1"

    def test_regional_bucket(self, s3_backend):
        boto3.client("s3", region_name="eu-west-2").create_bucket(
            Bucket="eu-media", CreateBucketConfiguration={"LocationConstraint": "eu-west-2"})
        assert s3_backend.locate("eu-media") == "eu-west-2"

    def test_missing_bucket_raises(self, s3_backend):
        with pytest.raises(StorageError):
            s3_backend.locate("no-such-bucket")
