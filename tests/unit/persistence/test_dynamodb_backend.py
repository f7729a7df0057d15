"""Unit tests for DynamoDBJobStateStore using moto."""

from __future__ import annotations

import boto3
import pytest
from moto import mock_aws

from mediaingester.core.exceptions import InvalidStateError, StorageError
from mediaingester.models.state import ContentType, MediaState, PendingScan
from mediaingester.persistence.dynamodb_backend import DynamoDBJobStateStore

TABLE = "pending-jobs-test"
REGION = "us-east-1"

# ---------- helpers ----------

def _create_table(client, name: str):
    client.create_table(
        TableName=name,
        KeySchema=[{"AttributeName": "JobId", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "JobId", "AttributeType": "S"}],
        BillingMode="PAY_PER_REQUEST",
    )


def _suspended(job_id: str = "job-123") -> MediaState:
    state = MediaState(bucket="media-in", input_object_key="clip.mp4",
                       content_type=ContentType.VIDEO, extension="mp4", keywords=["Car"])
    state.suspend(PendingScan.KEYWORDING, job_id)
    return state


# ---------- fixtures ----------

@pytest.fixture
def aws():
    with mock_aws():
        _create_table(boto3.client("dynamodb", region_name=REGION), TABLE)
        yield boto3.resource("dynamodb", region_name=REGION)


@pytest.fixture
def store(aws):
    return DynamoDBJobStateStore(table_name=TABLE, region=REGION)


# ---------- put / get ----------

class TestPutGet:
    def test_round_trip(self, store):
        state = _suspended()
        store.put("job-123", state)
        assert store.get("job-123") == state

    def test_item_layout(self, store, aws):
        store.put("job-123", _suspended())
        item = aws.Table(TABLE).get_item(Key={"JobId": "job-123"})["Item"]
        assert set(item) == {"JobId", "WorkflowState"}
        assert isinstance(item["WorkflowState"], str)
        assert '"PendingScanResults":"Keywording"' in item["WorkflowState"]

    def test_absent_id_returns_none(self, store):
        assert store.get("never-stored") is None

    def test_empty_id_returns_none(self, store):
        assert store.get("") is None

    def test_put_overwrites(self, store):
        store.put("job-123", _suspended())
        updated = _suspended()
        updated.add_keywords(["Road"])
        store.put("job-123", updated)
        assert store.get("job-123").keywords == ["Car", "Road"]

    def test_unreadable_item_raises(self, store, aws):
        aws.Table(TABLE).put_item(Item={"JobId": "bad", "WorkflowState": "{not json"})
        with pytest.raises(InvalidStateError):
            store.get("bad")


# ---------- delete ----------

class TestDelete:
    def test_removes_entry(self, store):
        store.put("job-123", _suspended())
        store.delete("job-123")
        assert store.get("job-123") is None

    def test_absent_and_empty_ids_are_noops(self, store):
        store.delete("never-stored")
        store.delete("")


# ---------- errors ----------

class TestErrorWrapping:
    def test_missing_table_raises_storage_error(self, aws):
        store = DynamoDBJobStateStore(table_name="no-such-table", region=REGION)
        with pytest.raises(StorageError):
            store.get("job-1")
        with pytest.raises(StorageError):
            store.put("job-1", _suspended("job-1"))
