"""Unit tests for PollySpeechSynthesizer and SNSNotifier."""

from __future__ import annotations

import io
from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from mediaingester.core.exceptions import InferenceError, NotificationError
from mediaingester.services.polly import PollySpeechSynthesizer
from mediaingester.services.sns import SNSNotifier

REGION = "us-east-1"


class TestPollySpeechSynthesizer:
    def test_returns_audio_bytes(self):
        synthesizer = PollySpeechSynthesizer(region=REGION)
        synthesizer._client = MagicMock()
        synthesizer._client.synthesize_speech.return_value = {"AudioStream": io.BytesIO(b"ID3audio")}

        assert synthesizer.synthesize("Hello", "Joanna") == b"ID3audio"
        synthesizer._client.synthesize_speech.assert_called_once_with(
            Text="Hello", TextType="text", OutputFormat="mp3", VoiceId="Joanna", LanguageCode="en-US")

    def test_client_error_wrapped(self):
        synthesizer = PollySpeechSynthesizer(region=REGION)
        synthesizer._client = MagicMock()
        synthesizer._client.synthesize_speech.side_effect = ClientError(
            {"Error": {"Code": "TextLengthExceededException", "Message": "too long"}}, "SynthesizeSpeech")
        with pytest.raises(InferenceError):
            synthesizer.synthesize("x" * 5000, "Joanna")


@pytest.fixture
def topic_arn():
    with mock_aws():
        yield boto3.client("sns", region_name=REGION).create_topic(Name="ingest-completed")["TopicArn"]


class TestSNSNotifier:
    def test_publish_returns_message_id(self, topic_arn):
        assert SNSNotifier(region=REGION).publish(topic_arn, "Ingest completed", "{}")

    def test_unknown_topic_raises(self, topic_arn):
        with pytest.raises(NotificationError):
            SNSNotifier(region=REGION).publish(topic_arn + "-missing", "s", "{}")
