"""Amazon Polly adapter implementing ISpeechSynthesizer."""

from __future__ import annotations

import boto3
from botocore.exceptions import ClientError

from mediaingester.core.exceptions import InferenceError


class PollySpeechSynthesizer:
    """Synthesizes mp3 speech from plain text."""

    def __init__(self, region: str = "us-east-1", endpoint_url: str | None = None,
                 language_code: str = "en-US") -> None:
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("polly", **kwargs)
        self._language_code = language_code

    def synthesize(self, text: str, voice_id: str) -> bytes:
        # TODO: switch to start_speech_synthesis_task for texts beyond the 3000 character synthesize_speech limit
        try:
            resp = self._client.synthesize_speech(
                Text=text,
                TextType="text",
                OutputFormat="mp3",
                VoiceId=voice_id,
                LanguageCode=self._language_code,
            )
        except ClientError as exc:
            raise InferenceError(f"Polly synthesis failed with voice {voice_id!r}: {exc}") from exc
        return resp["AudioStream"].read()
