"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from mediaingester.core import constants


class AWSConfig(BaseSettings):
    """AWS client configuration shared by every boto3 adapter."""

    model_config = {"env_prefix": "MEDIAINGESTER_AWS_"}

    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class ParameterConfig(BaseSettings):
    """Where workflow parameters are resolved from."""

    model_config = {"env_prefix": "MEDIAINGESTER_PARAMS_"}

    source: Literal["ssm", "env"] = "ssm"
    cache_ttl: int = 300  # seconds


class RedisConfig(BaseSettings):
    """Redis cache in front of Parameter Store lookups."""

    model_config = {"env_prefix": "MEDIAINGESTER_REDIS_"}

    enabled: bool = False
    host: str = "localhost"
    port: int = 6379
    db: int = 0


class TranscriptionConfig(BaseSettings):
    """Polling budget for audio transcription jobs."""

    model_config = {"env_prefix": "MEDIAINGESTER_TRANSCRIBE_"}

    initial_poll_seconds: float = 2.0
    max_poll_seconds: float = 30.0
    backoff_factor: float = 2.0
    max_wait_seconds: float = 600.0
    language_code: str = "en-US"


class WorkflowParameters(BaseSettings):
    """Workflow parameter values supplied through the environment.

    Used when ``ParameterConfig.source`` is ``env`` (local runs, containers
    without Parameter Store access). ``None`` means the parameter is unset.
    """

    model_config = {"env_prefix": "MEDIAINGESTER_"}

    state_machine_arn: str | None = None
    inputs_root_path: str | None = None
    outputs_root_path: str | None = None
    min_moderation_confidence: str | None = None
    min_keyword_confidence: str | None = None
    voice_id: str | None = None
    thumbnails_max_dimension: str | None = None
    pending_jobs_table: str | None = None
    async_completed_topic_arn: str | None = None
    ingest_completed_topic_arn: str | None = None
    rekognition_role_arn: str | None = None

    def as_parameters(self) -> dict[str, str]:
        """Return the set values keyed by their Parameter Store names."""
        mapping = {
            constants.STATE_MACHINE_ARN_PARAM: self.state_machine_arn,
            constants.INPUTS_ROOT_PATH_PARAM: self.inputs_root_path,
            constants.OUTPUTS_ROOT_PATH_PARAM: self.outputs_root_path,
            constants.MIN_MODERATION_CONFIDENCE_PARAM: self.min_moderation_confidence,
            constants.MIN_KEYWORD_CONFIDENCE_PARAM: self.min_keyword_confidence,
            constants.VOICE_ID_PARAM: self.voice_id,
            constants.THUMBNAIL_MAX_DIMENSION_PARAM: self.thumbnails_max_dimension,
            constants.PENDING_JOBS_TABLE_PARAM: self.pending_jobs_table,
            constants.ASYNC_COMPLETED_TOPIC_PARAM: self.async_completed_topic_arn,
            constants.INGEST_COMPLETED_TOPIC_PARAM: self.ingest_completed_topic_arn,
            constants.REKOGNITION_ROLE_PARAM: self.rekognition_role_arn,
        }
        return {name: value for name, value in mapping.items() if value is not None}


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "MEDIAINGESTER_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    aws: AWSConfig = Field(default_factory=AWSConfig)
    parameters: ParameterConfig = Field(default_factory=ParameterConfig)
    redis: RedisConfig = Field(default_factory=RedisConfig)
    transcription: TranscriptionConfig = Field(default_factory=TranscriptionConfig)
    workflow: WorkflowParameters = Field(default_factory=WorkflowParameters)
