"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from mediaingester.core.config import AppSettings
from mediaingester.core.workflow_config import WorkflowConfig
from mediaingester.persistence.dynamodb_backend import DynamoDBJobStateStore
from mediaingester.persistence.redis_backend import RedisCacheBackend
from mediaingester.persistence.s3_backend import S3ObjectStore
from mediaingester.persistence.ssm_backend import SettingsParameterSource, SSMParameterSource


def create_config(settings: AppSettings | None = None) -> WorkflowConfig:
    """Build the workflow configuration from the configured parameter source."""
    if settings is None:
        settings = AppSettings()

    if settings.parameters.source == "env":
        return WorkflowConfig(SettingsParameterSource(settings.workflow))

    cache = None
    if settings.redis.enabled:
        cache = RedisCacheBackend(
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
        )
    return WorkflowConfig(SSMParameterSource(
        region=settings.aws.region,
        endpoint_url=settings.aws.endpoint_url,
        cache=cache,
        cache_ttl=settings.parameters.cache_ttl,
    ))


def create_persistence(settings: AppSettings | None = None,
                       config: WorkflowConfig | None = None):
    """Create wired-up persistence backends from application settings.

    Returns:
        Tuple of (config, job_store, object_store).
    """
    if settings is None:
        settings = AppSettings()
    if config is None:
        config = create_config(settings)

    job_store = DynamoDBJobStateStore(
        table_name=config.pending_jobs_table(),
        region=settings.aws.region,
        endpoint_url=settings.aws.endpoint_url,
    )

    object_store = S3ObjectStore(
        region=settings.aws.region,
        endpoint_url=settings.aws.endpoint_url,
    )

    return config, job_store, object_store
