"""Parameter sources implementing IParameterSource."""

from __future__ import annotations

import logging
from typing import Any

import boto3
from botocore.exceptions import ClientError

from mediaingester.core.config import WorkflowParameters
from mediaingester.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class SSMParameterSource:
    """Reads workflow parameters from Systems Manager Parameter Store.

    Values are cached for ``cache_ttl`` seconds when a cache backend is given.
    """

    def __init__(self, region: str = "us-east-1", endpoint_url: str | None = None,
                 cache: Any = None, cache_ttl: int = 300) -> None:
        self._region = region
        self._endpoint_url = endpoint_url
        self._cache = cache
        self._cache_ttl = cache_ttl
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("ssm", **kwargs)

    def get_parameter(self, name: str) -> str:
        cache_key = f"param:{name}"
        if self._cache is not None:
            cached = self._cache.get(cache_key)
            if cached is not None:
                return cached

        try:
            resp = self._client.get_parameter(Name=name)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            logger.error("Failed to read Parameter Store key %s: %s", name, code,
                         extra={"parameter": name})
            raise ConfigurationError(name, code or str(exc)) from exc

        value = resp["Parameter"]["Value"]
        if self._cache is not None:
            self._cache.setex(cache_key, self._cache_ttl, value)
        return value


class SettingsParameterSource:
    """Serves workflow parameters from environment-backed settings."""

    def __init__(self, parameters: WorkflowParameters) -> None:
        self._values = parameters.as_parameters()

    def get_parameter(self, name: str) -> str:
        try:
            return self._values[name]
        except KeyError:
            raise ConfigurationError(name, "not set in environment") from None
