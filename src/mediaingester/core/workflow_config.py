"""Typed access to the workflow's logical configuration keys."""

from __future__ import annotations

from mediaingester.core import constants
from mediaingester.core.exceptions import ConfigurationError
from mediaingester.core.protocols import IParameterSource


class WorkflowConfig:
    """Wraps an IParameterSource with typed accessors.

    Every accessor raises ConfigurationError when the parameter is missing
    or malformed; callers decide whether that is fatal.
    """

    def __init__(self, source: IParameterSource) -> None:
        self._source = source

    def _get(self, name: str) -> str:
        return self._source.get_parameter(name)

    def _get_float(self, name: str) -> float:
        raw = self._get(name)
        try:
            return float(raw)
        except ValueError:
            raise ConfigurationError(name, f"expected a number, got {raw!r}") from None

    def state_machine_arn(self) -> str:
        return self._get(constants.STATE_MACHINE_ARN_PARAM)

    def inputs_root_path(self) -> str:
        return self._get(constants.INPUTS_ROOT_PATH_PARAM)

    def outputs_root_path(self) -> str:
        return self._get(constants.OUTPUTS_ROOT_PATH_PARAM)

    def min_moderation_confidence(self) -> float:
        return self._get_float(constants.MIN_MODERATION_CONFIDENCE_PARAM)

    def min_keyword_confidence(self) -> float:
        return self._get_float(constants.MIN_KEYWORD_CONFIDENCE_PARAM)

    def voice_id(self) -> str:
        return self._get(constants.VOICE_ID_PARAM)

    def thumbnail_max_dimension(self) -> int:
        raw = self._get(constants.THUMBNAIL_MAX_DIMENSION_PARAM).strip()
        if not raw:
            return constants.DEFAULT_THUMBNAIL_MAX_DIMENSION
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(constants.THUMBNAIL_MAX_DIMENSION_PARAM,
                                     f"expected an integer, got {raw!r}") from None
        if value <= 0:
            raise ConfigurationError(constants.THUMBNAIL_MAX_DIMENSION_PARAM, "must be positive")
        return value

    def pending_jobs_table(self) -> str:
        return self._get(constants.PENDING_JOBS_TABLE_PARAM)

    def async_completed_topic_arn(self) -> str:
        return self._get(constants.ASYNC_COMPLETED_TOPIC_PARAM)

    def ingest_completed_topic_arn(self) -> str:
        return self._get(constants.INGEST_COMPLETED_TOPIC_PARAM)

    def rekognition_role_arn(self) -> str:
        return self._get(constants.REKOGNITION_ROLE_PARAM)
