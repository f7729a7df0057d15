"""Workflow state record passed between stages and persisted at suspend points."""

from __future__ import annotations

from enum import StrEnum
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mediaingester.core.constants import MAX_KEYWORDS_OR_CELEBRITIES


class ContentType(StrEnum):
    IMAGE = "Image"
    TEXT = "Text"
    AUDIO = "Audio"
    VIDEO = "Video"
    UNKNOWN = "Unknown"


class PendingScan(StrEnum):
    NONE = "None"
    MODERATION = "Moderation"
    KEYWORDING = "Keywording"
    CELEBRITY_DETECTION = "CelebrityDetection"


PERSON_KEYWORDS = ("person", "human")


def _append_unique(target: list[str], names: Iterable[str]) -> list[str]:
    """Append names not already present (case-insensitive) until the cap is hit.

    Returns the names that were actually added.
    """
    seen = {name.casefold() for name in target}
    added: list[str] = []
    for name in names:
        if len(target) >= MAX_KEYWORDS_OR_CELEBRITIES:
            break
        folded = name.casefold()
        if folded in seen:
            continue
        seen.add(folded)
        target.append(name)
        added.append(name)
    return added


class MediaState(BaseModel):
    """The continuation object for one media object moving through the workflow.

    Field aliases are the wire names used in execution input/output, in the
    job-state table and in the completion notification.
    """

    model_config = ConfigDict(populate_by_name=True)

    bucket: str = Field(alias="Bucket")
    input_object_key: str = Field(alias="InputObjectKey")
    content_type: ContentType = Field(default=ContentType.UNKNOWN, alias="ContentType")
    extension: Optional[str] = Field(default=None, alias="Extension")
    pending_scan_results: PendingScan = Field(default=PendingScan.NONE, alias="PendingScanResults")
    pending_job_id: Optional[str] = Field(default=None, alias="PendingJobId")
    is_unsafe: bool = Field(default=False, alias="IsUnsafe")
    output_object_key: Optional[str] = Field(default=None, alias="OutputObjectKey")
    keywords: list[str] = Field(default_factory=list, alias="Keywords")
    celebrities: list[str] = Field(default_factory=list, alias="Celebrities")

    @field_validator("pending_job_id", "extension", "output_object_key", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("keywords", "celebrities")
    @classmethod
    def _within_cap(cls, value: list[str]) -> list[str]:
        if len(value) > MAX_KEYWORDS_OR_CELEBRITIES:
            raise ValueError(f"at most {MAX_KEYWORDS_OR_CELEBRITIES} entries allowed")
        return value

    @model_validator(mode="after")
    def _pending_fields_agree(self) -> MediaState:
        if (self.pending_job_id is None) != (self.pending_scan_results is PendingScan.NONE):
            raise ValueError("PendingJobId must be set if and only if PendingScanResults is not None")
        return self

    # ---- codec ----

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_payload(cls, payload: dict) -> MediaState:
        return cls.model_validate(payload)

    @classmethod
    def from_json(cls, text: str) -> MediaState:
        return cls.model_validate_json(text)

    # ---- transitions ----

    @property
    def is_suspended(self) -> bool:
        return self.pending_scan_results is not PendingScan.NONE

    @property
    def pending_fields_consistent(self) -> bool:
        return (self.pending_job_id is None) == (self.pending_scan_results is PendingScan.NONE)

    def suspend(self, scan: PendingScan, job_id: str) -> None:
        """Record an outstanding async job; the execution ends after this stage."""
        if scan is PendingScan.NONE or not job_id:
            raise ValueError("suspending requires a pending scan and a job id")
        self.pending_scan_results = scan
        self.pending_job_id = job_id

    def clear_pending(self) -> None:
        self.pending_scan_results = PendingScan.NONE
        self.pending_job_id = None

    def mark_unsafe(self) -> None:
        self.is_unsafe = True

    def add_keywords(self, names: Iterable[str]) -> list[str]:
        return _append_unique(self.keywords, names)

    def add_celebrities(self, names: Iterable[str]) -> list[str]:
        return _append_unique(self.celebrities, names)

    def has_person(self) -> bool:
        return any(keyword.casefold() in PERSON_KEYWORDS for keyword in self.keywords)

    @property
    def location(self) -> str:
        return f"{self.bucket}::/{self.input_object_key}"
