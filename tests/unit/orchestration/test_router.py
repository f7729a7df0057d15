"""Tests for the explicit stage transition table."""

from __future__ import annotations

import pytest

from mediaingester.core.exceptions import RoutingError
from mediaingester.models.stage import Stage
from mediaingester.models.state import ContentType, MediaState, PendingScan
from mediaingester.orchestration.router import entry_stage, next_stage


def _state(content_type: ContentType = ContentType.IMAGE, **fields) -> MediaState:
    return MediaState(bucket="b", input_object_key="inputs/x", content_type=content_type, **fields)


def _walk(state: MediaState, start: Stage = Stage.CLASSIFY) -> list[Stage]:
    stages = [start]
    while stages[-1] is not Stage.END:
        stages.append(next_stage(stages[-1], state))
    return stages


class TestEntryStage:
    def test_fresh_state_starts_at_classify(self):
        assert entry_stage(_state()) is Stage.CLASSIFY

    @pytest.mark.parametrize("scan, expected", [
        (PendingScan.MODERATION, Stage.RESUME_AFTER_MODERATION),
        (PendingScan.KEYWORDING, Stage.RESUME_AFTER_KEYWORDING),
        (PendingScan.CELEBRITY_DETECTION, Stage.RESUME_AFTER_CELEBRITY_DETECTION),
    ])
    def test_pending_scan_selects_resume_stage(self, scan, expected):
        state = _state(ContentType.VIDEO)
        state.suspend(scan, "job-1")
        assert entry_stage(state) is expected


class TestRoutes:
    def test_image_route(self):
        assert _walk(_state(ContentType.IMAGE)) == [
            Stage.CLASSIFY, Stage.MODERATE, Stage.KEYWORD, Stage.CELEBRITY_CHECK,
            Stage.THUMBNAIL, Stage.COPY_AND_TAG, Stage.REMOVE_INPUT, Stage.NOTIFY, Stage.END,
        ]

    def test_video_route_without_suspension(self):
        assert _walk(_state(ContentType.VIDEO)) == [
            Stage.CLASSIFY, Stage.MODERATE, Stage.KEYWORD, Stage.CELEBRITY_CHECK,
            Stage.COPY_AND_TAG, Stage.REMOVE_INPUT, Stage.NOTIFY, Stage.END,
        ]

    def test_text_route(self):
        assert _walk(_state(ContentType.TEXT)) == [
            Stage.CLASSIFY, Stage.TEXT_TO_AUDIO, Stage.REMOVE_INPUT, Stage.NOTIFY, Stage.END,
        ]

    def test_audio_route(self):
        assert _walk(_state(ContentType.AUDIO)) == [
            Stage.CLASSIFY, Stage.AUDIO_TO_TEXT, Stage.REMOVE_INPUT, Stage.NOTIFY, Stage.END,
        ]

    def test_unknown_content_only_cleans_up(self):
        assert _walk(_state(ContentType.UNKNOWN)) == [
            Stage.CLASSIFY, Stage.REMOVE_INPUT, Stage.NOTIFY, Stage.END,
        ]

    @pytest.mark.parametrize("resume, expected", [
        (Stage.RESUME_AFTER_MODERATION, Stage.KEYWORD),
        (Stage.RESUME_AFTER_KEYWORDING, Stage.CELEBRITY_CHECK),
        (Stage.RESUME_AFTER_CELEBRITY_DETECTION, Stage.COPY_AND_TAG),
    ])
    def test_resume_stages_rejoin_video_route(self, resume, expected):
        assert next_stage(resume, _state(ContentType.VIDEO)) is expected

    def test_accepts_stage_names_as_strings(self):
        assert next_stage("Thumbnail", _state()) is Stage.COPY_AND_TAG


class TestShortCircuits:
    @pytest.mark.parametrize("completed", [Stage.MODERATE, Stage.RESUME_AFTER_MODERATION])
    def test_unsafe_after_moderation_goes_to_remove_input(self, completed):
        state = _state(ContentType.VIDEO, is_unsafe=True)
        assert next_stage(completed, state) is Stage.REMOVE_INPUT

    def test_unsafe_route_still_notifies(self):
        state = _state(ContentType.IMAGE, is_unsafe=True)
        assert _walk(state) == [
            Stage.CLASSIFY, Stage.MODERATE, Stage.REMOVE_INPUT, Stage.NOTIFY, Stage.END,
        ]

    @pytest.mark.parametrize("completed, scan", [
        (Stage.MODERATE, PendingScan.MODERATION),
        (Stage.KEYWORD, PendingScan.KEYWORDING),
        (Stage.RESUME_AFTER_KEYWORDING, PendingScan.CELEBRITY_DETECTION),
        (Stage.CELEBRITY_CHECK, PendingScan.CELEBRITY_DETECTION),
    ])
    def test_suspended_state_ends_execution(self, completed, scan):
        state = _state(ContentType.VIDEO)
        state.suspend(scan, "job-1")
        assert next_stage(completed, state) is Stage.END

    def test_end_is_terminal(self):
        assert next_stage(Stage.END, _state()) is Stage.END


class TestRoutingErrors:
    def test_thumbnail_for_video_has_no_transition(self):
        with pytest.raises(RoutingError):
            next_stage(Stage.THUMBNAIL, _state(ContentType.VIDEO))

    def test_unknown_stage_name(self):
        with pytest.raises(ValueError):
            next_stage("Teleport", _state())
