"""Parameter names, output paths and limits shared by the workflow."""

from __future__ import annotations

# Parameter Store names for each logical configuration key
STATE_MACHINE_ARN_PARAM = "/mediaingester/statemachine-arn"
INPUTS_ROOT_PATH_PARAM = "/mediaingester/inputs/rootpath"
OUTPUTS_ROOT_PATH_PARAM = "/mediaingester/outputs/rootpath"
MIN_MODERATION_CONFIDENCE_PARAM = "/mediaingester/min-moderation-confidence"
MIN_KEYWORD_CONFIDENCE_PARAM = "/mediaingester/min-keyword-confidence"
VOICE_ID_PARAM = "/mediaingester/outputs/voice-id"
THUMBNAIL_MAX_DIMENSION_PARAM = "/mediaingester/outputs/thumbnails-maxdimension"
PENDING_JOBS_TABLE_PARAM = "/mediaingester/pending-jobs-table"
ASYNC_COMPLETED_TOPIC_PARAM = "/mediaingester/notification-arns/asyncoperation-completed"
INGEST_COMPLETED_TOPIC_PARAM = "/mediaingester/notification-arns/ingest-completed"
REKOGNITION_ROLE_PARAM = "/mediaingester/roles/rekognition-service-role"

ALL_PARAMETERS = (
    STATE_MACHINE_ARN_PARAM,
    INPUTS_ROOT_PATH_PARAM,
    OUTPUTS_ROOT_PATH_PARAM,
    MIN_MODERATION_CONFIDENCE_PARAM,
    MIN_KEYWORD_CONFIDENCE_PARAM,
    VOICE_ID_PARAM,
    THUMBNAIL_MAX_DIMENSION_PARAM,
    PENDING_JOBS_TABLE_PARAM,
    ASYNC_COMPLETED_TOPIC_PARAM,
    INGEST_COMPLETED_TOPIC_PARAM,
    REKOGNITION_ROLE_PARAM,
)

# Output 'folders' beneath the outputs root path
IMAGES_OUTPUT_SUBPATH = "images"
IMAGE_THUMBNAILS_OUTPUT_SUBPATH = f"{IMAGES_OUTPUT_SUBPATH}/thumbs"
VIDEOS_OUTPUT_SUBPATH = "videos"
AUDIO_FROM_TEXT_OUTPUT_SUBPATH = "audio-from-text"
TEXT_FROM_AUDIO_OUTPUT_SUBPATH = "text-from-audio"

KEYWORDS_TAG_KEY = "Keywords"
CELEBRITIES_TAG_KEY = "Celebrities"
TAG_VALUE_SEPARATOR = "/"

# Job-state table layout
PENDING_JOBS_JOB_ID_ATTR = "JobId"
PENDING_JOBS_STATE_ATTR = "WorkflowState"

# Async completion message fields
JOB_COMPLETION_JOB_ID_FIELD = "JobId"
JOB_COMPLETION_STATUS_FIELD = "Status"
JOB_SUCCEEDED_STATUS = "SUCCEEDED"

MAX_KEYWORDS_OR_CELEBRITIES = 10
DEFAULT_THUMBNAIL_MAX_DIMENSION = 1024

MAX_WORKFLOW_NAME_LENGTH = 80
MAX_NOTIFICATION_SUBJECT_LENGTH = 100
FOLDER_MARKER_SUFFIX = "_$folder$"
