"""Wiring of production adapters from application settings."""

from __future__ import annotations

from mediaingester.core.config import AppSettings
from mediaingester.core.workflow_config import WorkflowConfig
from mediaingester.orchestration.step_functions import StepFunctionsOrchestrator
from mediaingester.persistence import create_persistence
from mediaingester.services.polly import PollySpeechSynthesizer
from mediaingester.services.rekognition import RekognitionInference
from mediaingester.services.sns import SNSNotifier
from mediaingester.services.transcribe import TranscribeTranscriber
from mediaingester.stages import StageServices


def build_services(settings: AppSettings | None = None,
                   config: WorkflowConfig | None = None) -> StageServices:
    """StageServices backed by S3, DynamoDB, Rekognition, Transcribe, Polly and SNS."""
    if settings is None:
        settings = AppSettings()
    config, job_store, object_store = create_persistence(settings, config)

    aws = {"region": settings.aws.region, "endpoint_url": settings.aws.endpoint_url}
    rekognition = RekognitionInference(**aws)
    return StageServices(
        config=config,
        object_store=object_store,
        inference=rekognition,
        async_inference=rekognition,
        transcriber=TranscribeTranscriber(
            language_code=settings.transcription.language_code, **aws,
        ),
        synthesizer=PollySpeechSynthesizer(**aws),
        notifier=SNSNotifier(**aws),
        job_store=job_store,
        transcription=settings.transcription,
    )


def build_orchestrator(settings: AppSettings, config: WorkflowConfig) -> StepFunctionsOrchestrator:
    return StepFunctionsOrchestrator(
        state_machine_arn=config.state_machine_arn(),
        region=settings.aws.region,
        endpoint_url=settings.aws.endpoint_url,
    )
