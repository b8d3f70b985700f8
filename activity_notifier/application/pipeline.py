from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..domain.messages import build_slack_message
from ..errors import NotifierError
from ..models import SlackMessage, StravaActivity
from ..settings import Settings
from ..slack.application.ports import WebhookNotifierPort
from ..strava.application.ports import StravaClientPort

logger = logging.getLogger(__name__)


class PipelineStage(str, Enum):
    AUTHENTICATING = "authenticating"
    FETCHING = "fetching"
    FORMATTING = "formatting"
    NOTIFYING = "notifying"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class PipelineResult:
    """Outcome of one pipeline run.

    ``failed_stage`` and ``error`` are set only when ``stage`` is
    ``FAILED``; ``activity`` and ``message`` only when it is ``SUCCEEDED``.
    """

    stage: PipelineStage
    activity: Optional[StravaActivity] = None
    message: Optional[SlackMessage] = None
    failed_stage: Optional[PipelineStage] = None
    error: Optional[NotifierError] = None

    @property
    def ok(self) -> bool:
        return self.stage is PipelineStage.SUCCEEDED

    @classmethod
    def succeeded(
        cls, activity: StravaActivity, message: SlackMessage
    ) -> "PipelineResult":
        return cls(PipelineStage.SUCCEEDED, activity=activity, message=message)

    @classmethod
    def failed(cls, stage: PipelineStage, error: NotifierError) -> "PipelineResult":
        return cls(PipelineStage.FAILED, failed_stage=stage, error=error)


@dataclass
class NotifyLatestActivityUseCase:
    """Authenticate, fetch the latest activity, format it and post it."""

    strava: StravaClientPort
    notifier: WebhookNotifierPort
    settings: Settings

    async def __call__(self) -> PipelineResult:
        stage = PipelineStage.AUTHENTICATING
        try:
            logger.debug("Pipeline stage: %s", stage.value)
            access_token = await self.strava.exchange_token(
                self.settings.client_id,
                self.settings.client_secret,
                self.settings.code,
            )

            stage = PipelineStage.FETCHING
            logger.debug("Pipeline stage: %s", stage.value)
            activity = await self.strava.fetch_latest_activity(access_token)

            stage = PipelineStage.FORMATTING
            logger.debug("Pipeline stage: %s", stage.value)
            message = build_slack_message(activity)

            stage = PipelineStage.NOTIFYING
            logger.debug("Pipeline stage: %s", stage.value)
            await self.notifier.notify(self.settings.webhook_url, message)
        except NotifierError as exc:
            return PipelineResult.failed(stage, exc)

        return PipelineResult.succeeded(activity, message)


__all__ = [
    "NotifyLatestActivityUseCase",
    "PipelineResult",
    "PipelineStage",
]
