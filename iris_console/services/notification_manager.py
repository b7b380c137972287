from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Protocol

from ..config import get_settings
from ..models.notifications import LocalNotification
from ..models.request import AssistanceRequest

logger = logging.getLogger(__name__)

NOTIFICATION_TITLE = "IRIS: New Assistance Request"
ALERT_SOUND_ID = 1005
VIBRATE_SOUND_ID = 4095


class NotificationCenter(Protocol):
    async def request_authorization(self) -> bool: ...

    def add(self, notification: LocalNotification) -> None: ...


class FeedbackDevice(Protocol):
    def notify_warning(self) -> None: ...

    def play_system_sound(self, sound_id: int) -> None: ...


class NotificationManager(Protocol):
    async def request_authorization_once(self) -> None: ...

    def schedule_alert(self, request: AssistanceRequest) -> LocalNotification | None: ...

    def play_feedback(self) -> None: ...


class InMemoryNotificationCenter:
    """Keeps scheduled notifications in memory in place of an OS notification centre."""

    def __init__(self, grant: bool = True):
        self.grant = grant
        self.authorization_requests = 0
        self.notifications: list[LocalNotification] = []

    async def request_authorization(self) -> bool:
        self.authorization_requests += 1
        return self.grant

    def add(self, notification: LocalNotification) -> None:
        self.notifications.append(notification)

    def due(self, now: datetime | None = None) -> list[LocalNotification]:
        now = now or datetime.now(timezone.utc)
        return [n for n in self.notifications if n.deliver_at <= now]


class LoggingFeedback:
    def notify_warning(self) -> None:
        logger.info("Haptic feedback: warning")

    def play_system_sound(self, sound_id: int) -> None:
        logger.info("System sound %s", sound_id)


class DemoNotificationManager:
    def __init__(
        self,
        center: NotificationCenter,
        feedback: FeedbackDevice | None = None,
        *,
        delay_seconds: float | None = None,
    ):
        settings = get_settings()
        self.center = center
        self.feedback = feedback if settings.FEEDBACK_ENABLED else None
        self.enabled = settings.NOTIFICATIONS_ENABLED
        self.delay_seconds = (
            delay_seconds if delay_seconds is not None else settings.NOTIFICATION_DELAY_SECONDS
        )
        self._requested_auth = False

    async def request_authorization_once(self) -> None:
        if self._requested_auth:
            return
        self._requested_auth = True
        try:
            granted = await self.center.request_authorization()
        except Exception:
            # Outcome is never surfaced; the console works without permission.
            logger.warning("Notification authorization failed", exc_info=True)
            return
        logger.debug("Notification authorization granted=%s", granted)

    def schedule_alert(self, request: AssistanceRequest) -> LocalNotification | None:
        if not self.enabled:
            return None
        notification = LocalNotification(
            title=NOTIFICATION_TITLE,
            body=f"{request.resident_name} in room {request.room}: {request.request_type}",
            delay_seconds=self.delay_seconds,
            request_id=request.id,
        )
        self.center.add(notification)
        logger.info("Scheduled notification %s for request %s", notification.identifier, request.id)
        return notification

    def play_feedback(self) -> None:
        if self.feedback is None:
            return
        self.feedback.notify_warning()
        self.feedback.play_system_sound(ALERT_SOUND_ID)
        self.feedback.play_system_sound(VIBRATE_SOUND_ID)
