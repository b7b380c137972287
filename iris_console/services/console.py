from __future__ import annotations

import logging
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from ..config import get_settings
from ..models.audit import AuditAction
from ..models.profile import ResidentProfileContext
from ..models.request import AssistanceRequest, RequestFilter
from .alert_banner import AlertBanner
from .alert_simulator import AlertSimulator
from .audit_logger import AuditTrail
from .notification_manager import (
    DemoNotificationManager,
    InMemoryNotificationCenter,
    LoggingFeedback,
    NotificationManager,
)
from .profiles import build_profile_context
from .random_source import RandomSource
from .request_store import RequestStore

logger = logging.getLogger(__name__)


class ConsoleSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int
    pending: int
    critical: int
    active_caregivers: int


class CaregiverConsole:
    """View state of the single-screen console."""

    def __init__(
        self,
        store: RequestStore,
        notifications: NotificationManager,
        *,
        banner: AlertBanner | None = None,
        audit: AuditTrail | None = None,
        actor: str = "caregiver",
    ):
        self.store = store
        self.notifications = notifications
        self.banner = banner
        self.audit = audit or AuditTrail()
        self.actor = actor
        self.simulator = AlertSimulator(store, notifications, banner=banner, audit=self.audit)
        self.active_caregivers = get_settings().ACTIVE_CAREGIVERS
        self.selected_filter = RequestFilter.ALL
        self.selected_resident: ResidentProfileContext | None = None

    def select_filter(self, request_filter: RequestFilter) -> None:
        self.selected_filter = request_filter

    def visible_requests(self) -> list[AssistanceRequest]:
        return self.store.filtered(self.selected_filter)

    def summary(self) -> ConsoleSummary:
        return ConsoleSummary(
            total=len(self.store),
            pending=self.store.pending_count(),
            critical=self.store.critical_count(),
            active_caregivers=self.active_caregivers,
        )

    def simulate_alert(self) -> AssistanceRequest:
        request = self.simulator.simulate()
        self.selected_filter = RequestFilter.ALL
        return request

    def open_profile(self, request_id: UUID) -> ResidentProfileContext:
        request = self.store.get(request_id)
        context = build_profile_context(self.store, request)
        self.selected_resident = context
        self.audit.record(
            actor=self.actor,
            action=AuditAction.PROFILE_VIEWED,
            entity_type="ResidentProfile",
            entity_id=context.id,
            details={"history": len(context.history)},
        )
        return context

    def close_profile(self) -> None:
        self.selected_resident = None

    def attend(self, request_id: UUID) -> AssistanceRequest:
        request = self.store.attend(request_id)
        self._audit_status(request)
        return request

    def resolve(self, request_id: UUID) -> AssistanceRequest:
        request = self.store.resolve(request_id)
        self._audit_status(request)
        return request

    def _audit_status(self, request: AssistanceRequest) -> None:
        self.audit.record(
            actor=self.actor,
            action=AuditAction.STATUS_CHANGED,
            entity_type="AssistanceRequest",
            entity_id=str(request.id),
            details={"status": request.status.value},
        )


def create_console(
    *,
    random_source: RandomSource | None = None,
    with_banner: bool = True,
) -> CaregiverConsole:
    store = RequestStore(random_source=random_source)
    notifications = DemoNotificationManager(InMemoryNotificationCenter(), LoggingFeedback())
    banner = AlertBanner() if with_banner else None
    logger.info("Console ready with %s requests", len(store))
    return CaregiverConsole(store, notifications, banner=banner)
