import logging

from ..models.audit import AuditAction
from ..models.request import AssistanceRequest
from .alert_banner import AlertBanner
from .audit_logger import AuditTrail
from .notification_manager import NotificationManager
from .request_store import RequestStore

logger = logging.getLogger(__name__)


class AlertSimulator:
    def __init__(
        self,
        store: RequestStore,
        notifications: NotificationManager,
        banner: AlertBanner | None = None,
        audit: AuditTrail | None = None,
    ):
        self.store = store
        self.notifications = notifications
        self.banner = banner
        self.audit = audit or AuditTrail()

    def simulate(self) -> AssistanceRequest:
        request = self.store.simulate_incoming()

        if self.banner is not None:
            self.banner.show(banner_message(request))

        self.notifications.play_feedback()
        self.notifications.schedule_alert(request)

        self.audit.record(
            actor="SYSTEM",
            action=AuditAction.REQUEST_SIMULATED,
            entity_type="AssistanceRequest",
            entity_id=str(request.id),
            details={
                "urgency": request.urgency.value,
                "request_type": request.request_type,
                "retained": len(self.store),
            },
        )
        return request


def banner_message(request: AssistanceRequest) -> str:
    return f"New request from {request.resident_name}"
