from .request import AssistanceRequest, RequestFilter, RequestStatus, Urgency
from .profile import ResidentProfile, ResidentProfileContext
from .catalog import Catalog, ProfileEntry, RequestTemplate, ResidentTemplate, SeedRequest
from .audit import AuditAction, AuditEvent
from .notifications import LocalNotification

__all__ = [
    "AssistanceRequest",
    "RequestFilter",
    "RequestStatus",
    "Urgency",
    "ResidentProfile",
    "ResidentProfileContext",
    "Catalog",
    "ProfileEntry",
    "RequestTemplate",
    "ResidentTemplate",
    "SeedRequest",
    "AuditAction",
    "AuditEvent",
    "LocalNotification",
]
