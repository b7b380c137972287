import enum
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


class AuditAction(str, enum.Enum):
    REQUEST_SIMULATED = "REQUEST_SIMULATED"
    STATUS_CHANGED = "STATUS_CHANGED"
    PROFILE_VIEWED = "PROFILE_VIEWED"


class AuditEvent(BaseModel):
    actor: str
    action: AuditAction
    entity_type: str
    entity_id: str
    details: dict[str, Any] = {}
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
