import json
import logging
from pathlib import Path
from typing import Any

from ..config import get_settings
from ..models.audit import AuditAction, AuditEvent

logger = logging.getLogger(__name__)


class AuditTrail:
    def __init__(self, export_path: str | None = None):
        self.export_path = export_path if export_path is not None else get_settings().AUDIT_EXPORT_PATH
        self.events: list[AuditEvent] = []

    def record(
        self,
        actor: str,
        action: AuditAction,
        entity_type: str,
        entity_id: str,
        details: dict[str, Any] | None = None,
    ) -> AuditEvent:
        event = AuditEvent(
            actor=actor,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            details=details or {},
        )
        self.events.append(event)
        logger.debug("Audit %s %s %s", action.value, entity_type, entity_id)

        if self.export_path:
            _write_audit_export(self.export_path, event)

        return event


def _write_audit_export(path: str, event: AuditEvent) -> None:
    export_path = Path(path)
    export_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "timestamp": event.timestamp.isoformat(),
        "actor": event.actor,
        "action": event.action.value,
        "entity_type": event.entity_type,
        "entity_id": event.entity_id,
        "details": event.details,
    }
    with export_path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(payload) + "\n")
