import asyncio
import json

from iris_console.models.audit import AuditAction
from iris_console.models.request import RequestFilter, RequestStatus
from iris_console.services.alert_banner import AlertBanner
from iris_console.services.alert_simulator import AlertSimulator
from iris_console.services.audit_logger import AuditTrail


def test_summary(console):
    summary = console.summary()
    assert summary.total == 4
    assert summary.pending == 2
    assert summary.critical == 1
    assert summary.active_caregivers == 3


def test_visible_requests_follow_filter(console):
    console.select_filter(RequestFilter.ATTENDED)
    assert [r.resident_name for r in console.visible_requests()] == ["Samuel Brooks"]


def test_simulate_alert_resets_filter(console, center, feedback):
    console.select_filter(RequestFilter.RESOLVED)

    request = console.simulate_alert()

    assert console.selected_filter == RequestFilter.ALL
    assert console.visible_requests()[0] is request
    assert len(center.notifications) == 1
    assert feedback.events[0] == ("warning",)
    assert console.audit.events[-1].action == AuditAction.REQUEST_SIMULATED


def test_simulator_shows_banner(store, notifications):
    async def scenario():
        banner = AlertBanner(dismiss_after=0.05)
        simulator = AlertSimulator(store, notifications, banner=banner, audit=AuditTrail(export_path=""))
        request = simulator.simulate()
        shown = banner.text
        await asyncio.sleep(0.15)
        return request, shown, banner.text

    request, shown, after = asyncio.run(scenario())
    assert shown == f"New request from {request.resident_name}"
    assert after is None


def test_open_profile_for_known_resident(console):
    request = console.store.history_for("Evelyn Carter")[0]

    context = console.open_profile(request.id)

    assert console.selected_resident is context
    assert context.id == "Evelyn Carter"
    assert context.profile.age == 84
    assert context.profile.room == "A-203"
    assert context.profile.communication_style == "Eye-controlled selection board"
    assert context.pending_count == 1
    assert context.attended_count == 0
    assert context.resolved_count == 0
    assert console.audit.events[-1].action == AuditAction.PROFILE_VIEWED

    console.close_profile()
    assert console.selected_resident is None


def test_open_profile_for_unknown_resident_uses_default(console):
    request = console.simulate_alert()
    console.simulate_alert()

    context = console.open_profile(request.id)

    assert context.profile.name == "Rose Daniels"
    assert context.profile.room == "A-104"
    assert context.profile.age == 80
    assert context.profile.emergency_contact == "Primary Contact • (555) 000-0000"
    assert len(context.history) == 2


def test_attend_and_resolve_are_audited(console):
    request = console.store.history_for("Harold King")[0]

    console.attend(request.id)
    console.resolve(request.id)

    assert request.status == RequestStatus.RESOLVED
    changes = [e for e in console.audit.events if e.action == AuditAction.STATUS_CHANGED]
    assert [e.details["status"] for e in changes] == ["ATTENDED", "RESOLVED"]


def test_audit_export(tmp_path):
    export = tmp_path / "audit" / "events.jsonl"
    trail = AuditTrail(export_path=str(export))

    trail.record("caregiver", AuditAction.PROFILE_VIEWED, "ResidentProfile", "Grace Mensah")

    lines = export.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert payload["action"] == "PROFILE_VIEWED"
    assert payload["entity_id"] == "Grace Mensah"
