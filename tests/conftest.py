import itertools
import os

import pytest

# Ensure settings are predictable before package imports
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("MAX_RETAINED_REQUESTS", "40")
os.environ.setdefault("BANNER_CANCEL_PREVIOUS", "true")


class ScriptedRandomSource:
    """Replays a fixed sequence of picks, wrapped to the option count."""

    def __init__(self, picks, repeat: bool = True):
        picks = list(picks)
        self._picks = itertools.cycle(picks) if repeat else iter(picks)
        self.calls: list[int] = []

    def pick(self, count: int) -> int:
        self.calls.append(count)
        return next(self._picks) % count


class RecordingFeedback:
    def __init__(self):
        self.events = []

    def notify_warning(self) -> None:
        self.events.append(("warning",))

    def play_system_sound(self, sound_id: int) -> None:
        self.events.append(("sound", sound_id))


@pytest.fixture(autouse=True)
def fresh_settings():
    from iris_console.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def catalog():
    from iris_console.catalog import load_catalog

    return load_catalog()


@pytest.fixture
def random_source():
    return ScriptedRandomSource([0])


@pytest.fixture
def store(catalog, random_source):
    from iris_console.services.request_store import RequestStore

    return RequestStore(catalog, random_source)


@pytest.fixture
def center():
    from iris_console.services.notification_manager import InMemoryNotificationCenter

    return InMemoryNotificationCenter()


@pytest.fixture
def feedback():
    return RecordingFeedback()


@pytest.fixture
def notifications(center, feedback):
    from iris_console.services.notification_manager import DemoNotificationManager

    return DemoNotificationManager(center, feedback)


@pytest.fixture
def console(store, notifications):
    from iris_console.services.audit_logger import AuditTrail
    from iris_console.services.console import CaregiverConsole

    return CaregiverConsole(store, notifications, audit=AuditTrail(export_path=""))
