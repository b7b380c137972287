import json

import pytest

from conftest import ScriptedRandomSource
from iris_console.catalog import load_catalog
from iris_console.errors import CatalogError
from iris_console.models.request import AssistanceRequest, Urgency
from iris_console.services.profiles import profile_for
from iris_console.services.request_store import RequestStore


def test_bundled_catalog(catalog):
    assert len(catalog.seed_requests) == 4
    assert len(catalog.residents) == 5
    assert len(catalog.request_types) == 5
    assert set(catalog.profiles) == {"Evelyn Carter", "Samuel Brooks", "Grace Mensah", "Harold King"}


def test_missing_catalog(tmp_path):
    with pytest.raises(CatalogError, match="Unable to read"):
        load_catalog(tmp_path / "missing.json")


def test_invalid_catalog(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"residents": [{"name": "No Room"}]}), encoding="utf-8")

    with pytest.raises(CatalogError, match="Invalid catalog"):
        load_catalog(path)


def test_store_uses_catalog_path(monkeypatch, tmp_path, catalog):
    data = catalog.model_dump(mode="json")
    data["seed_requests"] = data["seed_requests"][:1]
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    monkeypatch.setenv("CATALOG_PATH", str(path))

    store = RequestStore(random_source=ScriptedRandomSource([0]))

    assert [r.resident_name for r in store.list()] == ["Evelyn Carter"]


def test_profile_lookup_fallback(catalog):
    request = AssistanceRequest(
        resident_name="Helen Walsh",
        room="B-009",
        request_type="Nurse Check-in",
        urgency=Urgency.NORMAL,
        time_ago="Just now",
    )
    profile = profile_for(request, catalog)
    assert profile.name == "Helen Walsh"
    assert profile.age == 80
    assert profile.communication_style == "Eye-controlled communication"


@pytest.mark.parametrize(
    "name,initials",
    [
        ("Evelyn Carter", "EC"),
        ("anita clarke", "ac"),
        ("Mary Jane Watson", "MJ"),
        ("Cher", "C"),
        ("Peter  Owusu", "PO"),
        ("", ""),
    ],
)
def test_initials(name, initials):
    request = AssistanceRequest(
        resident_name=name,
        room="A-000",
        request_type="General Assistance",
        urgency=Urgency.NORMAL,
        time_ago="Just now",
    )
    assert request.initials == initials
