import json

from conftest import ScriptedRandomSource
from iris_console.catalog import load_catalog
from iris_console.models.catalog import Catalog
from iris_console.services.request_store import RequestStore
from scripts.generate_synthetic_catalog import generate_synthetic_catalog


def test_generated_catalog_validates():
    catalog = Catalog.model_validate(generate_synthetic_catalog(count=6))

    assert len(catalog.residents) == 6
    assert set(catalog.profiles) == {r.name for r in catalog.residents}
    assert len(catalog.seed_requests) == 4
    assert len(catalog.request_types) == 5


def test_generated_catalog_feeds_store(monkeypatch, tmp_path):
    data = generate_synthetic_catalog(count=3)
    path = tmp_path / "synthetic.json"
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    monkeypatch.setenv("CATALOG_PATH", str(path))

    assert load_catalog(path).residents[0].name == data["residents"][0]["name"]

    store = RequestStore(random_source=ScriptedRandomSource([0]))
    request = store.simulate_incoming()

    assert request.resident_name == data["residents"][0]["name"]
    assert request.avatar_url is None
    assert len(store) == 5
