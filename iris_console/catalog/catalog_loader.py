import json
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from ..errors import CatalogError
from ..models.catalog import Catalog


def load_catalog(path: str | Path | None = None) -> Catalog:
    if path is None:
        path = Path(__file__).with_name("catalog_v1.json")
    else:
        path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Unable to read catalog {path}: {exc}") from exc
    try:
        return Catalog.model_validate(raw)
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog {path}: {exc}") from exc


@lru_cache
def default_catalog() -> Catalog:
    return load_catalog()
