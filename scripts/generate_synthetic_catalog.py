import argparse
import json
import random
from pathlib import Path

from faker import Faker

from iris_console.catalog import default_catalog
from iris_console.config import get_settings

fake = Faker("en_GB")

COMMUNICATION_STYLES = [
    "Eye-controlled selection board",
    "Gaze + blink confirmation",
    "Eye tracking with large icon prompts",
    "Eye focus dwell selection",
]

RELATIONSHIPS = ["Daughter", "Son", "Niece", "Spouse", "Nephew", "Friend"]


def _room() -> str:
    return f"{random.choice('ABC')}-{random.randint(1, 399):03d}"


def _phone() -> str:
    return f"(555) {random.randint(100, 999)}-{random.randint(1000, 9999)}"


def generate_synthetic_catalog(count: int = 20) -> dict:
    base = default_catalog()
    residents = []
    profiles = {}
    for _ in range(count):
        name = fake.unique.name()
        residents.append({"name": name, "room": _room(), "avatar_url": None})
        surname = name.split(" ")[-1]
        profiles[name] = {
            "age": random.randint(70, 98),
            "communication_style": random.choice(COMMUNICATION_STYLES),
            "care_notes": fake.sentence(nb_words=8),
            "emergency_contact": (
                f"{fake.first_name()} {surname} ({random.choice(RELATIONSHIPS)}) • {_phone()}"
            ),
        }

    return {
        "seed_requests": [seed.model_dump(mode="json") for seed in base.seed_requests],
        "residents": residents,
        "request_types": [t.model_dump(mode="json") for t in base.request_types],
        "profiles": profiles,
        "default_profile": base.default_profile.model_dump(mode="json"),
    }


if __name__ == "__main__":
    settings = get_settings()
    if settings.ENVIRONMENT != "dev" or not settings.SYNTHETIC_DATA_MODE:
        raise SystemExit("Synthetic data generation is only permitted in dev with SYNTHETIC_DATA_MODE=true")

    parser = argparse.ArgumentParser(description="Write a synthetic resident catalog")
    parser.add_argument("output", help="Path of the catalog JSON to write")
    parser.add_argument("--count", type=int, default=20)
    args = parser.parse_args()

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(generate_synthetic_catalog(args.count), indent=2), encoding="utf-8")

    print(f"Synthetic catalog written to {output}")
