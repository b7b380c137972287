import random
from typing import Protocol


class RandomSource(Protocol):
    def pick(self, count: int) -> int:
        """Return an index in ``range(count)``."""
        ...


class SystemRandomSource:
    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def pick(self, count: int) -> int:
        if count <= 0:
            raise ValueError("count must be positive")
        return self._random.randrange(count)
