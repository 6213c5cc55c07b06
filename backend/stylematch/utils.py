"""
Small helpers shared across services
"""
import random
import re
import time
from typing import Optional

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """
    Create a URL/filename-safe slug

    "Mid-Century Modern" -> "mid-century-modern", "  Art!! Deco  " -> "art-deco"
    """
    return _NON_ALNUM.sub("-", text.lower()).strip("-")


def epoch_millis() -> int:
    return int(time.time() * 1000)


class RandomSource:
    """
    Source of the pipeline's intentional nondeterminism.

    The confidence score shown to clients and the generation seed both come
    from here so tests can pin them by passing a seeded or stubbed instance.
    """

    CONFIDENCE_FLOOR = 0.85
    CONFIDENCE_SPAN = 0.1
    SEED_UPPER_BOUND = 1_000_000

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def confidence(self) -> float:
        """Cosmetic confidence in [0.85, 0.95)"""
        return self.CONFIDENCE_FLOOR + self._rng.random() * self.CONFIDENCE_SPAN

    def seed(self) -> int:
        """Generation seed in [0, 1_000_000)"""
        return self._rng.randrange(self.SEED_UPPER_BOUND)
