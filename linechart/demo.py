"""Demo data for the chart hosts."""
from __future__ import annotations

import random
from typing import List, Optional

from .geometry import Sample


def generate_data(amount: int, low: int = 0, high: int = 1000, *, seed: Optional[int] = None) -> List[Sample]:
    """``amount`` samples at ``x = 0..amount-1`` with random integer ``y`` in ``[low, high)``."""
    rng = random.Random(seed)
    span = max(1, high - low)
    return [Sample(float(i), float(rng.randrange(span) + low)) for i in range(amount)]


__all__ = ["generate_data"]
