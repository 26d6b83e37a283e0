"""Resolve a pixel position to the sample drawn closest to it."""
from __future__ import annotations

from typing import Dict, Optional, Sequence

from .geometry import Sample, index_at


class NearestSampleIndex:
    """Map pixel x positions to samples by whole sample index.

    Samples are matched on their original ``x``; sparse or non-integer ``x``
    values simply produce misses.  There is no interpolation.
    """

    def __init__(self, samples: Sequence[Sample], config) -> None:
        self.config = config
        self._by_x: Dict[float, Sample] = {}
        for sample in samples:
            self._by_x.setdefault(sample.x, sample)

    def nearest_sample_x(self, px: float, zoom: float) -> int:
        return index_at(px, zoom, self.config)

    def lookup(self, px: float, zoom: float) -> Optional[Sample]:
        """Return the sample under ``px`` or ``None`` when nothing sits there."""
        return self._by_x.get(self.nearest_sample_x(px, zoom))

    def __len__(self) -> int:
        return len(self._by_x)


__all__ = ["NearestSampleIndex"]
