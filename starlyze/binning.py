"""Histogram bin-width selection."""

from __future__ import annotations

from collections.abc import Iterable


def freedman_diaconis_bin_width(data: Iterable[float]) -> float:
    """Return the Freedman-Diaconis bin width for ``data``."""
    values = sorted(data)
    n = len(values)
    if n == 0:
        raise ValueError("cannot compute a bin width for empty data")
    q1 = values[n // 4]
    q3 = values[3 * n // 4]
    return 2 * (q3 - q1) / n ** (1.0 / 3.0)