"""Fixed-width histograms and detector acceptance counting."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from .binning import freedman_diaconis_bin_width
from .reader import Event

PSEUDO_RAP_ACCEPTANCE = 0.9
MAX_DETECTED = 4


@dataclass
class Histogram:
    """A one-dimensional histogram with equal-width bins.

    Bin 0 holds the underflow and bin ``n_bins + 1`` the overflow; the
    regular bins are numbered 1 to ``n_bins``.
    """

    n_bins: int
    low: float
    high: float
    contents: list[float] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.n_bins < 1:
            raise ValueError("a histogram needs at least one bin")
        if not self.high > self.low:
            raise ValueError("the upper edge must lie above the lower edge")
        self.contents = [0.0] * (self.n_bins + 2)

    @property
    def width(self) -> float:
        """Width of every regular bin."""
        return (self.high - self.low) / self.n_bins

    @property
    def edges(self) -> list[float]:
        """Edges of the regular bins, lowest first."""
        return [self.low + i * self.width for i in range(self.n_bins + 1)]

    @property
    def regular_contents(self) -> list[float]:
        """Contents of the regular bins, without underflow and overflow."""
        return self.contents[1 : self.n_bins + 1]

    @property
    def maximum(self) -> float:
        """Largest content of a regular bin."""
        return max(self.regular_contents)

    def fill(self, value: float) -> int:
        """Add one entry and return the index of the bin it went into."""
        if math.isnan(value):
            raise ValueError("cannot fill a histogram with NaN")
        if value < self.low:
            index = 0
        elif value >= self.high:
            index = self.n_bins + 1
        else:
            index = int(self.n_bins * (value - self.low) / (self.high - self.low)) + 1
            index = min(index, self.n_bins)
        self.contents[index] += 1
        return index

    def bin_content(self, index: int) -> float:
        """Content of bin ``index``; zero outside the histogram."""
        if 0 <= index < len(self.contents):
            return self.contents[index]
        return 0.0

    def maximum_bin(self) -> int:
        """Index of the first regular bin holding the maximum."""
        regular = self.regular_contents
        return regular.index(max(regular)) + 1

    def bin_center(self, index: int) -> float:
        """Centre of bin ``index`` on the axis."""
        return self.low + (index - 0.5) * self.width

    def peak(self) -> float:
        """Centre of the bin with the most entries."""
        return self.bin_center(self.maximum_bin())

    def fwhm(self) -> float:
        """Full width at half maximum around the peak bin."""
        top = self.maximum_bin()
        half_max = self.maximum / 2.0
        left = right = top
        while self.bin_content(left) > half_max:
            left -= 1
        while self.bin_content(right) > half_max:
            right += 1
        return self.bin_center(right) - self.bin_center(left)


def histogram_from_data(data: Iterable[float]) -> Histogram:
    """Build and fill a histogram spanning ``data`` with Freedman-Diaconis bins."""
    values = list(data)
    bin_width = freedman_diaconis_bin_width(values)
    if not (bin_width > 0 and math.isfinite(bin_width)):
        raise ValueError("data spread is too small to choose a bin width")
    low, high = min(values), max(values)
    n_bins = max(int((high - low) / bin_width), 1)
    hist = Histogram(n_bins, low, high)
    for value in values:
        hist.fill(value)
    return hist


def detection_counts(
    events: Iterable[Event], acceptance: float = PSEUDO_RAP_ACCEPTANCE
) -> list[int]:
    """Count events by how many of their particles fall inside ``|eta| < acceptance``.

    Element ``k`` of the result is the number of events with exactly ``k``
    particles detected, for ``k`` from 0 to 4.
    """
    counts = [0] * (MAX_DETECTED + 1)
    for event in events:
        detected = sum(-acceptance < eta < acceptance for eta in event.pseudo_raps)
        if detected <= MAX_DETECTED:
            counts[detected] += 1
    return counts