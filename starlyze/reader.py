"""Reading simulation output into tracks, events and results."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .physics import PROTON_MASS, decay_latex, decay_repr, particle_mass

_DEFAULT_RNG = random.Random()


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


def _pseudo_rapidity(p_mag: float, pz: float) -> float:
    num = p_mag + pz
    den = p_mag - pz
    if den == 0:
        return math.inf if num > 0 else math.nan
    if num == 0:
        return -math.inf
    return 0.5 * math.log(num / den)


def _split_fields(line: str) -> list[str]:
    if not line:
        return []
    fields = line.split(" ")
    if fields[-1] == "":
        fields.pop()
    return fields


def _invariant_mass(energy: float, px: float, py: float, pz: float) -> float:
    return _sqrt(energy * energy - px * px - py * py - pz * pz)


@dataclass(frozen=True)
class Track:
    """A reconstructed particle track."""

    energy: float
    px: float
    py: float
    pz: float
    pseudo_rap: float

    @classmethod
    def from_momentum(cls, px: float, py: float, pz: float, mass: float) -> Track:
        """Build a track from its momentum components and mass."""
        p_mag = math.sqrt(px * px + py * py + pz * pz)
        energy = math.sqrt(p_mag * p_mag + mass * mass)
        return cls(energy, px, py, pz, _pseudo_rapidity(p_mag, pz))


@dataclass(frozen=True)
class Event:
    """Kinematic summary of one event."""

    m_inv: float
    p_trans: float
    m_inv_pairs: tuple[float, ...]
    pseudo_raps: tuple[float, ...]

    @classmethod
    def from_tracks(
        cls, tracks: Sequence[Track], rng: random.Random | None = None
    ) -> Event:
        """Build an event from its tracks.

        The tracks are shuffled first, since a detector cannot tell which
        track belongs to which particle.
        """
        shuffled = list(tracks)
        if len(shuffled) < 2:
            raise ValueError("an event needs at least two tracks")
        (rng or _DEFAULT_RNG).shuffle(shuffled)

        def pair_sum(a: Track, b: Track) -> tuple[float, float, float, float]:
            return (a.energy + b.energy, a.px + b.px, a.py + b.py, a.pz + b.pz)

        first = pair_sum(shuffled[0], shuffled[1])
        pairs = [_invariant_mass(*first)]
        second = (0.0, 0.0, 0.0, 0.0)
        if len(shuffled) == 4:
            second = pair_sum(shuffled[2], shuffled[3])
            pairs.append(_invariant_mass(*second))

        energy, px, py, pz = (a + b for a, b in zip(first, second))
        return cls(
            m_inv=_invariant_mass(energy, px, py, pz),
            p_trans=math.sqrt(px * px + py * py),
            m_inv_pairs=tuple(pairs),
            pseudo_raps=tuple(t.pseudo_rap for t in shuffled),
        )


@dataclass
class SimulationResult:
    """All events of a simulation run plus run metadata."""

    n_events: int
    sqrt_s_nn: float
    decay_repr_str: str
    decay_latex_str: str
    events: list[Event] = field(default_factory=list)

    @classmethod
    def from_beams(
        cls,
        events: Sequence[Event],
        decay_id: int,
        beam_1_gamma: float,
        beam_2_gamma: float,
    ) -> SimulationResult:
        """Build a result; energy per nucleon counts protons only."""
        return cls(
            n_events=len(events),
            sqrt_s_nn=PROTON_MASS * beam_1_gamma + PROTON_MASS * beam_2_gamma,
            decay_repr_str=decay_repr(decay_id),
            decay_latex_str=decay_latex(decay_id),
            events=list(events),
        )


def _field(fields: list[str], index: int, line: str) -> str:
    try:
        return fields[index]
    except IndexError:
        raise ValueError(f"malformed line: {line!r}") from None


def parse_simulation_results(
    lines: Iterable[str], rng: random.Random | None = None
) -> SimulationResult:
    """Parse the lines of a simulation output file."""
    decay_id: int | None = None
    beam_1_gamma: float | None = None
    beam_2_gamma: float | None = None
    remaining: int | None = None
    tracks: list[Track] = []
    events: list[Event] = []

    for raw in lines:
        line = raw.rstrip("\r\n")
        fields = _split_fields(line)
        key = fields[0] if fields else ""

        if key == "CONFIG_OPT:":
            decay_id = int(_field(fields, 2, line))
        elif key == "BEAM_1:":
            beam_1_gamma = float(_field(fields, 3, line))
        elif key == "BEAM_2:":
            beam_2_gamma = float(_field(fields, 3, line))
        elif key == "EVENT:":
            remaining = int(_field(fields, 2, line))
            tracks = []
        elif key == "TRACK:" and remaining:
            px = float(_field(fields, 3, line))
            py = float(_field(fields, 4, line))
            pz = float(_field(fields, 5, line))
            pid = int(_field(fields, 9, line))
            tracks.append(Track.from_momentum(px, py, pz, particle_mass(pid)))
            remaining -= 1

        if remaining == 0 and tracks:
            events.append(Event.from_tracks(tracks, rng))
            tracks = []

    if decay_id is None:
        raise ValueError("missing CONFIG_OPT line with the decay id")
    if beam_1_gamma is None or beam_2_gamma is None:
        raise ValueError("missing BEAM_1 or BEAM_2 line")
    return SimulationResult.from_beams(events, decay_id, beam_1_gamma, beam_2_gamma)


def read_simulation_results(
    result_file_path: str = "slight.out", rng: random.Random | None = None
) -> SimulationResult:
    """Read and parse a simulation output file."""
    with open(result_file_path, encoding="utf-8") as handle:
        return parse_simulation_results(handle, rng)