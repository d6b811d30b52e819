import math
import random

import pytest

from starlyze.physics import MUON_MASS, PION_MASS, PROTON_MASS
from starlyze.reader import (
    Event,
    SimulationResult,
    Track,
    parse_simulation_results,
    read_simulation_results,
)

SAMPLE = """\
CONFIG_OPT: 1 443013 0 0
BEAM_1: 82 208 1.0
BEAM_2: 82 208 1.0
EVENT: 1 2 1
VERTEX: 0 0 0 0 1 0 0 2
TRACK: 13 x 0.5 0.2 0.3 1 0 0 13
TRACK: 13 x -0.5 -0.2 -0.1 1 1 0 -13
EVENT: 2 4 1
VERTEX: 0 0 0 0 1 0 0 4
TRACK: 211 x 0.1 0.2 0.3 2 0 0 211
TRACK: 211 x -0.1 0.3 0.2 2 1 0 -211
TRACK: 211 x 0.4 -0.2 0.1 2 2 0 211
TRACK: 211 x -0.3 0.1 -0.5 2 3 0 -211
"""


def test_track_energy_momentum_relation():
    t = Track.from_momentum(0.3, -0.4, 1.2, MUON_MASS)
    p2 = 0.3**2 + 0.4**2 + 1.2**2
    assert t.energy**2 == pytest.approx(p2 + MUON_MASS**2)
    assert (t.px, t.py, t.pz) == (0.3, -0.4, 1.2)


def test_track_pseudo_rap_symmetry():
    forward = Track.from_momentum(0.3, 0.1, 0.8, PION_MASS)
    backward = Track.from_momentum(0.3, 0.1, -0.8, PION_MASS)
    assert forward.pseudo_rap > 0
    assert backward.pseudo_rap == pytest.approx(-forward.pseudo_rap)
    assert Track.from_momentum(1.0, 0.0, 0.0, PION_MASS).pseudo_rap == 0.0


def test_back_to_back_event():
    a = Track.from_momentum(0.5, 0.2, 0.3, MUON_MASS)
    b = Track.from_momentum(-0.5, -0.2, -0.3, MUON_MASS)
    event = Event.from_tracks([a, b], random.Random(1))
    assert event.p_trans == pytest.approx(0.0)
    assert event.m_inv == pytest.approx(2 * a.energy)
    assert event.m_inv_pairs == (pytest.approx(event.m_inv),)


def test_event_total_mass_independent_of_shuffle():
    tracks = [
        Track.from_momentum(0.1, 0.2, 0.3, PION_MASS),
        Track.from_momentum(-0.1, 0.3, 0.2, PION_MASS),
        Track.from_momentum(0.4, -0.2, 0.1, PION_MASS),
        Track.from_momentum(-0.3, 0.1, -0.5, PION_MASS),
    ]
    masses = {round(Event.from_tracks(tracks, random.Random(s)).m_inv, 12) for s in range(10)}
    assert len(masses) == 1
    event = Event.from_tracks(tracks, random.Random(3))
    assert len(event.m_inv_pairs) == 2
    assert sorted(event.pseudo_raps) == sorted(t.pseudo_rap for t in tracks)
    assert event.m_inv >= sum(event.m_inv_pairs) - 1e-12


def test_event_needs_two_tracks():
    with pytest.raises(ValueError):
        Event.from_tracks([Track.from_momentum(1.0, 0.0, 0.0, PION_MASS)])


def test_from_beams():
    result = SimulationResult.from_beams([], 443011, 2.0, 3.0)
    assert result.n_events == 0
    assert result.sqrt_s_nn == pytest.approx(PROTON_MASS * 5.0)
    assert result.decay_repr_str == "jpsi_2e"
    assert result.decay_latex_str == "J/\\psi \\rightarrow e^{+}e^{-}"


def test_parse_sample():
    result = parse_simulation_results(SAMPLE.splitlines(), random.Random(0))
    assert result.n_events == 2
    assert result.decay_repr_str == "jpsi_2mu"
    assert result.sqrt_s_nn == pytest.approx(2 * PROTON_MASS)
    first, second = result.events
    assert len(first.m_inv_pairs) == 1
    assert len(first.pseudo_raps) == 2
    assert first.p_trans == pytest.approx(0.0)
    assert len(second.m_inv_pairs) == 2
    assert len(second.pseudo_raps) == 4
    assert second.p_trans == pytest.approx(math.hypot(0.1, 0.4))


def test_read_file_matches_parse(tmp_path):
    path = tmp_path / "slight.out"
    path.write_text(SAMPLE, encoding="utf-8")
    from_file = read_simulation_results(str(path), random.Random(5))
    from_lines = parse_simulation_results(SAMPLE.splitlines(), random.Random(5))
    assert from_file == from_lines


def test_missing_config_raises():
    lines = [line for line in SAMPLE.splitlines() if not line.startswith("CONFIG_OPT:")]
    with pytest.raises(ValueError):
        parse_simulation_results(lines)


def test_malformed_track_raises():
    lines = SAMPLE.splitlines()[:4] + ["TRACK: 13 x 0.5"]
    with pytest.raises(ValueError):
        parse_simulation_results(lines)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_simulation_results(str(tmp_path / "absent.out"))