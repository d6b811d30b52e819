"""Particle and decay identifiers used in simulation output files."""

from __future__ import annotations

from enum import IntEnum

ELECTRON_MASS = 0.000510998928
PROTON_MASS = 0.938272046
MUON_MASS = 0.1056583755
PION_MASS = 0.13957018
KAON_MASS = 0.493677


class ParticleId(IntEnum):
    """PDG particle codes; negative values denote the antiparticle."""

    ELECTRON = 11
    PROTON = 2212
    MUON = 13
    PION = 211
    KAON = 321


class DecayId(IntEnum):
    """Decay channel codes (PROD_PID numbering)."""

    JPSI_2K2PI = 443321211
    JPSI_4PI = 443211
    JPSI_2MU = 443013
    JPSI_2E = 443011
    JPSI_2P = 4432212


_MASSES = {
    ParticleId.ELECTRON: ELECTRON_MASS,
    ParticleId.PROTON: PROTON_MASS,
    ParticleId.MUON: MUON_MASS,
    ParticleId.PION: PION_MASS,
    ParticleId.KAON: KAON_MASS,
}

_REPR = {
    DecayId.JPSI_2K2PI: "jpsi_2K2pi",
    DecayId.JPSI_4PI: "jpsi_4pi",
    DecayId.JPSI_2MU: "jpsi_2mu",
    DecayId.JPSI_2E: "jpsi_2e",
    DecayId.JPSI_2P: "jpsi_2p",
}

_LATEX = {
    DecayId.JPSI_2K2PI: "J/\\psi \\rightarrow K^{+}K^{-}\\pi^{+}\\pi^{-}",
    DecayId.JPSI_4PI: "J/\\psi \\rightarrow \\pi^{+}\\pi^{-}\\pi^{+}\\pi^{-}",
    DecayId.JPSI_2MU: "J/\\psi \\rightarrow \\mu^{+}\\mu^{-}",
    DecayId.JPSI_2E: "J/\\psi \\rightarrow e^{+}e^{-}",
    DecayId.JPSI_2P: "J/\\psi \\rightarrow p\\overline{p}",
}

UNKNOWN_REPR = "NoReprStrFound"
UNKNOWN_LATEX = "NO DECAY ID FOUND"


def particle_mass(particle_id: int) -> float:
    """Return the mass in GeV of a particle, or 0.0 if the id is unknown."""
    return _MASSES.get(abs(int(particle_id)), 0.0)


def decay_repr(decay_id: int) -> str:
    """Return a short file-name friendly name for a decay channel."""
    return _REPR.get(int(decay_id), UNKNOWN_REPR)


def decay_latex(decay_id: int) -> str:
    """Return the LaTeX notation of a decay channel."""
    return _LATEX.get(int(decay_id), UNKNOWN_LATEX)