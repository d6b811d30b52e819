"""Plots of simulation results: invariant masses, momenta and acceptance."""

from __future__ import annotations

import argparse
import re
from collections.abc import Callable, Sequence
from pathlib import Path

from matplotlib.figure import Figure

from .binning import freedman_diaconis_bin_width
from .histogram import PSEUDO_RAP_ACCEPTANCE, detection_counts, histogram_from_data
from .reader import SimulationResult, read_simulation_results

DEFAULT_RESULT_FILE = "slight.out"
FILL_COLOR = "#3f90da"
_TEXT_RE = re.compile(r"\\text\{([^{}]*)\}")


def plot_title(results: SimulationResult) -> str:
    """Return the LaTeX title shared by all plots of ``results``."""
    return (
        "\\text{STARlight } | \\text{ Pb - Pb } \\sqrt{s_{NN}} = "
        f"{results.sqrt_s_nn / 1000:.2f} \\text{{ TeV }} | \\, {results.decay_latex_str}"
    )


def _mathtext(latex: str) -> str:
    """Turn ``\\text{..}`` LaTeX into a string matplotlib can render."""
    parts: list[str] = []
    position = 0
    for match in _TEXT_RE.finditer(latex):
        parts.append(_math_segment(latex[position : match.start()]))
        parts.append(match.group(1))
        position = match.end()
    parts.append(_math_segment(latex[position:]))
    return "".join(parts)


def _math_segment(segment: str) -> str:
    if not segment.strip():
        return segment
    return f"${segment}$"


def _load(result_file_path: str) -> SimulationResult:
    results = read_simulation_results(result_file_path)
    if not results.events:
        raise ValueError(f"no events in {result_file_path}")
    return results


def _new_figure() -> tuple[Figure, object]:
    fig = Figure(figsize=(9, 7), dpi=100)
    ax = fig.add_subplot()
    return fig, ax


def _style(ax, title: str, xlabel: str, ylabel: str) -> None:
    ax.set_title(_mathtext(title), fontsize=12)
    ax.set_xlabel(_mathtext(xlabel), fontsize=15)
    ax.set_ylabel(_mathtext(ylabel), fontsize=15)
    ax.tick_params(axis="x", labelsize=10)
    ax.tick_params(axis="y", labelsize=11)


def _info(fig: Figure, lines: Sequence[str]) -> None:
    for offset, text in enumerate(lines):
        fig.text(0.54, 0.80 - 0.05 * offset, _mathtext(text), fontsize=13)


def _draw_histogram(ax, data: Sequence[float]):
    hist = histogram_from_data(data)
    ax.stairs(
        hist.regular_contents,
        hist.edges,
        fill=True,
        facecolor=FILL_COLOR,
        edgecolor="black",
    )
    ax.stairs(hist.regular_contents, hist.edges, color="black")
    return hist


def _save(fig: Figure, results: SimulationResult, output_dir: str, suffix: str) -> Path:
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{results.decay_repr_str}_{suffix}.pdf"
    fig.savefig(path)
    return path


def _events_info(results: SimulationResult) -> str:
    return f"\\text{{{results.n_events} events}}"


def plot_pair_inv_mass(
    result_file_path: str = DEFAULT_RESULT_FILE, output_dir: str = "."
) -> Path:
    """Histogram the invariant masses of all particle pairs."""
    results = _load(result_file_path)
    masses = [m for event in results.events for m in event.m_inv_pairs]
    bin_width = freedman_diaconis_bin_width(masses)

    fig, ax = _new_figure()
    hist = _draw_histogram(ax, masses)
    _style(
        ax,
        plot_title(results),
        "\\text{2 Particle Invariant Mass [GeV/c}^{2}\\text{]}",
        f"\\text{{Counts per {bin_width * 1000:.2f} [MeV/c}}^{{2}}\\text{{]}}",
    )
    _info(
        fig,
        [_events_info(results), f"\\text{{Peak @ {hist.peak():.4f} GeV/c}}^{{2}}"],
    )
    return _save(fig, results, output_dir, "pair_inv_mass")


def plot_pair_inv_mass_2d(
    result_file_path: str = DEFAULT_RESULT_FILE, output_dir: str = "."
) -> Path:
    """Plot the first pair's invariant mass against the second pair's."""
    results = _load(result_file_path)
    if any(len(event.m_inv_pairs) < 2 for event in results.events):
        raise ValueError("every event needs two particle pairs for a 2D plot")
    first = [event.m_inv_pairs[0] for event in results.events]
    second = [event.m_inv_pairs[1] for event in results.events]

    def _axis(values: list[float]) -> tuple[int, float, float]:
        width = freedman_diaconis_bin_width(values)
        if not width > 0:
            raise ValueError("data spread is too small to choose a bin width")
        low, high = min(values), max(values)
        return max(int((high - low) / width), 1), low, high

    bins_1, low_1, high_1 = _axis(first)
    bins_2, low_2, high_2 = _axis(second)
    # only the first half of the events is filled into the map
    filled = results.n_events // 2

    fig, ax = _new_figure()
    *_, image = ax.hist2d(
        first[:filled],
        second[:filled],
        bins=[bins_1, bins_2],
        range=[[low_1, high_1], [low_2, high_2]],
        cmap="YlGnBu_r",
    )
    fig.colorbar(image, ax=ax)
    _style(
        ax,
        plot_title(results),
        "\\text{1. pair invariant mass [GeV/c}^{2}\\text{]}",
        "\\text{2. pair invariant mass [GeV/c}^{2}\\text{]}",
    )
    _info(fig, [_events_info(results)])
    return _save(fig, results, output_dir, "pair_inv_mass_2d")


def plot_pseudo_rap(
    result_file_path: str = DEFAULT_RESULT_FILE, output_dir: str = "."
) -> Path:
    """Bar chart of events by number of particles inside the acceptance."""
    results = _load(result_file_path)
    counts = detection_counts(results.events, PSEUDO_RAP_ACCEPTANCE)
    fully_detected = counts[-1]

    fig, ax = _new_figure()
    positions = [index + 0.5 for index in range(len(counts))]
    ax.bar(positions, counts, width=0.8, color=FILL_COLOR, edgecolor="black")
    ax.set_xticks(positions, [str(index) for index in range(len(counts))])
    ax.set_xlim(0, len(counts))
    ax.set_ylim(bottom=0)
    ax.grid(True)
    ax.set_axisbelow(True)
    _style(
        ax,
        plot_title(results),
        "\\text{Number of particles detected}",
        "\\text{Number of events}",
    )
    _info(
        fig,
        [
            _events_info(results),
            f"\\text{{where {fully_detected} fully detected}}",
            f"\\text{{Acceptence: }} |\\eta| < {PSEUDO_RAP_ACCEPTANCE:.1f}",
        ],
    )
    return _save(fig, results, output_dir, "pseudo_rap")


def plot_tot_inv_mass(
    result_file_path: str = DEFAULT_RESULT_FILE, output_dir: str = "."
) -> Path:
    """Histogram the invariant mass of all particles of each event."""
    results = _load(result_file_path)
    masses = [event.m_inv for event in results.events]
    bin_width = freedman_diaconis_bin_width(masses)

    fig, ax = _new_figure()
    hist = _draw_histogram(ax, masses)
    _style(
        ax,
        plot_title(results),
        "\\text{4 Particle Invariant Mass [GeV/c}^{2}\\text{]}",
        f"\\text{{Counts per {bin_width * 1e6:.2f} [keV/c}}^{{2}}\\text{{]}}",
    )
    _info(
        fig,
        [
            _events_info(results),
            f"\\text{{Peak @ {hist.peak():.4f} GeV/c}}^{{2}}",
            f"\\text{{FWHM = {hist.fwhm() * 1e6:.3f} keV/c}}^{{2}}",
        ],
    )
    return _save(fig, results, output_dir, "tot_inv_mass")


def plot_tot_trans_mom(
    result_file_path: str = DEFAULT_RESULT_FILE, output_dir: str = "."
) -> Path:
    """Histogram the total transverse momentum of each event."""
    results = _load(result_file_path)
    momenta = [event.p_trans for event in results.events]
    bin_width = freedman_diaconis_bin_width(momenta)

    fig, ax = _new_figure()
    hist = _draw_histogram(ax, momenta)
    ax.set_xlim(0, 0.25)
    ax.set_ylim(0, hist.maximum * 1.1)
    _style(
        ax,
        plot_title(results),
        "\\text{4 Particle Transverse Momentum  [GeV/c]}",
        f"\\text{{Counts per {bin_width * 1000:.2f} [MeV/c]}}",
    )
    _info(fig, [_events_info(results)])
    return _save(fig, results, output_dir, "tot_trans_mom")


_PLOTS: dict[str, Callable[[str, str], Path]] = {
    "pair-inv-mass": plot_pair_inv_mass,
    "pair-inv-mass-2d": plot_pair_inv_mass_2d,
    "pseudo-rap": plot_pseudo_rap,
    "tot-inv-mass": plot_tot_inv_mass,
    "tot-trans-mom": plot_tot_trans_mom,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: draw one plot and print where it went."""
    parser = argparse.ArgumentParser(
        prog="starlyze", description="Plot results of a simulation output file."
    )
    parser.add_argument("plot", choices=sorted(_PLOTS))
    parser.add_argument("result_file", nargs="?", default=DEFAULT_RESULT_FILE)
    parser.add_argument("-o", "--output-dir", default=".")
    args = parser.parse_args(argv)
    path = _PLOTS[args.plot](args.result_file, args.output_dir)
    print(path)
    return 0