# starlyze

Tools for reading STARlight simulation output (`slight.out`) and producing
histograms of the decay products of J/ψ photoproduction in Pb–Pb collisions.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `starlyze` command reads a result file and writes one plot as a PDF:

```
starlyze PLOT [RESULT_FILE] [-o OUTPUT_DIR]
```

`PLOT` is one of:

- `tot-inv-mass`: invariant mass of all decay products of each event, with
  peak position and FWHM
- `pair-inv-mass`: invariant mass of each particle pair, with peak position
- `pair-inv-mass-2d`: first pair versus second pair invariant mass, drawn
  from the first half of the events; every event must have two pairs
- `tot-trans-mom`: total transverse momentum of each event
- `pseudo-rap`: number of events by how many particles lie within the
  pseudorapidity acceptance |η| < 0.9

If no result file is given, `slight.out` in the current directory is read.
The plot is written to `OUTPUT_DIR` (the current directory by default,
created if missing) under a name made from the decay found in the file, for
example `jpsi_4pi_tot_inv_mass.pdf`, and the path is printed. Run
`starlyze --help` for the same summary.

## Library use

```python
import random

from starlyze.reader import read_simulation_results
from starlyze.histogram import histogram_from_data, detection_counts

results = read_simulation_results("slight.out", random.Random(0))
print(results.decay_repr_str, results.n_events, results.sqrt_s_nn)

hist = histogram_from_data([event.m_inv for event in results.events])
print("peak:", hist.peak(), "GeV/c^2")
print("FWHM:", hist.fwhm(), "GeV/c^2")

print(detection_counts(results.events, 0.9))
```

- `starlyze.reader`: `Track`, `Event`, `SimulationResult`,
  `parse_simulation_results(lines, rng)` and
  `read_simulation_results(result_file_path, rng)`. A file without a
  `CONFIG_OPT` line or without both `BEAM_1` and `BEAM_2` lines raises
  `ValueError`.
- `starlyze.histogram`: `Histogram` (equal-width bins with underflow and
  overflow, `fill`, `maximum_bin`, `bin_center`, `peak`, `fwhm`),
  `histogram_from_data` and `detection_counts`.
- `starlyze.physics`: `particle_mass`, `decay_repr`, `decay_latex`,
  `ParticleId`, `DecayId`.
- `starlyze.binning`: `freedman_diaconis_bin_width`.
- `starlyze.plots`: `plot_title` and one function per plot
  (`plot_pair_inv_mass`, `plot_pair_inv_mass_2d`, `plot_pseudo_rap`,
  `plot_tot_inv_mass`, `plot_tot_trans_mom`), each taking a result file path
  and an output directory and returning the path of the written PDF.

Tracks are shuffled within each event before they are paired, so that the
analysis does not rely on knowing which track is which particle; pass your
own `random.Random` to make the pairing reproducible.

## Limitations

Plots are written as PDF files only; there is no interactive display and no
LaTeX (`.tex`) output. Titles and labels are rendered with matplotlib's
mathtext rather than a full LaTeX installation.