"""Read STARlight simulation output, histogram decay products and write plots."""

__version__ = "0.1.0"