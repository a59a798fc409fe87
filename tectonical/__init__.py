"""Deterministic tectonic-plate terrain generation with plain-text PPM rendering."""

__version__ = "1.0.0"