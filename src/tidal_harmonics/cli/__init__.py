"""Command-line interface for tidal-harmonics (`tides`)."""
