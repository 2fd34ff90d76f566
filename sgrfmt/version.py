"""Version information for sgrfmt."""

__version__ = "0.3.0"
