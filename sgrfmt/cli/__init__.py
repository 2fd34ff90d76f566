"""Command line interface for sgrfmt."""
