"""Command line interface for probe-console."""
