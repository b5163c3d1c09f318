"""Command line interface for Tally (Typer + Rich)."""
