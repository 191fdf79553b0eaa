"""Command line interface for guarded handler route tables."""
