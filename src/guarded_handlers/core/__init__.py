"""Shared exceptions and utilities for the guarded handler engine."""
