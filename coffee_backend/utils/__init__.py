"""Shared helpers: logging, constants, error formatting."""
