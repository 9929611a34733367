"""Filesystem-facing helpers used by application use-cases."""
