"""Packaged vector assets."""
