"""Filesystem-facing implementations of application ports."""
