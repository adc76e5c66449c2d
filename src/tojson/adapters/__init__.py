"""Concrete data sources and reporters."""
