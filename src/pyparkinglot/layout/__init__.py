"""Packaged lot layouts."""
