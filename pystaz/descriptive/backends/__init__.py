"""Computational backends for descriptive statistics."""
