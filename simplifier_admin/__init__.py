"""Simplifier administration toolkit: login method management for a remote Simplifier instance."""

__version__ = "0.3.0"
