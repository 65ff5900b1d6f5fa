"""Renderers for solver results."""
