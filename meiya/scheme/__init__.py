"""Palette loading."""
