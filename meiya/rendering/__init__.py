"""Placeholder substitution and output writing."""
