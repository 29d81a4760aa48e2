"""Utility helpers for htmltoc."""
