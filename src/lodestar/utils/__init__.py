"""Utility helpers for Lodestar."""
