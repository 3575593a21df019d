"""Utility helpers for gitmsglint."""
