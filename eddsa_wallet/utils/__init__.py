"""Utility helpers for the EdDSA wallet."""
