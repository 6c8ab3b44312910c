"""Tutor application layer."""
