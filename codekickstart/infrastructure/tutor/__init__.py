"""Tutor infrastructure layer."""
