"""Catalog infrastructure layer."""
