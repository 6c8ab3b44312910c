"""Bookmarks application layer."""
