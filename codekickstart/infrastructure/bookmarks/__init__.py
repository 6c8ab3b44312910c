"""Bookmarks infrastructure layer."""
