"""Bookmark routers."""
