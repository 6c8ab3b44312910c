"""Shared routers."""
