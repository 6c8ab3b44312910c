"""Catalog routers."""
