"""Tutor chat routers."""
