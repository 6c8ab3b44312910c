"""Identity routers."""
