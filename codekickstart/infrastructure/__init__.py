"""Infrastructure layer: persistence, HTTP routers and external services."""
