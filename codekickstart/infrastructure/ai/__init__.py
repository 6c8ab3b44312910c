"""AI tutor infrastructure."""
