"""Common infrastructure layer."""
