"""Authentication primitives: password hashing and JWT tokens."""
