"""domain services tests."""
