"""domain services translation tests."""
