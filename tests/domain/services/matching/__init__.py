"""domain services matching tests."""
