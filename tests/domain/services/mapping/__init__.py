"""domain services mapping tests."""
