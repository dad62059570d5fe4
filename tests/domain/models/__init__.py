"""domain models tests."""
