"""Test suite for the signature-driven debug-info reconstructor.

Test Structure:
- domain/: pattern matching, address mapping and type translation
- infrastructure/: binary reading, libclang adapter, writer, config, logging
- application/: end-to-end reconstruction runs over fake source trees
- config/: application configuration

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run cross-layer tests only
"""
