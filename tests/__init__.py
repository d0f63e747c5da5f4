# textrsa Test Suite
"""
Test suite including:
- Unit tests for the arithmetic, prime and key generation modules
- Block codec tests (framing, padding, round trips)
- Integration tests (configuration and the command line driver)
- Interop tests against keys from the cryptography package

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
