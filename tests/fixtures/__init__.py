"""
Test Fixtures and Utilities

Shared helpers for tests that run the command line.
"""
