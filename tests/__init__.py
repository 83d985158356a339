"""
Test Suite for the Expense Tracker

Test Structure:
- fixtures/: Shared test utilities
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI and configuration tests run in-process
- e2e/: CLI commands run in a subprocess

Test Data:
All test data is synthetic and written to temporary directories.
"""
