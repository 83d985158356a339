#!/usr/bin/env python3
"""
End-to-end tests for the expense tracker.

These tests execute actual CLI commands via subprocess against a store file
in a temporary directory.
"""
