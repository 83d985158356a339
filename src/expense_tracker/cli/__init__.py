"""
Command Line Interface Package

The expense-tracker command.

Command Structure:
- expense-tracker: Main entry point with global record flags and utility
  commands (version, config)
- expense-tracker add | update | delete | list | summary: Record management
"""
