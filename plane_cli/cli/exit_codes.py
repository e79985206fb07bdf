"""Process exit codes used by the CLI layer."""

SUCCESS = 0
"""Command completed and its result was written."""

GENERAL_ERROR = 1
"""Configuration, network or API error; message written to stderr."""

USAGE_ERROR = 2
"""Invalid or missing command-line input (same code click uses)."""

KEYBOARD_INTERRUPT = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
