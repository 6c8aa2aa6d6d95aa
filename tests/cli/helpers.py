"""Shared constants for CLI tests."""

ORACLE_ARGS = ["--vendor", "Oracle Corporation", "--runtime-version", "11.0.2"]
