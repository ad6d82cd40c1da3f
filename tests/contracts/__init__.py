# tests/contracts/__init__.py
"""Tests for the error taxonomy, reason codes and runtime configuration."""
