# tests/property/__init__.py
"""Property-based tests for logship.

These check invariants that must hold for every generated configuration:
first-error priority order, agreement between validate_settings and
collect_violations, and the pinned single-writer queue.
"""
