"""Core: settings schema, loading, validation, logging."""
