"""Auditable key-value store with a queryable change history."""

__version__ = "0.1.0"
