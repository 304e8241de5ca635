"""Shared helpers for htmxkit (escaping, name rules)."""
