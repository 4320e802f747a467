"""Shared enums, errors and content models."""
