"""Shared helpers for markview."""
