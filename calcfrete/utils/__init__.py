"""Shared helpers for calcfrete."""
