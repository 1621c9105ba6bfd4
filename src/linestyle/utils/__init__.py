"""Shared utilities for linestyle."""
