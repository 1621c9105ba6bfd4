"""Data model: scan requests, per-scan state, diagnostics and run results."""
