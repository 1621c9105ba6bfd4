"""Core engine: masking, suppression, rules and the per-file scan."""
