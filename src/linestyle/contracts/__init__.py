"""JSON contracts for the artifacts the checker emits."""
