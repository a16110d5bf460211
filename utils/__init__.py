"""CLI helpers: output formatting and input validation."""
