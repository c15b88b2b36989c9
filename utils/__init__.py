"""Pure helpers for password analysis — no I/O, no configuration."""
