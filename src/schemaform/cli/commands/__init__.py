"""Top-level schemaform commands (auto-discovered by the dispatcher)."""
