"""Core building blocks for schemaform (config, form engine, utilities)."""
