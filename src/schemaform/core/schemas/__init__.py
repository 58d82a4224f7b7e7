"""JSON Schema validation for configuration and form documents."""
from .validation import SchemaValidationError, clear_schema_cache, load_schema, validate_payload

__all__ = ["SchemaValidationError", "clear_schema_cache", "load_schema", "validate_payload"]
