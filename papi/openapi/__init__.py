"""OpenAPI 3.0 document model and its encoding to JSON."""

__all__ = ["context", "document", "info", "schema"]