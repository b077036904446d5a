"""Routing, value scanning, structured errors and OpenAPI documents for HTTP APIs."""

__version__ = "0.1.0"