"""HTTP API service and domain model for managing products and product categories."""

__version__ = "1.0.0"