"""Repository engineering-hygiene scanner for CI pipelines."""

__version__ = "1.0.0"

__all__ = ["__version__"]
