"""Infrastructure layer - External dependencies and implementations.

This layer contains the update service backends:
- HTTP (httpx)
- SQL (SQLAlchemy Core)

The infrastructure layer implements interfaces used by the domain layer.
"""
