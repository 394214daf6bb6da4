"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- DTOs: Pydantic models for API requests and responses
- Use Cases: Business operations (schedule appointment)
- Services: Application services that coordinate repositories and use cases
"""
