"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- v1: FastAPI routers (controllers) and request dependencies
- errors: exception handlers rendering failures as {"error": message}
"""
