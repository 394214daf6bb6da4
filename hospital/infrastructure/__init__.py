"""
Infrastructure Layer
====================

Adapters for the domain ports: process-lifetime repositories and the
logging notification service.
"""
