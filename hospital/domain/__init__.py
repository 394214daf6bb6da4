"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: entities and value objects (Patient, Doctor, Appointment, WorkingHours, ...)
- Repository Interfaces: Abstract contracts for data access
- Services: Availability and working-hours rules spanning aggregates
"""
