"""
Infrastructure layer - External adapters for RSVP Event Guard.

This layer contains:
- Clock and email-format adapters
- In-memory stubs for storage and identity
- Structured logging configuration

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""
