"""
Application layer - Use cases and orchestration for RSVP Event Guard.

This layer contains:
- Port definitions (abstract interfaces for infrastructure)
- Validators, authorization policies and repository decorators

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure, bootstrap
"""
