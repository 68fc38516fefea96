"""
RSVP Event Guard - validation and authorization gates for event writes.

An Event is an RSVP-style gathering with a roster of members. Every write
to an Event passes two independent gates before reaching storage:

- Authorization: may the acting user produce this transition?
- State validation: is the resulting state internally consistent?
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
