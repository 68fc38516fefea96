"""Kinds of write operation that can be authorized."""

from __future__ import annotations

from enum import Enum


class OperationKind(str, Enum):
    """Write operation requested against an aggregate."""

    CREATE = "create"
    """No prior state exists."""

    UPDATE = "update"
    """Both prior and proposed states exist."""

    DELETE = "delete"
    """No proposed state. Always denied."""
