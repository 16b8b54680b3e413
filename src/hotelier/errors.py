"""
Error kinds raised by the service layer.

NotFoundError and ConflictError subclass ValueError so callers that only
care about "bad input" can keep catching ValueError. The HTTP layer maps
each kind to its own status code.
"""

import psycopg

# Any fault from the store or the room/employee lookups. Propagated unchanged.
PersistenceError = psycopg.Error


class NotFoundError(ValueError):
    """A referenced room, employee or cleaning task does not exist."""


class ConflictError(ValueError):
    """The requested change collides with existing state."""


class ForbiddenError(PermissionError):
    """The acting employee's role does not allow the operation."""
