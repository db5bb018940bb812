"""
DOMAIN EXCEPTIONS - Business rule violations

Raised by domain and application logic, caught by the presentation layer
and mapped to HTTP status codes there:
- AccessDeniedError      -> 403 (role pair not allowed, cold initiation, not a participant)
- EntityNotFoundError    -> 404 (application, profile or user missing)
- DomainValidationError  -> 400 (empty content, no resolvable counterpart)
"""

from jobchat.domain.exceptions.entity_not_found import EntityNotFoundError
from jobchat.domain.exceptions.access_denied import AccessDeniedError
from jobchat.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
]
