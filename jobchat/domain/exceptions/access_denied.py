"""
AccessDeniedError - Raised when a user may not perform an action on a conversation.
Maps to: HTTP 403 Forbidden
"""


class AccessDeniedError(Exception):
    """Raised when the permission matrix or participation rules reject an action"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
