"""
Service Exceptions
"""


class CustomerServiceError(Exception):
    """Base exception for all customer service errors."""


class ConflictError(CustomerServiceError):
    """Raised when a write violates a storage constraint (duplicate email or SSN)."""
