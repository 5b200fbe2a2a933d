"""Exceptions for the taskhub service layer.

This module contains the exception hierarchy for the service layer,
providing domain-specific exceptions that abstract underlying implementation details.
"""


class ServiceError(Exception):
    """Base exception for all service-level errors."""
    pass


class URLError(ServiceError):
    """Base exception for short link errors."""
    pass


class URLValidationError(URLError):
    """URL failed validation checks."""
    pass


class InvalidURLError(URLValidationError):
    """The URL is not an absolute http or https URL."""
    pass


class URLCreationError(URLError):
    """Error occurred during short link creation."""
    pass


class ShortCodeGenerationError(URLCreationError):
    """Failed to generate a unique short code within the attempt budget."""
    pass


class URLNotFoundError(URLError):
    """No short link with the requested code could be resolved."""
    pass


class RecordError(ServiceError):
    """Base exception for user, task and contributor record errors."""
    pass


class RecordCreationError(RecordError):
    """Error occurred while creating a record."""
    pass


class RecordRetrievalError(RecordError):
    """Error occurred while listing records."""
    pass
