"""Custom exceptions for the Natal Chart API."""


class NatalAPIException(Exception):
    """Base exception for all API errors."""
    pass


class ChartCalculationError(NatalAPIException):
    """Raised when chart calculation fails."""
    pass


class InvalidDateTimeError(NatalAPIException):
    """Raised when the civil date/time or timezone does not resolve to an instant."""
    pass


class InvalidCoordinatesError(NatalAPIException):
    """Raised when coordinates are invalid."""
    pass
