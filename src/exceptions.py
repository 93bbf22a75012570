"""
Domain exceptions for the Energy Cost API.
Provides clear, typed exceptions for business logic errors.
"""


class EnergyCostAPIException(Exception):
    """Base exception for all Energy Cost API errors."""
    pass


class FetchError(EnergyCostAPIException):
    """Raised when market prices cannot be fetched or parsed."""
    pass


class NoPriceDataError(EnergyCostAPIException):
    """Raised when a reading is not covered by any market price bucket."""
    pass


class InvalidReadingsError(EnergyCostAPIException):
    """Raised when the submitted meter readings cannot be priced."""
    pass
