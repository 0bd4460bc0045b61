"""Custom exceptions for the checkout simulator"""

from typing import Optional


class PaymentSystemError(Exception):
    """Base exception for checkout simulator errors"""
    pass


class PaymentValidationError(PaymentSystemError):
    """
    User-correctable problem with the entered payment details.

    Subclasses fix both the error kind tag and the message shown to the user.
    """

    kind = "ValidationError"
    default_message = "Payment validation failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InvalidCardError(PaymentValidationError):
    kind = "InvalidCard"
    default_message = "Invalid card details"


class InvalidUPIError(PaymentValidationError):
    kind = "InvalidUPI"
    default_message = "Invalid UPI ID"


class InvalidAccountError(PaymentValidationError):
    kind = "InvalidAccount"
    default_message = "Invalid account number"


class InvalidMobileError(PaymentValidationError):
    kind = "InvalidMobile"
    default_message = "Invalid mobile number"


class MissingFieldError(PaymentValidationError):
    kind = "MissingField"
    default_message = "Required field is missing"


class InvalidAmountError(PaymentValidationError):
    kind = "InvalidAmount"
    default_message = "Amount must be greater than 0"


class UnknownPaymentMethodError(PaymentSystemError):
    """Factory was given a selector that matches no payment kind"""
    pass


class ProcessingUnavailableError(PaymentSystemError):
    """Simulated processing outage; not user-correctable"""

    def __init__(self, message: str = "Bank server is temporarily unavailable. Please try again later"):
        super().__init__(message)
        self.message = message


class StorageError(PaymentSystemError):
    """Transaction file read/write errors"""
    pass


class ConfigurationError(PaymentSystemError):
    """Configuration loading errors"""
    pass
