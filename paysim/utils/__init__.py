"""Utility modules"""

from .config_loader import load_config, save_config
from .errors import (
    PaymentSystemError,
    PaymentValidationError,
    InvalidCardError,
    InvalidUPIError,
    InvalidAccountError,
    InvalidMobileError,
    MissingFieldError,
    InvalidAmountError,
    UnknownPaymentMethodError,
    ProcessingUnavailableError,
    StorageError,
    ConfigurationError
)

__all__ = [
    "load_config",
    "save_config",
    "PaymentSystemError",
    "PaymentValidationError",
    "InvalidCardError",
    "InvalidUPIError",
    "InvalidAccountError",
    "InvalidMobileError",
    "MissingFieldError",
    "InvalidAmountError",
    "UnknownPaymentMethodError",
    "ProcessingUnavailableError",
    "StorageError",
    "ConfigurationError"
]
