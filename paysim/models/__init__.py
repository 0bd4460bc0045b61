"""Data models for the checkout simulator"""

from .payment_method import (
    CardPayment,
    UPIPayment,
    NetBankingPayment,
    WalletPayment,
    PaymentMethod
)
from .transaction import TransactionRecord

__all__ = [
    "CardPayment",
    "UPIPayment",
    "NetBankingPayment",
    "WalletPayment",
    "PaymentMethod",
    "TransactionRecord"
]
