"""Constants and enums for the checkout simulator"""

from decimal import Decimal
from enum import Enum


class PaymentKind(str, Enum):
    """Supported payment methods"""
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    UPI = "UPI"
    NET_BANKING = "NET_BANKING"
    WALLET = "WALLET"

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]


class TransactionStatus(str, Enum):
    """Final status of a checkout attempt"""
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


DISPLAY_NAMES = {
    PaymentKind.CREDIT_CARD: "Credit Card",
    PaymentKind.DEBIT_CARD: "Debit Card",
    PaymentKind.UPI: "UPI",
    PaymentKind.NET_BANKING: "Net Banking",
    PaymentKind.WALLET: "Wallet",
}

CARD_KINDS = (PaymentKind.CREDIT_CARD, PaymentKind.DEBIT_CARD)

# Fee rates per method family
CARD_FEE_RATE = Decimal("0.02")
UPI_FEE_RATE = Decimal("0")
NET_BANKING_FEE_RATE = Decimal("0.01")
WALLET_FEE_RATE = Decimal("0")

# Validation rules
CARD_NUMBER_LENGTH = 16
CVV_LENGTH = 3
MIN_ACCOUNT_NUMBER_LENGTH = 8
MOBILE_NUMBER_LENGTH = 10

# Processing simulation
DEFAULT_PROCESSING_DELAY_SECONDS = 1.5
DEFAULT_FAILURE_RATE = 0.1

# Transaction file
DEFAULT_TRANSACTION_FILE = "transaction_history.csv"
TRANSACTION_ID_PREFIX = "TXN"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
CSV_COLUMNS = [
    "TransactionID",
    "PaymentMethod",
    "Amount",
    "Fee",
    "TotalAmount",
    "Status",
    "Timestamp",
    "Details",
]
