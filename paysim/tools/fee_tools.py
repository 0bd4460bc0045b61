"""Fee policy and currency helpers"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Union
from paysim.constants import (
    PaymentKind,
    CARD_KINDS,
    CARD_FEE_RATE,
    UPI_FEE_RATE,
    NET_BANKING_FEE_RATE,
    WALLET_FEE_RATE
)
from paysim.utils.errors import InvalidAmountError

CENTS = Decimal("0.01")

Amount = Union[Decimal, int, float, str]


def round_currency(value: Amount) -> Decimal:
    """
    Quantize a value to cents using banker's rounding.

    Floats go through str() first so 0.1 stays 0.10 instead of its binary expansion.

    Raises:
        ValueError: If the value is not a finite number or too large to hold in cents
    """
    try:
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        if not value.is_finite():
            raise ValueError(f"Not a finite amount: {value}")
        return value.quantize(CENTS, rounding=ROUND_HALF_EVEN)
    except InvalidOperation:
        raise ValueError(f"Amount cannot be represented in cents: {value}")


def fee_rate(kind: PaymentKind) -> Decimal:
    """Fee rate for a payment kind"""
    kind = PaymentKind(kind)

    if kind in CARD_KINDS:
        return CARD_FEE_RATE
    elif kind == PaymentKind.UPI:
        return UPI_FEE_RATE
    elif kind == PaymentKind.NET_BANKING:
        return NET_BANKING_FEE_RATE
    elif kind == PaymentKind.WALLET:
        return WALLET_FEE_RATE

    raise ValueError(f"No fee policy for payment kind: {kind}")


def calculate_fee(amount: Amount, kind: PaymentKind) -> Decimal:
    """
    Fee charged for paying `amount` with a payment kind

    Args:
        amount: Non-negative amount (rounded to cents before the rate is applied)
        kind: Payment kind

    Returns:
        Fee rounded to cents
    """
    return round_currency(round_currency(amount) * fee_rate(kind))


def fee_label(kind: PaymentKind) -> str:
    """Human-readable fee description shown next to the method"""
    kind = PaymentKind(kind)

    if kind in CARD_KINDS:
        return "Card Processing Fee (2%)"
    elif kind == PaymentKind.UPI:
        return "UPI (No Fee)"
    elif kind == PaymentKind.NET_BANKING:
        return "Net Banking Fee (1%)"
    return "Wallet (No Fee)"


def parse_amount(text: str) -> Decimal:
    """
    Parse a user-entered amount

    Args:
        text: Raw amount text

    Returns:
        Positive amount rounded to cents

    Raises:
        InvalidAmountError: If empty, not a number, or not greater than 0
    """
    text = (text or "").strip()
    if not text:
        raise InvalidAmountError("Please enter an amount")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise InvalidAmountError("Invalid amount format")

    try:
        amount = round_currency(amount)
    except ValueError:
        raise InvalidAmountError("Invalid amount format")

    if amount <= 0:
        raise InvalidAmountError("Amount must be greater than 0")

    return amount
