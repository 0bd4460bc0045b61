"""Payment method validation and masked descriptions"""

from paysim.constants import (
    PaymentKind,
    CARD_KINDS,
    CARD_NUMBER_LENGTH,
    CVV_LENGTH,
    MIN_ACCOUNT_NUMBER_LENGTH,
    MOBILE_NUMBER_LENGTH
)
from paysim.models.payment_method import (
    CardPayment,
    UPIPayment,
    NetBankingPayment,
    WalletPayment,
    PaymentMethod
)
from paysim.utils.errors import (
    InvalidCardError,
    InvalidUPIError,
    InvalidAccountError,
    InvalidMobileError,
    MissingFieldError
)


def validate_payment(method: PaymentMethod) -> None:
    """
    Validate payment details for their kind.

    Only lengths and characters are checked: card numbers are not
    Luhn-checked and expiry dates are not parsed.

    Raises:
        PaymentValidationError: Subclass matching the first failed rule
    """
    if method.kind in CARD_KINDS:
        _validate_card(method)
    elif method.kind == PaymentKind.UPI:
        _validate_upi(method)
    elif method.kind == PaymentKind.NET_BANKING:
        _validate_net_banking(method)
    elif method.kind == PaymentKind.WALLET:
        _validate_wallet(method)
    else:
        raise ValueError(f"Unsupported payment kind: {method.kind}")


def _validate_card(method: CardPayment) -> None:
    if len(method.card_number) != CARD_NUMBER_LENGTH:
        raise InvalidCardError()
    if len(method.cvv) != CVV_LENGTH:
        raise InvalidCardError()
    if not method.holder_name.strip():
        raise InvalidCardError()


def _validate_upi(method: UPIPayment) -> None:
    if "@" not in method.upi_id:
        raise InvalidUPIError()


def _validate_net_banking(method: NetBankingPayment) -> None:
    if not method.bank_name.strip():
        raise MissingFieldError("Bank name is required")
    if len(method.account_number) < MIN_ACCOUNT_NUMBER_LENGTH:
        raise InvalidAccountError()


def _validate_wallet(method: WalletPayment) -> None:
    if len(method.mobile_number) != MOBILE_NUMBER_LENGTH:
        raise InvalidMobileError()


def _last4(value: str) -> str:
    return value[-4:]


def describe_payment(method: PaymentMethod) -> str:
    """
    Masked, human-readable description of the payment instrument.

    Never raises on short or empty fields; a failed attempt still needs one.
    """
    if method.kind in CARD_KINDS:
        return f"{method.display_name} - **** **** **** {_last4(method.card_number)} | {method.holder_name}"
    elif method.kind == PaymentKind.UPI:
        return f"UPI - {method.upi_id}"
    elif method.kind == PaymentKind.NET_BANKING:
        return f"Net Banking - {method.bank_name} | A/C: ****{_last4(method.account_number)}"
    elif method.kind == PaymentKind.WALLET:
        return f"Wallet - {method.wallet_provider} | ******{_last4(method.mobile_number)}"

    raise ValueError(f"Unsupported payment kind: {method.kind}")
