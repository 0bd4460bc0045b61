"""Build payment methods from a kind selector and a bag of form fields"""

from typing import Dict, List, Mapping, Optional
from paysim.constants import PaymentKind, CARD_KINDS
from paysim.models.payment_method import (
    CardPayment,
    UPIPayment,
    NetBankingPayment,
    WalletPayment,
    PaymentMethod
)
from paysim.utils.errors import UnknownPaymentMethodError

# Form field names accepted per kind
METHOD_FIELDS: Dict[PaymentKind, List[str]] = {
    PaymentKind.CREDIT_CARD: ["cardNumber", "holderName", "expiryDate", "cvv"],
    PaymentKind.DEBIT_CARD: ["cardNumber", "holderName", "expiryDate", "cvv"],
    PaymentKind.UPI: ["upiId"],
    PaymentKind.NET_BANKING: ["bankName", "accountNumber"],
    PaymentKind.WALLET: ["walletProvider", "mobileNumber"],
}


def _normalize(selector: str) -> str:
    return " ".join(selector.replace("_", " ").replace("-", " ").upper().split())


_SELECTORS = {}
for _kind in PaymentKind:
    _SELECTORS[_normalize(_kind.value)] = _kind
    _SELECTORS[_normalize(_kind.display_name)] = _kind


def resolve_kind(selector: str) -> Optional[PaymentKind]:
    """Match a selector like 'Credit Card', 'CREDIT_CARD' or 'net-banking' to a kind"""
    if not selector:
        return None
    return _SELECTORS.get(_normalize(selector))


def create_payment_method(selector: str, fields: Mapping[str, Optional[str]]) -> PaymentMethod:
    """
    Construct a payment method without validating it

    Args:
        selector: Payment kind as chosen by the user
        fields: Form field name -> raw value; missing fields become empty strings

    Returns:
        Constructed payment method

    Raises:
        UnknownPaymentMethodError: If the selector matches no payment kind
    """
    kind = resolve_kind(selector)
    if kind is None:
        raise UnknownPaymentMethodError(f"Unknown payment method: {selector}")

    def get(name: str) -> str:
        return (fields.get(name) or "").strip()

    if kind in CARD_KINDS:
        return CardPayment(
            kind=kind,
            card_number=get("cardNumber"),
            holder_name=get("holderName"),
            expiry_date=get("expiryDate"),
            cvv=get("cvv")
        )
    elif kind == PaymentKind.UPI:
        return UPIPayment(upi_id=get("upiId"))
    elif kind == PaymentKind.NET_BANKING:
        return NetBankingPayment(
            bank_name=get("bankName"),
            account_number=get("accountNumber")
        )
    return WalletPayment(
        wallet_provider=get("walletProvider"),
        mobile_number=get("mobileNumber")
    )
