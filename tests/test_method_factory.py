"""Tests for building payment methods from form input"""

import pytest

from paysim.constants import PaymentKind
from paysim.models.payment_method import CardPayment, UPIPayment, NetBankingPayment, WalletPayment
from paysim.tools.method_factory import create_payment_method, resolve_kind, METHOD_FIELDS
from paysim.tools.validation_tools import validate_payment
from paysim.utils.errors import UnknownPaymentMethodError, InvalidUPIError, InvalidCardError


@pytest.mark.parametrize("selector,kind", [
    ("Credit Card", PaymentKind.CREDIT_CARD),
    ("CREDIT_CARD", PaymentKind.CREDIT_CARD),
    ("credit-card", PaymentKind.CREDIT_CARD),
    ("Debit Card", PaymentKind.DEBIT_CARD),
    ("upi", PaymentKind.UPI),
    ("Net Banking", PaymentKind.NET_BANKING),
    ("  net_banking ", PaymentKind.NET_BANKING),
    ("Wallet", PaymentKind.WALLET),
])
def test_resolve_kind(selector, kind):
    assert resolve_kind(selector) == kind


def test_builds_card():
    method = create_payment_method("Credit Card", {
        "cardNumber": " 4111111111111111 ", "holderName": "Asha Rao",
        "expiryDate": "12/27", "cvv": "123"
    })
    assert isinstance(method, CardPayment)
    assert method.kind == PaymentKind.CREDIT_CARD
    assert method.card_number == "4111111111111111"
    assert method.display_name == "Credit Card"


def test_builds_debit_card_as_card_variant():
    method = create_payment_method("Debit Card", {"cardNumber": "5500005555555559", "cvv": "456"})
    assert isinstance(method, CardPayment)
    assert method.kind == PaymentKind.DEBIT_CARD


def test_builds_other_variants():
    assert isinstance(create_payment_method("UPI", {"upiId": "user@paytm"}), UPIPayment)
    assert isinstance(create_payment_method("Net Banking", {"bankName": "HDFC"}), NetBankingPayment)
    assert isinstance(create_payment_method("Wallet", {"mobileNumber": "9876543210"}), WalletPayment)


def test_missing_fields_become_empty_and_fail_validation_later():
    """The factory never validates"""
    method = create_payment_method("UPI", {})
    assert method.upi_id == ""
    with pytest.raises(InvalidUPIError):
        validate_payment(method)

    card = create_payment_method("Credit Card", {"cardNumber": None})
    assert card.card_number == ""
    with pytest.raises(InvalidCardError):
        validate_payment(card)


def test_unrelated_fields_ignored():
    method = create_payment_method("UPI", {"upiId": "user@paytm", "cardNumber": "4111111111111111"})
    assert method == UPIPayment(upi_id="user@paytm")


@pytest.mark.parametrize("selector", ["Bitcoin", "", "Credit", "PayPal"])
def test_unknown_selector(selector):
    with pytest.raises(UnknownPaymentMethodError) as exc:
        create_payment_method(selector, {})
    assert "Unknown payment method" in str(exc.value)


def test_every_kind_lists_fields():
    assert set(METHOD_FIELDS) == set(PaymentKind)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
