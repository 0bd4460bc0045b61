"""Payment method data models"""

from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field
from paysim.constants import PaymentKind


class CardPayment(BaseModel):
    """Credit or debit card details"""

    kind: Literal[PaymentKind.CREDIT_CARD, PaymentKind.DEBIT_CARD] = Field(..., description="Card kind")
    card_number: str = Field("", description="Card number as entered")
    holder_name: str = Field("", description="Name on card")
    expiry_date: str = Field("", description="Expiry date as entered (not checked)")
    cvv: str = Field("", description="Card verification value")

    @property
    def display_name(self) -> str:
        return self.kind.display_name

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "kind": "CREDIT_CARD",
                "card_number": "4111111111111111",
                "holder_name": "Asha Rao",
                "expiry_date": "12/27",
                "cvv": "123"
            }
        }


class UPIPayment(BaseModel):
    """UPI virtual payment address"""

    kind: Literal[PaymentKind.UPI] = PaymentKind.UPI
    upi_id: str = Field("", description="UPI id, e.g. user@bank")

    @property
    def display_name(self) -> str:
        return self.kind.display_name

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {"kind": "UPI", "upi_id": "user@paytm"}
        }


class NetBankingPayment(BaseModel):
    """Net banking login details"""

    kind: Literal[PaymentKind.NET_BANKING] = PaymentKind.NET_BANKING
    bank_name: str = Field("", description="Bank name")
    account_number: str = Field("", description="Account number")

    @property
    def display_name(self) -> str:
        return self.kind.display_name

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {"kind": "NET_BANKING", "bank_name": "HDFC", "account_number": "12345678"}
        }


class WalletPayment(BaseModel):
    """Mobile wallet details"""

    kind: Literal[PaymentKind.WALLET] = PaymentKind.WALLET
    wallet_provider: str = Field("", description="Wallet provider, e.g. Paytm")
    mobile_number: str = Field("", description="Registered mobile number")

    @property
    def display_name(self) -> str:
        return self.kind.display_name

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {"kind": "WALLET", "wallet_provider": "Paytm", "mobile_number": "9876543210"}
        }


PaymentMethod = Annotated[
    Union[CardPayment, UPIPayment, NetBankingPayment, WalletPayment],
    Field(discriminator="kind")
]
