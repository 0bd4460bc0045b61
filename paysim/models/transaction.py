"""Transaction record data model"""

from pydantic import BaseModel, Field, field_validator, model_validator
from datetime import datetime
from decimal import Decimal
from typing import Dict, Any
from paysim.constants import TransactionStatus, TIMESTAMP_FORMAT
from paysim.tools.fee_tools import round_currency


class TransactionRecord(BaseModel):
    """One completed (successful or failed) checkout attempt"""

    transaction_id: str = Field(..., min_length=1, description="Unique transaction ID")
    payment_method: str = Field(..., min_length=1, description="Payment method display name")
    amount: Decimal = Field(..., ge=0, description="Amount charged before fees")
    fee: Decimal = Field(..., ge=0, description="Fee for the payment method")
    total_amount: Decimal = Field(..., ge=0, description="Amount plus fee")
    status: TransactionStatus = Field(..., description="SUCCESS or FAILED")
    timestamp: datetime = Field(default_factory=datetime.now, description="When the attempt finished")
    details: str = Field("", description="Masked payment instrument description")

    @field_validator('amount', 'fee', 'total_amount')
    @classmethod
    def _to_cents(cls, value: Decimal) -> Decimal:
        if not value.is_finite():
            raise ValueError("amount must be a finite number")
        return round_currency(value)

    @field_validator('timestamp')
    @classmethod
    def _to_seconds(cls, value: datetime) -> datetime:
        return value.replace(microsecond=0)

    @model_validator(mode='after')
    def _check_total(self):
        if self.total_amount != self.amount + self.fee:
            raise ValueError(
                f"total_amount {self.total_amount} != amount {self.amount} + fee {self.fee}"
            )
        return self

    @property
    def is_successful(self) -> bool:
        return self.status == TransactionStatus.SUCCESS

    def to_row(self) -> Dict[str, str]:
        """Render as a CSV row keyed by the transaction file header"""
        return {
            "TransactionID": self.transaction_id,
            "PaymentMethod": self.payment_method,
            "Amount": f"{self.amount:.2f}",
            "Fee": f"{self.fee:.2f}",
            "TotalAmount": f"{self.total_amount:.2f}",
            "Status": self.status.value,
            "Timestamp": self.timestamp.strftime(TIMESTAMP_FORMAT),
            "Details": self.details,
        }

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "TransactionRecord":
        """
        Parse a CSV row produced by to_row()

        Raises:
            ValueError: If the timestamp does not match the file format
            pydantic.ValidationError: If any other field is malformed
        """
        timestamp = row.get("Timestamp")
        if not isinstance(timestamp, str):
            raise ValueError(f"Missing timestamp: {timestamp!r}")

        return cls(
            transaction_id=row.get("TransactionID"),
            payment_method=row.get("PaymentMethod"),
            amount=row.get("Amount"),
            fee=row.get("Fee"),
            total_amount=row.get("TotalAmount"),
            status=row.get("Status"),
            timestamp=datetime.strptime(timestamp, TIMESTAMP_FORMAT),
            details=row.get("Details") or "",
        )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "transaction_id": "TXN17296640000000001",
                "payment_method": "Credit Card",
                "amount": "1000.00",
                "fee": "20.00",
                "total_amount": "1020.00",
                "status": "SUCCESS",
                "timestamp": "2024-10-23 10:00:05",
                "details": "Credit Card - **** **** **** 1111 | Asha Rao"
            }
        }
