"""Checkout orchestrator - validation, fees, simulated processing and recording"""

import itertools
import threading
import time
from concurrent.futures import Future
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Dict, Mapping, Optional
from paysim.constants import TransactionStatus, TRANSACTION_ID_PREFIX, DEFAULT_TRANSACTION_FILE
from paysim.models.payment_method import PaymentMethod
from paysim.models.transaction import TransactionRecord
from paysim.orchestrator.processing import ProcessingSimulator
from paysim.storage.transaction_log import TransactionLog
from paysim.tools.fee_tools import calculate_fee, parse_amount, round_currency, Amount
from paysim.tools.method_factory import create_payment_method
from paysim.tools.validation_tools import validate_payment, describe_payment
from paysim.utils.config_loader import get_processing_config
from paysim.utils.errors import (
    InvalidAmountError,
    PaymentValidationError,
    ProcessingUnavailableError
)
from paysim.utils.logging import get_logger
from paysim.utils.metrics import (
    checkout_attempts,
    validation_failures,
    processing_unavailable,
    fees_collected
)

logger = get_logger(__name__)


class TransactionIdGenerator:
    """Process-unique ids: prefix + epoch milliseconds + a 4+ digit sequence"""

    def __init__(self, prefix: str = TRANSACTION_ID_PREFIX):
        self.prefix = prefix
        self._sequence = itertools.count(1)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            sequence = next(self._sequence)
        return f"{self.prefix}{int(time.time() * 1000)}{sequence:04d}"


class CheckoutOrchestrator:
    """Runs checkout attempts and records exactly one transaction per attempt"""

    def __init__(
        self,
        log: TransactionLog,
        simulator: Optional[ProcessingSimulator] = None,
        id_generator: Optional[TransactionIdGenerator] = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.log = log
        self.simulator = simulator or ProcessingSimulator()
        self.id_generator = id_generator or TransactionIdGenerator()
        self.clock = clock

    @classmethod
    def from_config(cls, config: Dict[str, Any], log: Optional[TransactionLog] = None) -> "CheckoutOrchestrator":
        """
        Build an orchestrator from a loaded configuration

        Args:
            config: Configuration from load_config()
            log: Existing transaction log; opened from storage.transaction_file if omitted
        """
        if log is None:
            storage = config.get('storage') or {}
            log = TransactionLog(storage.get('transaction_file', DEFAULT_TRANSACTION_FILE))

        processing = get_processing_config(config)
        simulator = ProcessingSimulator(
            delay_seconds=processing['delay_seconds'],
            failure_rate=processing['failure_rate']
        )
        return cls(log, simulator=simulator)

    def process_payment(self, method: PaymentMethod, amount: Amount) -> TransactionRecord:
        """
        Run one checkout attempt to completion on the calling thread.

        Steps: validate, compute fee, simulate processing, record. A validation
        or processing failure still appends a FAILED record before the error
        is re-raised.

        Args:
            method: Constructed (not yet validated) payment method
            amount: Positive amount

        Returns:
            The SUCCESS record

        Raises:
            InvalidAmountError: If amount is not a positive finite number (nothing is recorded)
            PaymentValidationError: If the payment details are invalid
            ProcessingUnavailableError: On a simulated outage
        """
        try:
            amount = round_currency(amount)
        except ValueError:
            raise InvalidAmountError("Invalid amount format")
        if amount <= 0:
            raise InvalidAmountError()

        transaction_id = self.id_generator.next_id()
        details = describe_payment(method)
        fee = Decimal("0.00")

        try:
            validate_payment(method)
            fee = calculate_fee(amount, method.kind)
            self.simulator.run()

        except PaymentValidationError as e:
            validation_failures.labels(error_kind=e.kind).inc()
            self._record(transaction_id, method, amount, fee, TransactionStatus.FAILED, details)
            logger.warning(
                f"Payment validation failed: {e}",
                transaction_id=transaction_id,
                method=method.display_name,
                error_kind=e.kind
            )
            raise

        except ProcessingUnavailableError as e:
            processing_unavailable.labels(method=method.display_name).inc()
            self._record(transaction_id, method, amount, fee, TransactionStatus.FAILED, details)
            logger.warning(
                f"Payment processing failed: {e}",
                transaction_id=transaction_id,
                method=method.display_name
            )
            raise

        record = self._record(transaction_id, method, amount, fee, TransactionStatus.SUCCESS, details)
        fees_collected.labels(method=method.display_name).inc(float(fee))
        logger.info(
            "Payment successful",
            transaction_id=transaction_id,
            method=method.display_name,
            amount=str(record.amount),
            fee=str(record.fee),
            total=str(record.total_amount)
        )
        return record

    def _record(
        self,
        transaction_id: str,
        method: PaymentMethod,
        amount: Decimal,
        fee: Decimal,
        status: TransactionStatus,
        details: str
    ) -> TransactionRecord:
        record = TransactionRecord(
            transaction_id=transaction_id,
            payment_method=method.display_name,
            amount=amount,
            fee=fee,
            total_amount=amount + fee,
            status=status,
            timestamp=self.clock(),
            details=details
        )
        self.log.append(record)
        checkout_attempts.labels(method=method.display_name, status=status.value).inc()
        return record

    def submit(self, method: PaymentMethod, amount: Amount) -> Future:
        """
        Run a checkout attempt on its own short-lived worker thread

        The returned future resolves to the SUCCESS record or carries the
        failure. Attempts are independent; their records land in the log in
        completion order.
        """
        future: Future = Future()

        def worker():
            if not future.set_running_or_notify_cancel():
                return
            try:
                record = self.process_payment(method, amount)
            except Exception as e:
                future.set_exception(e)
            else:
                future.set_result(record)

        thread = threading.Thread(target=worker, name=f"checkout-{method.kind.value.lower()}", daemon=True)
        thread.start()
        return future

    def checkout(self, selector: str, fields: Mapping[str, Optional[str]], amount_text: str) -> Future:
        """
        Parse form input and submit a checkout attempt

        Amount and factory errors are raised here, before any worker starts
        and before anything is recorded.

        Raises:
            InvalidAmountError: If the amount text is empty, malformed or not positive
            UnknownPaymentMethodError: If the selector matches no payment kind
        """
        amount = parse_amount(amount_text)
        method = create_payment_method(selector, fields)
        return self.submit(method, amount)
