"""Shared fixtures for checkout simulator tests"""

import pytest
import random
from datetime import datetime

from paysim.orchestrator.checkout import CheckoutOrchestrator
from paysim.orchestrator.processing import ProcessingSimulator
from paysim.storage.transaction_log import TransactionLog

FIXED_TIME = datetime(2024, 10, 23, 10, 0, 5)

VALID_FIELDS = {
    "Credit Card": {"cardNumber": "4111111111111111", "holderName": "Asha Rao",
                    "expiryDate": "12/27", "cvv": "123"},
    "Debit Card": {"cardNumber": "5500005555555559", "holderName": "Ravi Menon",
                   "expiryDate": "01/28", "cvv": "456"},
    "UPI": {"upiId": "user@paytm"},
    "Net Banking": {"bankName": "HDFC", "accountNumber": "12345678"},
    "Wallet": {"walletProvider": "Paytm", "mobileNumber": "9876543210"},
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer environment overrides out of tests"""
    for name in ["DEMO_MODE", "PAYSIM_CONFIG", "PAYSIM_TRANSACTION_FILE",
                 "PAYSIM_FAILURE_RATE", "PAYSIM_DELAY_SECONDS"]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def csv_path(tmp_path):
    return tmp_path / "transaction_history.csv"


@pytest.fixture
def transaction_log(csv_path):
    return TransactionLog(csv_path)


@pytest.fixture
def instant_simulator():
    """No delay, never fails"""
    return ProcessingSimulator(delay_seconds=0, failure_rate=0.0, rng=random.Random(7))


@pytest.fixture
def outage_simulator():
    """No delay, always fails"""
    return ProcessingSimulator(delay_seconds=0, failure_rate=1.0, rng=random.Random(7))


@pytest.fixture
def orchestrator(transaction_log, instant_simulator):
    return CheckoutOrchestrator(transaction_log, simulator=instant_simulator, clock=lambda: FIXED_TIME)


@pytest.fixture
def config_file(tmp_path, csv_path):
    """Config with zero delay and no outages"""
    path = tmp_path / "checkout.yaml"
    path.write_text(
        "version: '1.0'\n"
        "processing:\n"
        "  delay_seconds: 0\n"
        "  failure_rate: 0.0\n"
        "storage:\n"
        f"  transaction_file: {csv_path}\n",
        encoding="utf-8"
    )
    return path
