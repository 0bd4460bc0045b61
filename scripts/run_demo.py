#!/usr/bin/env python
"""
Demo runner script for the payment checkout simulator

Fires one checkout per payment method concurrently (one worker each),
waits for every attempt and prints the outcomes and the resulting history.

Usage:
    python scripts/run_demo.py                    # Demo config, random outages
    python scripts/run_demo.py --no-failures      # Disable simulated outages
    python scripts/run_demo.py --log-file demo.csv
"""

import os
import sys
import argparse
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set demo mode environment variables
os.environ["DEMO_MODE"] = "true"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from paysim.orchestrator.checkout import CheckoutOrchestrator
from paysim.orchestrator.processing import ProcessingSimulator
from paysim.storage.transaction_log import TransactionLog
from paysim.utils.config_loader import load_config, get_processing_config
from paysim.utils.errors import PaymentSystemError
from paysim.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_CHECKOUTS = [
    ("Credit Card", {"cardNumber": "4111111111111111", "holderName": "Asha Rao",
                     "expiryDate": "12/27", "cvv": "123"}, "1000"),
    ("Debit Card", {"cardNumber": "5500005555555559", "holderName": "Ravi Menon",
                    "expiryDate": "01/28", "cvv": "456"}, "250.50"),
    ("UPI", {"upiId": "user@paytm"}, "500"),
    ("Net Banking", {"bankName": "HDFC", "accountNumber": "12345678"}, "2000"),
    ("Wallet", {"walletProvider": "Paytm", "mobileNumber": "9876543210"}, "120"),
    ("UPI", {"upiId": "userpaytm"}, "75"),
]


def print_header(title: str):
    """Print formatted section header"""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def run_demo(log_file: str, no_failures: bool = False) -> int:
    """
    Run the demo checkouts

    Args:
        log_file: Transaction CSV to append to
        no_failures: Force the outage rate to zero

    Returns:
        Number of failed attempts
    """
    config = load_config()
    processing = get_processing_config(config)

    simulator = ProcessingSimulator(
        delay_seconds=processing['delay_seconds'],
        failure_rate=0.0 if no_failures else processing['failure_rate']
    )
    orchestrator = CheckoutOrchestrator(TransactionLog(log_file), simulator=simulator)

    print_header("Submitting Checkouts")
    pending = []
    for selector, fields, amount in DEMO_CHECKOUTS:
        print(f"  • {selector:<12} ₹{amount}")
        pending.append((selector, orchestrator.checkout(selector, fields, amount)))

    print_header("Results")
    failures = 0
    for selector, future in pending:
        try:
            record = future.result()
            print(f"  ✅ {selector:<12} {record.transaction_id}  total ₹{record.total_amount:.2f}")
        except PaymentSystemError as e:
            failures += 1
            print(f"  ❌ {selector:<12} Payment Failed: {e}")

    summary = orchestrator.log.summary()
    print_header("Transaction Summary")
    print(f"📁 File: {summary['path']}")
    print(f"  • Total Transactions: {summary['total_transactions']}")
    print(f"  • Successful: {summary['successful']}")
    print(f"  • Failed: {summary['failed']}")
    print(f"  • Revenue: ₹{summary['total_revenue']:.2f}")
    print(f"  • Fees Collected: ₹{summary['fees_collected']:.2f}")

    return failures


def main():
    parser = argparse.ArgumentParser(description="Run checkout simulator demo")
    parser.add_argument("--log-file", default="demo_transaction_history.csv", help="Transaction CSV file")
    parser.add_argument("--no-failures", action="store_true", help="Disable simulated processing outages")
    args = parser.parse_args()

    try:
        run_demo(args.log_file, no_failures=args.no_failures)
    except PaymentSystemError as e:
        logger.error(f"Demo failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
