"""Command-line checkout surface

Usage:
    paysim pay --method UPI --field upiId=user@paytm --amount 500
    paysim pay --method "Credit Card" --field cardNumber=4111111111111111 \\
        --field holderName="Asha Rao" --field cvv=123 --amount 1000
    paysim history
    paysim summary
    paysim methods
"""

import argparse
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables FIRST, before any other imports
env_path = Path.cwd() / '.env'
load_dotenv(dotenv_path=env_path)

from paysim.constants import PaymentKind
from paysim.orchestrator.checkout import CheckoutOrchestrator
from paysim.storage.transaction_log import TransactionLog
from paysim.tools.fee_tools import fee_label
from paysim.tools.method_factory import METHOD_FIELDS
from paysim.utils.config_loader import load_config, DEFAULT_CONFIG_PATH
from paysim.utils.errors import PaymentSystemError, ConfigurationError
from paysim.utils.logging import get_logger

logger = get_logger(__name__)


def print_header(title: str):
    """Print formatted section header"""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def parse_fields(pairs) -> dict:
    """Turn ['upiId=user@paytm', ...] into a field mapping"""
    fields = {}
    for pair in pairs or []:
        name, sep, value = pair.partition("=")
        if not sep or not name.strip():
            raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got: {pair}")
        fields[name.strip()] = value
    return fields


def build_orchestrator(args) -> CheckoutOrchestrator:
    config = load_config(args.config)
    log = None
    if args.log_file:
        log = TransactionLog(args.log_file)
    return CheckoutOrchestrator.from_config(config, log=log)


def cmd_pay(args) -> int:
    orchestrator = build_orchestrator(args)

    try:
        fields = parse_fields(args.field)
        future = orchestrator.checkout(args.method, fields, args.amount)
        print("Processing your payment...")
        record = future.result()
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}")
        return 2
    except PaymentSystemError as e:
        print(f"Payment Failed: {e}")
        return 1

    print_header("Payment Successful!")
    print(f"Transaction ID: {record.transaction_id}")
    print(f"Amount:  ₹{record.amount:.2f}")
    print(f"Fee:     ₹{record.fee:.2f}")
    print(f"Total:   ₹{record.total_amount:.2f}")
    print(f"Method:  {record.payment_method}")
    print(f"Details: {record.details}")
    return 0


def cmd_history(args) -> int:
    orchestrator = build_orchestrator(args)
    log = orchestrator.log

    if len(log) == 0:
        print("No transactions yet!")
        return 0

    df = log.to_dataframe()
    table = df[['transaction_id', 'payment_method', 'amount', 'fee', 'status', 'timestamp']].copy()
    table['amount'] = table['amount'].map(lambda value: f"₹{value:.2f}")
    table['fee'] = table['fee'].map(lambda value: f"₹{value:.2f}")
    table['timestamp'] = table['timestamp'].map(lambda value: value.strftime("%d/%m/%Y %H:%M"))
    table.columns = ["Transaction ID", "Method", "Amount", "Fee", "Status", "Date"]

    print_header("Transaction History")
    print(table.to_string(index=False))
    print(f"\nTotal Transactions: {len(log)}")
    print(f"Successful: {log.successful_count()}")
    return 0


def cmd_summary(args) -> int:
    orchestrator = build_orchestrator(args)
    summary = orchestrator.log.summary()

    print_header("Transaction Summary")
    print(f"File:               {summary['path']}")
    print(f"Total Transactions: {summary['total_transactions']}")
    print(f"Successful:         {summary['successful']}")
    print(f"Failed:             {summary['failed']}")
    print(f"Revenue:            ₹{summary['total_revenue']:.2f}")
    print(f"Fees Collected:     ₹{summary['fees_collected']:.2f}")
    return 0


def cmd_methods(args) -> int:
    print_header("Payment Methods")
    for kind in PaymentKind:
        print(f"{kind.display_name:<12} {fee_label(kind):<26} fields: {', '.join(METHOD_FIELDS[kind])}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="paysim", description="Payment checkout simulator")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to YAML configuration")
    parser.add_argument("--log-file", default=None, help="Transaction CSV file (overrides configuration)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    pay = subparsers.add_parser("pay", help="Run one checkout")
    pay.add_argument("--method", required=True, help="Payment method, e.g. 'Credit Card', UPI, NET_BANKING")
    pay.add_argument("--amount", required=True, help="Amount to pay")
    pay.add_argument("--field", action="append", metavar="NAME=VALUE", help="Payment field, repeatable")
    pay.set_defaults(func=cmd_pay)

    history = subparsers.add_parser("history", help="Show all transactions")
    history.set_defaults(func=cmd_history)

    summary = subparsers.add_parser("summary", help="Show transaction statistics")
    summary.set_defaults(func=cmd_summary)

    methods = subparsers.add_parser("methods", help="List payment methods and fees")
    methods.set_defaults(func=cmd_methods)

    return parser


def main(argv=None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return args.func(args)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print(f"Configuration error: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
