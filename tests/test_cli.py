"""Tests for the command-line checkout surface"""

import pytest

from paysim.main import main, parse_fields


def run(config_file, csv_path, *args):
    return main(["--config", str(config_file), "--log-file", str(csv_path), *args])


def test_pay_success(config_file, csv_path, capsys):
    code = run(config_file, csv_path, "pay", "--method", "Credit Card",
               "--field", "cardNumber=4111111111111111", "--field", "holderName=Asha Rao",
               "--field", "cvv=123", "--amount", "1000")
    out = capsys.readouterr().out

    assert code == 0
    assert "Payment Successful!" in out
    assert "₹20.00" in out
    assert "₹1020.00" in out
    assert csv_path.exists()


def test_pay_validation_failure(config_file, csv_path, capsys):
    code = run(config_file, csv_path, "pay", "--method", "UPI",
               "--field", "upiId=userpaytm", "--amount", "500")
    out = capsys.readouterr().out

    assert code == 1
    assert "Payment Failed: Invalid UPI ID" in out
    # The failed attempt is still on file
    assert len(csv_path.read_text(encoding="utf-8").splitlines()) == 2


def test_pay_unknown_method(config_file, csv_path, capsys):
    code = run(config_file, csv_path, "pay", "--method", "Bitcoin", "--amount", "10")
    assert code == 1
    assert "Unknown payment method: Bitcoin" in capsys.readouterr().out
    assert not csv_path.exists()


def test_pay_bad_amount(config_file, csv_path, capsys):
    code = run(config_file, csv_path, "pay", "--method", "UPI", "--field", "upiId=a@b", "--amount", "abc")
    assert code == 1
    assert "Invalid amount format" in capsys.readouterr().out


def test_pay_oversized_amount(config_file, csv_path, capsys):
    code = run(config_file, csv_path, "pay", "--method", "UPI", "--field", "upiId=a@b", "--amount", "1e30")
    assert code == 1
    assert "Payment Failed: Invalid amount format" in capsys.readouterr().out
    assert not csv_path.exists()


def test_history_empty(config_file, csv_path, capsys):
    assert run(config_file, csv_path, "history") == 0
    assert "No transactions yet!" in capsys.readouterr().out


def test_history_and_summary(config_file, csv_path, capsys):
    run(config_file, csv_path, "pay", "--method", "UPI", "--field", "upiId=user@paytm", "--amount", "500")
    run(config_file, csv_path, "pay", "--method", "Wallet", "--field", "mobileNumber=123", "--amount", "50")
    capsys.readouterr()

    assert run(config_file, csv_path, "history") == 0
    out = capsys.readouterr().out
    assert "Transaction History" in out
    assert "Total Transactions: 2" in out
    assert "Successful: 1" in out

    assert run(config_file, csv_path, "summary") == 0
    out = capsys.readouterr().out
    assert "Failed:             1" in out
    assert "₹500.00" in out


def test_methods(config_file, csv_path, capsys):
    assert run(config_file, csv_path, "methods") == 0
    out = capsys.readouterr().out
    assert "Net Banking Fee (1%)" in out
    assert "upiId" in out


def test_missing_config(tmp_path, capsys):
    code = main(["--config", str(tmp_path / "missing.yaml"), "history"])
    assert code == 2
    assert "Configuration error" in capsys.readouterr().out


def test_parse_fields():
    assert parse_fields(["upiId=user@paytm", "holderName=Rao, Asha"]) == {
        "upiId": "user@paytm",
        "holderName": "Rao, Asha"
    }
    assert parse_fields(None) == {}


def test_pay_bad_field(config_file, csv_path):
    assert run(config_file, csv_path, "pay", "--method", "UPI", "--field", "nofield", "--amount", "5") == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
