"""End-to-end tests for the click command line against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from recon.infrastructure.cli.main import cli


@pytest.fixture
def run(data_dir):
    runner = CliRunner()

    def invoke(*args):
        return runner.invoke(cli, list(args), env={"RECON_DATA_DIR": str(data_dir)})

    return invoke


class TestInventoryAndPurchaseOrders:

    def test_inventory_flags_low_stock(self, run):
        result = run("inventory", "show")
        assert result.exit_code == 0
        assert "B-200" in result.output
        assert "(low)" in result.output

    def test_po_show(self, run):
        result = run("po", "show", "--id", "po1")
        assert result.exit_code == 0
        assert "partially_received" in result.output

    def test_po_show_unknown(self, run):
        result = run("po", "show", "--id", "nope")
        assert result.exit_code == 1
        assert "not found" in result.output


class TestGoodsReceipt:

    def test_apply_completes_po(self, run, data_dir):
        result = run("grn", "apply", "--id", "g1", "--po", "po1", "--items", "A-100:5")
        assert result.exit_code == 0
        assert "A-100" in result.output
        assert "po1 is now received" in result.output
        stock = json.loads((data_dir / "inventory.json").read_text())[0]["stock"]
        assert stock == 15

    def test_apply_twice(self, run):
        run("grn", "apply", "--id", "g1", "--items", "A-100:5")
        result = run("grn", "apply", "--id", "g1", "--items", "A-100:5")
        assert result.exit_code == 0
        assert "already applied" in result.output

    def test_bad_items(self, run):
        result = run("grn", "apply", "--id", "g1", "--items", "A-100")
        assert result.exit_code == 2
        assert "SKU:Quantity" in result.output

    def test_negative_quantity_rejected(self, run, data_dir):
        result = run("grn", "apply", "--id", "g1", "--items", "A-100:-20")
        assert result.exit_code == 2
        assert "must be positive" in result.output
        stock = json.loads((data_dir / "inventory.json").read_text())[0]["stock"]
        assert stock == 10


class TestPurchaseReturn:

    ARGS = ("return", "process", "--id", "r1", "--number", "PRET-1", "--po", "po1",
            "--supplier-id", "s1", "--items", "A-100:2:2.50")

    def test_process_once(self, run, data_dir):
        first = run(*self.ARGS)
        assert first.exit_code == 0
        assert "Credit SC-PRET-1: 5.00 for Acme Trading" in first.output

        second = run(*self.ARGS)
        assert second.exit_code == 0
        assert "Return already processed" in second.output

        credits = json.loads((data_dir / "supplier_credits.json").read_text())
        assert len(credits) == 1
        stock = json.loads((data_dir / "inventory.json").read_text())[0]["stock"]
        assert stock == 8

    def test_missing_identity(self, run):
        result = run("return", "process", "--items", "A-100:1")
        assert result.exit_code == 1
        assert "id or a return number" in result.output


class TestLedger:

    def test_full_ledger(self, run):
        result = run("ledger", "show")
        assert result.exit_code == 0
        assert "Purchase from Acme Trading" in result.output
        assert "550.00" in result.output

    def test_counterparty_opening_balance(self, run):
        result = run("ledger", "show", "--party-id", "c1")
        assert result.exit_code == 0
        assert "Opening balance: 100.00" in result.output
        assert "Payment to" not in result.output

    def test_type_filter(self, run):
        result = run("ledger", "show", "--type", "receipt")
        assert "RV-1" in result.output
        assert "INV-1" not in result.output


class TestBooks:

    def test_cash_book_with_opening_balance(self, run):
        assert run("book", "set-opening", "--book", "cash", "--amount", "1000").exit_code == 0
        result = run("book", "show", "--book", "cash")
        assert result.exit_code == 0
        assert "Rent Expense: January" in result.output
        assert "1,810.00" in result.output

    def test_bank_book(self, run):
        result = run("book", "show", "--book", "bank")
        assert "PI-1" in result.output
        assert "RV-1" in result.output
        assert "INV-1" not in result.output

    def test_invalid_opening_balance(self, run):
        result = run("book", "set-opening", "--book", "cash", "--amount", "abc")
        assert result.exit_code == 1
        assert "Invalid opening balance" in result.output
