import json
import logging

import pytest


@pytest.fixture
def data_dir(tmp_path):
    """A data directory seeded with a small purchasing and sales history."""
    files = {
        "inventory.json": [
            {"sku": "A-100", "name": "Bolt", "stock": 10, "minStock": 5, "maxStock": 50,
             "location": "R1"},
            {"sku": "B-200", "name": "Nut", "stock": 3, "minStock": 5, "maxStock": 40},
        ],
        "purchase_orders.json": [
            {"id": "po1", "supplierId": "s1", "supplierName": "Acme Trading",
             "date": "2024-01-01T00:00:00Z", "fulfillmentStatus": "open",
             "items": [{"sku": "A-100", "quantity": 10, "received": 5, "price": "2.50"}]},
        ],
        "accounts.json": [
            {"_id": "s1", "name": "Acme Trading", "type": "supplier", "openingBalance": 0},
            {"_id": "c1", "name": "Bob", "kind": "customer", "openingAmount": "100"},
        ],
        "sales.json": [
            {"_id": "s1", "invoiceNumber": "INV-1", "invoiceDate": "2024-01-01",
             "customer": {"_id": "c1", "name": "Bob"}, "totalNetAmount": 1000,
             "paymentMethod": "Cash"},
        ],
        "purchase_invoices.json": [
            {"_id": "p1", "purchaseInvoiceNumber": "PI-1", "invoiceDate": "2024-01-02",
             "supplier": [{"_id": "s1", "name": "Acme Trading"}], "total": 0,
             "products": [{"quantity": 4, "rate": 100}], "paymentMode": "bank"},
        ],
        "receipt_vouchers.json": [
            {"id": "rv1", "voucherNumber": "RV-1", "voucherDate": "2024-01-03",
             "receivedFrom": "Bob", "accountId": "c1", "amount": "200",
             "paymentMode": "UPI"},
        ],
        "payment_vouchers.json": [
            {"id": "pv1", "voucherNumber": "PV-1", "voucherDate": "2024-01-04",
             "paidTo": "Acme Trading", "accountId": "s1", "amount": 150,
             "paymentMode": "cash"},
        ],
        "expenses.json": [
            {"id": "e1", "expenseNumber": "EXP-1", "date": "2024-01-05",
             "categoryType": "Rent", "description": "January", "amount": 40,
             "paymentMethod": "cash"},
        ],
    }
    for name, records in files.items():
        (tmp_path / name).write_text(json.dumps(records), encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def reset_recon_logger():
    yield
    logger = logging.getLogger("recon")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
