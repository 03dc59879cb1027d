"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Settings are read on
each call so ``RECON_DATA_DIR`` can change between invocations.
"""

from __future__ import annotations

from recon.domain.service.book_builder import BANK_BOOK, CASH_BOOK, BookBuilder
from recon.infrastructure.persistence.json_account_repository import (
    JsonAccountRepository,
)
from recon.infrastructure.persistence.json_book_settings_repository import (
    JsonBookSettingsRepository,
)
from recon.infrastructure.persistence.json_goods_receipt_repository import (
    JsonGoodsReceiptRepository,
)
from recon.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from recon.infrastructure.persistence.json_purchase_order_repository import (
    JsonPurchaseOrderRepository,
)
from recon.infrastructure.persistence.json_purchase_return_repository import (
    JsonPurchaseReturnRepository,
)
from recon.infrastructure.persistence.json_source_document_repository import (
    JsonSourceDocumentRepository,
)
from recon.infrastructure.persistence.json_supplier_credit_repository import (
    JsonSupplierCreditRepository,
)
from recon.infrastructure.settings import load_settings


def inventory_repository() -> JsonInventoryRepository:
    return JsonInventoryRepository(load_settings().data_dir / "inventory.json")


def purchase_order_repository() -> JsonPurchaseOrderRepository:
    return JsonPurchaseOrderRepository(load_settings().data_dir / "purchase_orders.json")


def goods_receipt_repository() -> JsonGoodsReceiptRepository:
    return JsonGoodsReceiptRepository(load_settings().data_dir / "grns.json")


def purchase_return_repository() -> JsonPurchaseReturnRepository:
    return JsonPurchaseReturnRepository(load_settings().data_dir / "purchase_returns.json")


def supplier_credit_repository() -> JsonSupplierCreditRepository:
    return JsonSupplierCreditRepository(load_settings().data_dir / "supplier_credits.json")


def account_repository() -> JsonAccountRepository:
    return JsonAccountRepository(load_settings().data_dir / "accounts.json")


def source_document_repository() -> JsonSourceDocumentRepository:
    return JsonSourceDocumentRepository(load_settings().data_dir)


def book_settings_repository() -> JsonBookSettingsRepository:
    return JsonBookSettingsRepository(load_settings().data_dir / "books.json")


def book_builders() -> dict[str, BookBuilder]:
    settings = load_settings()
    return {
        CASH_BOOK: BookBuilder.cash_book(settings.cash_modes),
        BANK_BOOK: BookBuilder.bank_book(settings.bank_modes),
    }
