"""Domain layer for ledgerbook application."""

_SERVICES = {
    "AccountBookService": "ledgerbook.domain.account_book",
    "AccountService": "ledgerbook.domain.account",
    "AccountAggregator": "ledgerbook.domain.aggregator",
    "CategoryRuleService": "ledgerbook.domain.category_rule",
    "QIFImportService": "ledgerbook.domain.qif_import",
    "TransactionService": "ledgerbook.domain.transaction",
}

__all__ = list(_SERVICES)


# Services are imported lazily: the database layer imports domain entities.
def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
