"""Domain layer for paytrack application."""

# Services import the database layer, which imports domain entities, so
# they are resolved lazily.
_SERVICES = {
    "OverspendingService": "paytrack.domain.overspending",
    "PayScheduleService": "paytrack.domain.pay_schedule",
    "BudgetCategoryService": "paytrack.domain.budget",
    "TransactionService": "paytrack.domain.transaction",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
