"""JSON-ready rendering of overspending results.

Keys follow the camelCase names of the public analysis API. Money is
emitted as float and dates in ISO format.
"""

from decimal import Decimal
from typing import Any

from paytrack.domain.entities import (
    CategoryOverspending,
    OverspendingPeriod,
    OverspendingReport,
    OverspendingSummary,
    PayPeriod,
    ProblematicCategory,
    Transaction,
)


def _money(value: Decimal) -> float:
    return float(value)


def transaction_to_dict(txn: Transaction) -> dict[str, Any]:
    return {
        "id": txn.id,
        "date": txn.date.isoformat(),
        "name": txn.name,
        "amount": _money(txn.amount),
        "categoryId": txn.category_id,
        "notes": txn.notes,
    }


def pay_period_to_dict(period: PayPeriod) -> dict[str, Any]:
    return {
        "startDate": period.start_date.isoformat(),
        "endDate": period.end_date.isoformat(),
    }


def category_overspending_to_dict(cat: CategoryOverspending) -> dict[str, Any]:
    return {
        "id": cat.category_id,
        "name": cat.name,
        "color": cat.color,
        "budgetAmount": _money(cat.budget_amount),
        "spent": _money(cat.spent),
        "overspent": _money(cat.overspent),
        "overspentPercentage": float(cat.overspent_percentage),
        "transactions": [transaction_to_dict(txn) for txn in cat.matching_transactions],
    }


def overspending_period_to_dict(period: OverspendingPeriod) -> dict[str, Any]:
    return {
        "startDate": period.start_date.isoformat(),
        "endDate": period.end_date.isoformat(),
        "totalBudget": _money(period.total_budget),
        "totalSpent": _money(period.total_spent),
        "overspent": _money(period.overspent),
        "categories": [category_overspending_to_dict(cat) for cat in period.categories],
        "biggestTransactions": [
            transaction_to_dict(txn) for txn in period.biggest_transactions
        ],
    }


def problematic_category_to_dict(cat: ProblematicCategory) -> dict[str, Any]:
    return {
        "id": cat.category_id,
        "name": cat.name,
        "color": cat.color,
        "totalOverspent": _money(cat.total_overspent),
        "occurrences": cat.occurrences,
        "averageOverspent": _money(cat.average_overspent),
    }


def summary_to_dict(summary: OverspendingSummary) -> dict[str, Any]:
    return {
        "totalOverspent": _money(summary.total_overspent),
        "averageOverspent": _money(summary.average_overspent),
        "periodsAnalyzed": summary.periods_analyzed,
        "problematicCategories": [
            problematic_category_to_dict(cat) for cat in summary.problematic_categories
        ],
    }


def report_to_dict(report: OverspendingReport) -> dict[str, Any]:
    """Render a full analysis report as a JSON-serializable dict."""
    return {
        "periods": [overspending_period_to_dict(period) for period in report.periods],
        "summary": summary_to_dict(report.summary),
        "payFrequency": report.pay_frequency,
    }
