from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, Protocol

from .records import AlertRecord, AlertReport, CandidateRow, SupplierInfo
from .validation import parse_company_id

logger = logging.getLogger(__name__)

#: Trailing window that counts as "recent sales activity".
RECENT_SALES_WINDOW = timedelta(days=30)

#: Placeholder sales velocity (units per day). Not derived from Sale records.
AVERAGE_DAILY_SALES = 2


class AlertRepository(Protocol):
    """
    Protocol describing the store interface the resolver needs.

    This keeps the resolver independent of Django; tests pass plain
    in-memory doubles.
    """
    def find_low_stock_candidates(
        self, company_id: int, since: datetime
    ) -> Iterable[CandidateRow]: ...


def _check_rate(average_daily_sales: float) -> None:
    if average_daily_sales <= 0:
        raise ValueError(
            f"average_daily_sales must be positive, got {average_daily_sales!r}"
        )


def days_until_stockout(quantity: int, average_daily_sales: float) -> int:
    """
    Days until the given stock runs out at a constant sales rate, rounded up.

    >>> days_until_stockout(3, 2)
    2
    >>> days_until_stockout(0, 2)
    0
    """
    _check_rate(average_daily_sales)
    return math.ceil(quantity / average_daily_sales)


def select_supplier(suppliers: Iterable[SupplierInfo]) -> SupplierInfo | None:
    """
    Pick the representative supplier for a product: lowest supplier id.

    Returns None when the product has no supplier links.
    """
    return min(suppliers, key=lambda s: s.id, default=None)


def _is_alert(row: CandidateRow, since: datetime) -> bool:
    if row.last_sold_at is None or row.last_sold_at < since:
        return False
    return row.quantity <= row.threshold


def get_low_stock_alerts(
    company_id: Any,
    repository: AlertRepository,
    *,
    now: datetime | None = None,
    window: timedelta = RECENT_SALES_WINDOW,
    average_daily_sales: float = AVERAGE_DAILY_SALES,
) -> AlertReport:
    """
    Compute low-stock alerts for a company.

    A (product, warehouse) pair produces an alert when the warehouse
    belongs to the company, the stock is at or below the product type's
    threshold, and the product sold at least once within `window` before
    `now` (in any warehouse).

    Parameters
    ----------
    company_id : Any
        Company identifier, as an int or a digit string.

    repository : AlertRepository
        Store handle for this call.

    now : datetime | None
        End of the recent-sales window. Defaults to the current UTC time.

    window : timedelta, default=30 days
        Length of the recent-sales window.

    average_daily_sales : float, default=2
        Sales velocity used for `days_until_stockout`.

    Raises
    ------
    ValidationError
        If `company_id` is malformed.

    InfrastructureError
        If the repository fails. No partial report is returned.

    ValueError
        If `average_daily_sales` is not positive, whether or not any row
        would alert.

    Example
    -------
    >>> report = get_low_stock_alerts("1", DjangoAlertRepository())
    >>> report.as_dict()["total_alerts"]
    """
    company_id = parse_company_id(company_id)
    _check_rate(average_daily_sales)

    if now is None:
        now = datetime.now(timezone.utc)
    since = now - window

    alerts = tuple(
        AlertRecord(
            product_id=row.product_id,
            product_name=row.product_name,
            sku=row.sku,
            warehouse_id=row.warehouse_id,
            warehouse_name=row.warehouse_name,
            current_stock=row.quantity,
            threshold=row.threshold,
            days_until_stockout=days_until_stockout(row.quantity, average_daily_sales),
            supplier=select_supplier(row.suppliers),
        )
        for row in repository.find_low_stock_candidates(company_id, since)
        if _is_alert(row, since)
    )

    logger.debug(
        "Resolved %d low-stock alerts for company %s since %s",
        len(alerts), company_id, since.isoformat(),
    )
    return AlertReport(alerts=alerts)
