from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class SupplierInfo:
    """
    Reorder contact for a product.
    """
    id: int
    name: str
    contact_email: str

    def as_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "contact_email": self.contact_email}


@dataclass(frozen=True)
class CandidateRow:
    """
    One Inventory record joined with its warehouse, product, product type,
    most recent in-window sale and linked suppliers.

    Repositories produce these; the resolver decides which become alerts.
    """
    product_id: int
    product_name: str
    sku: str
    warehouse_id: int
    warehouse_name: str
    quantity: int
    threshold: int
    last_sold_at: datetime | None = None
    suppliers: tuple[SupplierInfo, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AlertRecord:
    product_id: int
    product_name: str
    sku: str
    warehouse_id: int
    warehouse_name: str
    current_stock: int
    threshold: int
    days_until_stockout: int
    supplier: SupplierInfo | None

    def as_dict(self) -> dict[str, Any]:
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "sku": self.sku,
            "warehouse_id": self.warehouse_id,
            "warehouse_name": self.warehouse_name,
            "current_stock": self.current_stock,
            "threshold": self.threshold,
            "days_until_stockout": self.days_until_stockout,
            "supplier": self.supplier.as_dict() if self.supplier is not None else None,
        }


@dataclass(frozen=True)
class AlertReport:
    """
    Result of a low-stock lookup: the alerts plus their count.
    """
    alerts: tuple[AlertRecord, ...] = ()

    @property
    def total_alerts(self) -> int:
        return len(self.alerts)

    def as_dict(self) -> dict[str, Any]:
        return {
            "alerts": [alert.as_dict() for alert in self.alerts],
            "total_alerts": self.total_alerts,
        }
