from .api import AlertRepository, get_low_stock_alerts
from .exceptions import InfrastructureError, StockAlertsError, ValidationError
from .records import AlertRecord, AlertReport, CandidateRow, SupplierInfo

__all__ = [
    "get_low_stock_alerts",
    "AlertRepository",
    "AlertRecord",
    "AlertReport",
    "CandidateRow",
    "SupplierInfo",
    "StockAlertsError",
    "ValidationError",
    "InfrastructureError",
]
