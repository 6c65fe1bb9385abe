from __future__ import annotations

from datetime import datetime

from django.db import DatabaseError, InterfaceError, models
from django.db.models import OuterRef, Prefetch, QuerySet, Subquery

from ..exceptions import InfrastructureError
from ..models import Inventory, ProductSupplier, Sale
from ..records import CandidateRow, SupplierInfo


class DjangoAlertRepository:
    """
    Alert store backed by the Django ORM.

    Each lookup is a single query over Inventory joined with warehouse,
    product and product type, plus one prefetch for suppliers. Nothing is
    cached on the instance; a fresh repository per request is fine.

    Query shape
    -----------
    - company scope: ``warehouse__company_id``
    - recency: a correlated subquery returning the product's latest sale at
      or after ``since``. Any warehouse counts, so recency is per product.
    - order: (product id, warehouse id)

    Failures
    --------
    ``DatabaseError`` and ``InterfaceError`` (e.g. a closed connection) are
    re-raised as ``InfrastructureError``. Logging is left to the caller.
    """

    def __init__(self, using: str | None = None) -> None:
        self.using = using

    def _queryset(self, company_id: int, since: datetime) -> QuerySet:
        latest_sale = (
            Sale.objects.filter(product=OuterRef("product"), sale_date__gte=since)
            .order_by("-sale_date")
            .values("sale_date")[:1]
        )
        suppliers = ProductSupplier.objects.select_related("supplier").order_by(
            "supplier_id"
        )

        qs = (
            Inventory.objects.filter(warehouse__company_id=company_id)
            .annotate(
                last_sold_at=Subquery(latest_sale, output_field=models.DateTimeField())
            )
            .filter(last_sold_at__isnull=False)
            .select_related("warehouse", "product__product_type")
            .prefetch_related(Prefetch("product__product_suppliers", queryset=suppliers))
            .order_by("product_id", "warehouse_id")
        )
        if self.using is not None:
            qs = qs.using(self.using)
        return qs

    def find_low_stock_candidates(
        self, company_id: int, since: datetime
    ) -> list[CandidateRow]:
        """
        Return every Inventory row of the company whose product sold at or
        after ``since``.

        Raises
        ------
        InfrastructureError
            If the database cannot be reached or the query fails.
        """
        try:
            return [_to_row(inv) for inv in self._queryset(company_id, since)]
        except (DatabaseError, InterfaceError) as e:
            raise InfrastructureError(
                f"Failed to load low-stock candidates for company {company_id}"
            ) from e


def _to_row(inv: Inventory) -> CandidateRow:
    product = inv.product
    return CandidateRow(
        product_id=product.pk,
        product_name=product.name,
        sku=product.sku,
        warehouse_id=inv.warehouse.pk,
        warehouse_name=inv.warehouse.name,
        quantity=inv.quantity,
        threshold=product.product_type.low_stock_threshold,
        last_sold_at=inv.last_sold_at,
        suppliers=tuple(
            SupplierInfo(
                id=link.supplier.pk,
                name=link.supplier.name,
                contact_email=link.supplier.contact_email,
            )
            for link in product.product_suppliers.all()
        ),
    )
