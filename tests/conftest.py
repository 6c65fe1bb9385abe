"""
In-process Django setup for the test suite.

Uses SQLite in memory unless DATABASE_URL points elsewhere. Tables are
created once per session with ``migrate --run-syncdb``; each test that
touches the database runs inside a transaction that is rolled back.
"""

import os
from datetime import timedelta

import pytest
from django.conf import settings

from stock_alerts.conf import database_from_url


def _configure_django_if_needed() -> None:
    if settings.configured:
        return

    settings.configure(
        SECRET_KEY="test",
        DEBUG=False,
        ALLOWED_HOSTS=["testserver"],
        INSTALLED_APPS=["stock_alerts"],
        MIDDLEWARE=[],
        ROOT_URLCONF="stock_alerts.urls",
        DATABASES={
            "default": database_from_url(
                os.environ.get("DATABASE_URL", "sqlite:///:memory:")
            )
        },
        TIME_ZONE="UTC",
        USE_TZ=True,
    )

    import django

    django.setup()


_configure_django_if_needed()


@pytest.fixture(scope="session")
def _schema() -> None:
    from django.core.management import call_command

    call_command("migrate", run_syncdb=True, verbosity=0)


@pytest.fixture
def db(_schema):
    """Run the test in a transaction that is always rolled back."""
    from django.db import transaction

    with transaction.atomic():
        yield
        transaction.set_rollback(True)


@pytest.fixture
def catalog(db):
    """
    Company 1 style fixture: one company with one warehouse, a "Widget"
    (threshold 5) stocked at 3, sold 5 days ago, supplied by Acme.
    """
    from django.utils import timezone

    from stock_alerts.models import (
        Company,
        Inventory,
        Product,
        ProductSupplier,
        ProductType,
        Sale,
        Supplier,
        Warehouse,
    )

    now = timezone.now()
    company = Company.objects.create(name="Company 1")
    warehouse = Warehouse.objects.create(company=company, name="Main")
    widgets = ProductType.objects.create(name="Widgets", low_stock_threshold=5)
    widget = Product.objects.create(name="Widget", sku="W-1", product_type=widgets)
    inventory = Inventory.objects.create(product=widget, warehouse=warehouse, quantity=3)
    sale = Sale.objects.create(
        product=widget, warehouse=warehouse, sale_date=now - timedelta(days=5)
    )
    acme = Supplier.objects.create(name="Acme", contact_email="orders@acme.test")
    ProductSupplier.objects.create(product=widget, supplier=acme)

    return {
        "now": now,
        "company": company,
        "warehouse": warehouse,
        "product_type": widgets,
        "product": widget,
        "inventory": inventory,
        "sale": sale,
        "supplier": acme,
    }
