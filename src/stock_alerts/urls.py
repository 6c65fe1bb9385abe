from django.urls import path

from . import views

urlpatterns = [
    path(
        "api/companies/<str:company_id>/alerts/low-stock",
        views.low_stock_alerts,
        name="low_stock_alerts",
    ),
]
