from django.apps import AppConfig


class StockAlertsConfig(AppConfig):
    name = "stock_alerts"
    verbose_name = "Stock alerts"
    default_auto_field = "django.db.models.BigAutoField"
