from __future__ import annotations

from typing import Any
from urllib.parse import urlparse

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULTS: dict[str, Any] = {
    "RECENT_SALES_DAYS": 30,
    "AVERAGE_DAILY_SALES": 2,
}


def get_setting(name: str) -> Any:
    """
    Read ``STOCK_ALERTS_<name>`` from Django settings, falling back to the
    package default.
    """
    return getattr(settings, f"STOCK_ALERTS_{name}", DEFAULTS[name])


def database_from_url(database_url: str) -> dict[str, Any]:
    """
    Build a Django ``DATABASES`` entry from a ``DATABASE_URL``.

    Supported schemes: ``postgres://``, ``postgresql://`` and ``sqlite:///``
    (use ``sqlite:///:memory:`` for an in-memory database).
    """
    u = urlparse(database_url)

    if u.scheme in {"postgres", "postgresql"}:
        return {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": (u.path or "").lstrip("/"),
            "USER": u.username or "",
            "PASSWORD": u.password or "",
            "HOST": u.hostname or "localhost",
            "PORT": str(u.port or 5432),
            "CONN_MAX_AGE": 0,
        }

    if u.scheme == "sqlite":
        # sqlite:///rel.db -> "rel.db", sqlite:////abs.db -> "/abs.db"
        return {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": u.path[1:] or ":memory:",
        }

    raise ImproperlyConfigured(f"Unsupported DATABASE_URL scheme: {u.scheme!r}")
