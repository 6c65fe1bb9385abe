from __future__ import annotations

import logging
from datetime import timedelta

from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET

from .api import get_low_stock_alerts
from .backends.django_orm import DjangoAlertRepository
from .conf import get_setting
from .exceptions import InfrastructureError, ValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred."


def _message(message: str, *, status: int) -> JsonResponse:
    """
    Error body shared by all failure responses.
    """
    return JsonResponse({"message": message}, status=status)


@require_GET
def low_stock_alerts(request: HttpRequest, company_id: str) -> JsonResponse:
    """
    GET /api/companies/<company_id>/alerts/low-stock

    200 with ``{"alerts": [...], "total_alerts": N}``, 400 for a malformed
    company id, 500 for anything else.
    """
    try:
        report = get_low_stock_alerts(
            company_id,
            DjangoAlertRepository(),
            now=timezone.now(),
            window=timedelta(days=get_setting("RECENT_SALES_DAYS")),
            average_daily_sales=get_setting("AVERAGE_DAILY_SALES"),
        )
    except ValidationError as e:
        return _message(str(e), status=400)
    except InfrastructureError:
        logger.exception("Data store failure resolving low-stock alerts for company %s", company_id)
        return _message(INTERNAL_ERROR_MESSAGE, status=500)
    except Exception:
        logger.exception("Unexpected error resolving low-stock alerts for company %s", company_id)
        return _message(INTERNAL_ERROR_MESSAGE, status=500)

    return JsonResponse(report.as_dict())
