"""
Exception hierarchy for stock_alerts.

Callers that only need to know "the alert lookup failed" can catch
`StockAlertsError`. The HTTP layer distinguishes the two subclasses:
`ValidationError` maps to a client error, `InfrastructureError` to a
server error.
"""


class StockAlertsError(Exception):
    """
    Base exception for all stock_alerts errors.

    Example
    -------
    >>> try:
    ...     get_low_stock_alerts(company_id, repository)
    ... except StockAlertsError as e:
    ...     report_failure(e.code)
    """

    #: Stable error code for programmatic handling.
    code: str = "stock_alerts_error"

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = "An unspecified stock_alerts error occurred."
        super().__init__(message)


class ValidationError(StockAlertsError):
    """
    Raised when a request argument is malformed, e.g. a non-numeric
    company identifier.

    A well-formed identifier that matches no company is not an error;
    it simply produces no alerts.
    """

    code: str = "validation_error"


class InfrastructureError(StockAlertsError):
    """
    Raised when the data store cannot be reached or a query fails.

    The resolver does not retry; retry and timeout policy belong to the
    store client.
    """

    code: str = "infrastructure_error"
