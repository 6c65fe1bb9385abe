from typing import Any

from .exceptions import ValidationError

#: Largest id a BIGINT primary key can hold.
MAX_COMPANY_ID = 2**63 - 1


def parse_company_id(value: Any) -> int:
    """
    Convert a raw company identifier into an int.

    Accepts a non-negative int or a string of ASCII digits, which is what
    a URL path segment carries, up to the BIGINT range. Signs, decimals,
    whitespace and bools are rejected.

    Parameters
    ----------
    value : Any
        Identifier as received from the caller.

    Returns
    -------
    int
        The parsed identifier.

    Raises
    ------
    ValidationError
        If the value is not a well-formed company identifier.
    """
    # bool is an int subclass
    if isinstance(value, bool):
        raise ValidationError(f"Invalid company id: {value!r}")

    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        parsed = int(value)
    else:
        raise ValidationError(f"Invalid company id: {value!r}")

    if not 0 <= parsed <= MAX_COMPANY_ID:
        raise ValidationError(f"Invalid company id: {value!r}")
    return parsed
