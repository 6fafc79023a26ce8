from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Callable

from fastapi import Request
from markupsafe import Markup

from ..core.config import Config


def number_to_currency(
    number: Any,
    precision: int = 2,
    unit: str = "$",
    separator: str = ".",
    delimiter: str = ",",
) -> Markup:
    """Format a number as an amount of money.

    ``unit`` is inserted as markup so HTML entities like ``&euro;`` survive.
    """
    try:
        amount = Decimal(str(number))
    except (InvalidOperation, ValueError):
        raise ValueError(f"Not a number: {number!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Not a number: {number!r}")

    quantum = Decimal(1).scaleb(-precision)
    amount = amount.quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    whole, _, fraction = f"{abs(amount):f}".partition(".")

    groups = []
    while len(whole) > 3:
        groups.insert(0, whole[-3:])
        whole = whole[:-3]
    groups.insert(0, whole)

    text = delimiter.join(groups)
    if precision > 0:
        text = f"{text}{separator}{fraction}"
    return Markup(unit) + Markup.escape(f"{sign}{text}")


def in_euros(number: Any) -> Markup:
    """``in_euros(123456.9)`` -> ``&euro;123.456,90``"""
    return number_to_currency(number, precision=2, unit="&euro;", separator=",", delimiter=".")


def logged_in(request: Request) -> bool:
    """Whether the session carries a user; needs Starlette's ``SessionMiddleware``."""
    if "session" not in request.scope:
        return False
    return request.session.get(Config.SESSION_USER_KEY) is not None


def logged_in_only(request: Request, render: Callable[[], Any]) -> Any:
    """Render only for logged in users, an empty string for everyone else."""
    return render() if logged_in(request) else Markup("")


def public_only(request: Request, render: Callable[[], Any]) -> Any:
    """Render only for visitors that are not logged in."""
    return Markup("") if logged_in(request) else render()
