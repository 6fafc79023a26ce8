"""Validation shortcuts for Pydantic models.

Each shortcut returns a field validator to be assigned in the model body::

    class User(BaseModel):
        email: str
        login: str
        homepage: Optional[str] = None

        check_email = validates_email_format_of("email")
        check_login = validates_username_format_of("login")
        check_homepage = validates_url_format_of("homepage", message="is geen geldige URL")

Failures are reported with the locale's ``invalid`` message unless a custom
message is given. ``None`` values are left to the field's own type.
"""
import re
from typing import Any, Iterable, Optional, Pattern, Union

from pydantic import field_validator
from pydantic_core import PydanticCustomError

from ..helpers.extensions import EMAIL, URL, USERNAME
from ..locale import error_message


def validates_format_of(*fields: str, with_: Union[str, Pattern[str]], message: Optional[str] = None):
    if not fields:
        raise ValueError("At least one field name is required")
    pattern = re.compile(with_) if isinstance(with_, str) else with_

    def check_format(cls, value: Any) -> Any:
        if value is None:
            return value
        if not pattern.match(str(value)):
            raise PydanticCustomError("format", message or error_message("invalid"))
        return value

    return field_validator(*fields)(check_format)


def validates_email_format_of(*fields: str, message: Optional[str] = None):
    return validates_format_of(*fields, with_=EMAIL, message=message)


def validates_username_format_of(*fields: str, message: Optional[str] = None):
    """Word characters only, 3 to 16 of them."""
    return validates_format_of(*fields, with_=USERNAME, message=message)


def validates_url_format_of(*fields: str, message: Optional[str] = None):
    return validates_format_of(*fields, with_=URL, message=message)


def validates_inclusion_of(*fields: str, in_: Iterable[Any], message: Optional[str] = None):
    allowed = in_ if isinstance(in_, range) else tuple(in_)

    def check_inclusion(cls, value: Any) -> Any:
        if value is None:
            return value
        if value not in allowed:
            raise PydanticCustomError("inclusion", message or error_message("inclusion"))
        return value

    return field_validator(*fields)(check_inclusion)
