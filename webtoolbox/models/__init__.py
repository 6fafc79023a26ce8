"""Bound records and validation shortcuts for the persistence layer."""
from .errors import Errors
from .record import Record, translate_error
from .validations import (
    validates_email_format_of,
    validates_format_of,
    validates_inclusion_of,
    validates_url_format_of,
    validates_username_format_of,
)

__all__ = [
    "Errors",
    "Record",
    "translate_error",
    "validates_email_format_of",
    "validates_format_of",
    "validates_inclusion_of",
    "validates_url_format_of",
    "validates_username_format_of",
]
