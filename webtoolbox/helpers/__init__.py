"""View helpers: currency, login gating, placeholders and small extensions."""
from .extensions import humanize, to_sentence, to_url
from .placeholder import (
    pbs,
    ph,
    phf,
    phu,
    placeholder,
    placeholder_for,
    placeholder_or_list,
    placeholder_unless,
    placeholder_with_blank_slate_unless,
)
from .views import in_euros, logged_in, logged_in_only, number_to_currency, public_only

__all__ = [
    "humanize",
    "in_euros",
    "logged_in",
    "logged_in_only",
    "number_to_currency",
    "pbs",
    "ph",
    "phf",
    "phu",
    "placeholder",
    "placeholder_for",
    "placeholder_or_list",
    "placeholder_unless",
    "placeholder_with_blank_slate_unless",
    "public_only",
    "to_sentence",
    "to_url",
]
