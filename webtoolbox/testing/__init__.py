"""Matchers for tests of applications built with the toolbox."""
from .custom_matchers import (
    create_file,
    delete_file,
    have_logged_in_user,
    prevent_mass_assignment_of,
    render_access_denied,
    render_missing,
    send_an_email,
    send_email,
    send_emails,
    yield_with,
)
from .mail import Outbox, deliver, outbox
from .matchers import Expectation, Matcher, expect
from .validation_matchers import (
    limit_length_of,
    limit_size_of,
    require_a,
    require_an,
    require_format_of,
    require_inclusion_of,
    require_numericality_of,
)

__all__ = [
    "Expectation",
    "Matcher",
    "Outbox",
    "create_file",
    "delete_file",
    "deliver",
    "expect",
    "have_logged_in_user",
    "limit_length_of",
    "limit_size_of",
    "outbox",
    "prevent_mass_assignment_of",
    "render_access_denied",
    "render_missing",
    "require_a",
    "require_an",
    "require_format_of",
    "require_inclusion_of",
    "require_numericality_of",
    "send_an_email",
    "send_email",
    "send_emails",
    "yield_with",
]
