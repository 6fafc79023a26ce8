"""Install the toolbox into a FastAPI application and its Jinja2 templates."""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from jinja2 import Environment
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..forms import error_messages_for, listed_form
from ..helpers import extensions, views
from ..helpers.placeholder import pbs, ph, phf, phu, placeholder, placeholder_or_list
from ..locale import format_time
from .middleware import static_error_page_handler, tab_order_scope


logger = logging.getLogger(__name__)

TEMPLATE_GLOBALS = {
    "form_for": listed_form,
    "error_messages_for": error_messages_for,
    "in_euros": views.in_euros,
    "number_to_currency": views.number_to_currency,
    "logged_in": views.logged_in,
    "logged_in_only": views.logged_in_only,
    "public_only": views.public_only,
    "placeholder": placeholder,
    "ph": ph,
    "phf": phf,
    "phu": phu,
    "pbs": pbs,
    "placeholder_or_list": placeholder_or_list,
}

TEMPLATE_FILTERS = {
    "in_euros": views.in_euros,
    "to_sentence": extensions.to_sentence,
    "to_url": extensions.to_url,
    "humanize": extensions.humanize,
    "html_list": extensions.to_html_list,
    "format_time": format_time,
}


def install_helpers(env: Environment) -> Environment:
    env.globals.update(TEMPLATE_GLOBALS)
    env.filters.update(TEMPLATE_FILTERS)
    return env


def setup(app: FastAPI, templates: Optional[Jinja2Templates] = None) -> FastAPI:
    """Wire the toolbox into ``app``.

    - every request gets its own tab order
    - 404 and 422 errors are answered with the static pages in ``PUBLIC_DIR``
    - the helpers become globals and filters of ``templates``
    """
    app.middleware("http")(tab_order_scope)
    app.add_exception_handler(StarletteHTTPException, static_error_page_handler)
    if templates is not None:
        install_helpers(templates.env)
    logger.debug(f"Toolbox installed on {app.title}")
    return app
