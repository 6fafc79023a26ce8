"""Listed form builder with inline error reporting and page-wide tab order."""
from .builder import ListedFormBuilder
from .context import FormContext, TabOrder, current_tab_order, page_render
from .errors import ManyErrors, NoErrors, SingleError, ValidationErrorSet, error_set
from .helpers import error_messages_for, listed_form
from .renderer import FieldKind, FieldOptions, render_field, render_row

__all__ = [
    "FieldKind",
    "FieldOptions",
    "FormContext",
    "ListedFormBuilder",
    "ManyErrors",
    "NoErrors",
    "SingleError",
    "TabOrder",
    "ValidationErrorSet",
    "current_tab_order",
    "error_messages_for",
    "error_set",
    "listed_form",
    "page_render",
    "render_field",
    "render_row",
]
