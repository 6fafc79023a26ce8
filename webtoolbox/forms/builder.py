"""The listed form builder.

Forms are laid out as ordered lists: every field becomes a list item with
label, control, inline errors and a description, and every control gets the
next tab index of the page. Fields are grouped with :meth:`ListedFormBuilder.fieldset`
(or a bare :meth:`ListedFormBuilder.list`), and buttons with
:meth:`ListedFormBuilder.button_group`.

In a Jinja2 template::

    {% set f = form_for("post", post) %}
    {% call f.fieldset("Post") %}
      {{ f.text_field("title") }}
      {{ f.text_area("body", description="Markdown allowed") }}
      {{ f.check_box("published") }}
    {% endcall %}
    {% call f.button_group() %}{{ f.submit() }}{% endcall %}
"""
from functools import partial
from typing import Any, Callable, Iterable, Optional, Union

from markupsafe import Markup, escape

from ..core.markup import content_tag, join
from ..helpers.extensions import humanize
from .context import FormContext, TabOrder
from .controls import Choices, HtmlControls, default_controls
from .renderer import FieldKind, FieldOptions, render_row


Body = Union[str, Markup, Iterable[Union[str, Markup]], Callable[[], Any], None]

DEFAULT_SUBMIT_LABEL = "Opslaan"
DEFAULT_SUBMIT_TITLE = "Wijzigingen opslaan"
DEFAULT_CANCEL_LABEL = "annuleren"
DEFAULT_CANCEL_SEPARATOR = "of"


def _body(body: Body) -> Markup:
    # Jinja's ``caller`` and other callables are rendered lazily
    if callable(body):
        body = body()
    if body is None:
        return Markup("")
    if isinstance(body, str):
        return escape(body)
    return join(body, "\n")


class ListedFormBuilder:
    def __init__(
        self,
        object_name: str,
        obj: Any = None,
        *,
        context: Optional[FormContext] = None,
        tab_order: Optional[TabOrder] = None,
        controls: Optional[HtmlControls] = None,
    ) -> None:
        self.context = context or FormContext(object_name, obj, tab_order)
        self.controls = controls or default_controls()

    @property
    def object(self) -> Any:
        return self.context.object

    @property
    def object_name(self) -> str:
        return self.context.object_name

    def _row(
        self,
        kind: FieldKind,
        control: Callable,
        field_id: str,
        label: Optional[str],
        description: Optional[str],
        tabindex: Optional[int],
        attributes: dict,
    ) -> Markup:
        options = FieldOptions(label=label, description=description, attributes=attributes, tabindex=tabindex)
        return render_row(self.context, field_id, kind, options, control)

    # -- labeled fields ------------------------------------------------------

    def text_field(self, field_id: str, label: Optional[str] = None, description: Optional[str] = None,
                   tabindex: Optional[int] = None, **attributes: Any) -> Markup:
        return self._row(FieldKind.LABELED, self.controls.text_field, field_id, label, description, tabindex, attributes)

    def password_field(self, field_id: str, label: Optional[str] = None, description: Optional[str] = None,
                       tabindex: Optional[int] = None, **attributes: Any) -> Markup:
        return self._row(FieldKind.LABELED, self.controls.password_field, field_id, label, description, tabindex, attributes)

    def email_field(self, field_id: str, label: Optional[str] = None, description: Optional[str] = None,
                    tabindex: Optional[int] = None, **attributes: Any) -> Markup:
        return self._row(FieldKind.LABELED, self.controls.email_field, field_id, label, description, tabindex, attributes)

    def number_field(self, field_id: str, label: Optional[str] = None, description: Optional[str] = None,
                     tabindex: Optional[int] = None, **attributes: Any) -> Markup:
        return self._row(FieldKind.LABELED, self.controls.number_field, field_id, label, description, tabindex, attributes)

    def date_field(self, field_id: str, label: Optional[str] = None, description: Optional[str] = None,
                   tabindex: Optional[int] = None, **attributes: Any) -> Markup:
        return self._row(FieldKind.LABELED, self.controls.date_field, field_id, label, description, tabindex, attributes)

    def file_field(self, field_id: str, label: Optional[str] = None, description: Optional[str] = None,
                   tabindex: Optional[int] = None, **attributes: Any) -> Markup:
        return self._row(FieldKind.LABELED, self.controls.file_field, field_id, label, description, tabindex, attributes)

    def text_area(self, field_id: str, label: Optional[str] = None, description: Optional[str] = None,
                  tabindex: Optional[int] = None, **attributes: Any) -> Markup:
        return self._row(FieldKind.LABELED, self.controls.text_area, field_id, label, description, tabindex, attributes)

    def select(self, field_id: str, choices: Choices, label: Optional[str] = None, description: Optional[str] = None,
               tabindex: Optional[int] = None, **attributes: Any) -> Markup:
        """Select box; the tab index always goes on the ``<select>``, never into ``choices``."""
        control = partial(self.controls.select, choices=choices)
        return self._row(FieldKind.LABELED, control, field_id, label, description, tabindex, attributes)

    # -- inline fields -------------------------------------------------------

    def check_box(self, field_id: str, label: Optional[str] = None, description: Optional[str] = None,
                  tabindex: Optional[int] = None, checked_value: str = "1", unchecked_value: str = "0",
                  **attributes: Any) -> Markup:
        control = partial(self.controls.check_box, checked_value=checked_value, unchecked_value=unchecked_value)
        return self._row(FieldKind.INLINE, control, field_id, label, description, tabindex, attributes)

    def radio_button(self, field_id: str, value: Any, label: Optional[str] = None, description: Optional[str] = None,
                     tabindex: Optional[int] = None, **attributes: Any) -> Markup:
        control = partial(self.controls.radio_button, value=value)
        return self._row(FieldKind.INLINE, control, field_id, label, description, tabindex, attributes)

    # -- other rows ----------------------------------------------------------

    def hidden_field(self, field_id: str, value: Any = None, **attributes: Any) -> Markup:
        """Hidden input wrapped in a ``<div>``; it takes no tab index."""
        if value is not None:
            attributes["value"] = value
        return content_tag("div", self.controls.hidden_field(self.context, field_id, attributes))

    def plain_row(self, label: Any, value: Any) -> Markup:
        """A read-only row: ``<li class="plain">`` with label and value spans."""
        return content_tag(
            "li",
            content_tag("span", label, {"class": "label"}) + content_tag("span", value, {"class": "value"}),
            {"class": "plain"},
        )

    def faux_row(self, field_id: str, label: Optional[str] = None) -> Markup:
        """A read-only row that still submits the current value through a hidden field."""
        value = self.context.value_of(field_id)
        return content_tag(
            "li",
            self.hidden_field(field_id)
            + content_tag("span", label if label is not None else humanize(field_id), {"class": "label"})
            + content_tag("span", "" if value is None else str(value), {"class": "value"}),
            {"class": "plain"},
        )

    # -- grouping ------------------------------------------------------------

    def list(self, body: Body = None, caller: Optional[Callable] = None) -> Markup:
        return Markup("<ol>\n") + _body(body if body is not None else caller) + Markup("\n</ol>\n")

    def fieldset(self, name: Optional[str] = None, body: Body = None, caller: Optional[Callable] = None) -> Markup:
        """``<fieldset>`` with a ``<legend>`` (unless ``name`` is blank) and an ``<ol>``."""
        out = Markup("<fieldset>\n")
        if name and str(name).strip():
            out += Markup("  ") + content_tag("legend", name) + Markup("\n")
        return out + self.list(body, caller) + Markup("</fieldset>\n")

    def form_tag(self, body: Body = None, action: str = "", method: str = "post",
                 caller: Optional[Callable] = None, **attributes: Any) -> Markup:
        attrs = {"action": action, "method": method, "id": f"{self.object_name}_form"}
        attrs.update(attributes)
        return content_tag("form", Markup("\n") + _body(body if body is not None else caller) + Markup("\n"), attrs)

    # -- buttons -------------------------------------------------------------

    def button(self, name: str, **attributes: Any) -> Markup:
        """Plain ``<button>`` with the next tab index unless one is given."""
        if attributes.get("tabindex") is None:
            attributes["tabindex"] = self.context.next_tabindex()
        if attributes.get("disabled"):
            attributes["disabled"] = "disabled"
        return content_tag("button", name, attributes)

    def submit(self, name: str = DEFAULT_SUBMIT_LABEL, **attributes: Any) -> Markup:
        attrs = {"type": "submit", "title": DEFAULT_SUBMIT_TITLE}
        attrs.update(attributes)
        return self.button(name, **attrs)

    def cancel_link(self, url: str = "index", label: str = DEFAULT_CANCEL_LABEL,
                    separator: str = DEFAULT_CANCEL_SEPARATOR, **attributes: Any) -> Markup:
        """`` of <a href="index" class="cancel">annuleren</a>``"""
        attrs = {"href": url, "class": "cancel"}
        attrs.update(attributes)
        return Markup(" {} ").format(separator) + content_tag("a", label, attrs)

    def button_group(self, body: Body = None, with_cancel: bool = True,
                     caller: Optional[Callable] = None, **cancel_options: Any) -> Markup:
        out = Markup('<div class="button_group">\n') + _body(body if body is not None else caller) + Markup("\n")
        if with_cancel:
            out += self.cancel_link(**cancel_options) + Markup("\n")
        return out + Markup("</div>\n")
