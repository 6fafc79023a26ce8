"""Bare HTML input controls for a bound form.

Every control takes the form context, the field name and the attribute
mapping (already carrying its ``tabindex``) and returns the control markup
only; labels, errors and row structure are added by the renderer.
"""
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from markupsafe import Markup

from ..core.markup import content_tag, join, tag
from .context import FormContext


Choices = Union[Mapping[Any, Any], Iterable[Any]]


def _base_attributes(context: FormContext, field_id: str, input_type: Optional[str] = None) -> Dict[str, Any]:
    attrs: Dict[str, Any] = {}
    if input_type:
        attrs["type"] = input_type
    attrs["id"] = context.field_dom_id(field_id)
    attrs["name"] = context.field_name(field_id)
    return attrs


def _choice_pairs(choices: Choices) -> Iterable[Tuple[Any, Any]]:
    """Normalize choices to ``(label, value)`` pairs.

    Mappings are read as ``{label: value}``; sequences may hold pairs or bare
    values that double as their own label.
    """
    if isinstance(choices, Mapping):
        return list(choices.items())
    pairs = []
    for choice in choices:
        if isinstance(choice, (tuple, list)) and len(choice) == 2:
            pairs.append((choice[0], choice[1]))
        else:
            pairs.append((choice, choice))
    return pairs


class HtmlControls:
    """Default control renderer producing XHTML-style inputs."""

    def _input(self, input_type: str, context: FormContext, field_id: str, attributes: Mapping[str, Any]) -> Markup:
        attrs = _base_attributes(context, field_id, input_type)
        value = context.value_of(field_id)
        if value is not None:
            attrs["value"] = value
        attrs.update(attributes)
        return tag("input", attrs)

    def text_field(self, context: FormContext, field_id: str, attributes: Mapping[str, Any]) -> Markup:
        return self._input("text", context, field_id, attributes)

    def password_field(self, context: FormContext, field_id: str, attributes: Mapping[str, Any]) -> Markup:
        attrs = _base_attributes(context, field_id, "password")
        attrs.update(attributes)
        return tag("input", attrs)

    def email_field(self, context: FormContext, field_id: str, attributes: Mapping[str, Any]) -> Markup:
        return self._input("email", context, field_id, attributes)

    def number_field(self, context: FormContext, field_id: str, attributes: Mapping[str, Any]) -> Markup:
        return self._input("number", context, field_id, attributes)

    def date_field(self, context: FormContext, field_id: str, attributes: Mapping[str, Any]) -> Markup:
        return self._input("date", context, field_id, attributes)

    def file_field(self, context: FormContext, field_id: str, attributes: Mapping[str, Any]) -> Markup:
        attrs = _base_attributes(context, field_id, "file")
        attrs.update(attributes)
        return tag("input", attrs)

    def hidden_field(self, context: FormContext, field_id: str, attributes: Mapping[str, Any]) -> Markup:
        return self._input("hidden", context, field_id, attributes)

    def text_area(self, context: FormContext, field_id: str, attributes: Mapping[str, Any]) -> Markup:
        attrs = _base_attributes(context, field_id)
        attrs.update({"rows": 20, "cols": 40})
        attrs.update(attributes)
        value = context.value_of(field_id)
        return content_tag("textarea", "" if value is None else str(value), attrs)

    def check_box(
        self,
        context: FormContext,
        field_id: str,
        attributes: Mapping[str, Any],
        checked_value: str = "1",
        unchecked_value: str = "0",
    ) -> Markup:
        # the hidden input comes first so a checked box overrides it on submit
        hidden = tag("input", {"type": "hidden", "name": context.field_name(field_id), "value": unchecked_value})
        attrs = _base_attributes(context, field_id, "checkbox")
        attrs["value"] = checked_value
        value = context.value_of(field_id)
        if value is True or (value is not None and str(value) == checked_value):
            attrs["checked"] = "checked"
        attrs.update(attributes)
        return hidden + tag("input", attrs)

    def radio_button(self, context: FormContext, field_id: str, attributes: Mapping[str, Any], value: Any = None) -> Markup:
        attrs = _base_attributes(context, field_id, "radio")
        attrs["id"] = f"{attrs['id']}_{str(value).lower()}"
        attrs["value"] = value
        current = context.value_of(field_id)
        if current is not None and str(current) == str(value):
            attrs["checked"] = "checked"
        attrs.update(attributes)
        return tag("input", attrs)

    def select(self, context: FormContext, field_id: str, attributes: Mapping[str, Any], choices: Choices = ()) -> Markup:
        attrs = _base_attributes(context, field_id)
        attrs.update(attributes)
        current = context.value_of(field_id)
        options = []
        for label, value in _choice_pairs(choices):
            selected = current is not None and str(current) == str(value)
            options.append(content_tag("option", str(label), {"value": value, "selected": "selected" if selected else None}))
        return content_tag("select", Markup("\n") + join(options, "\n") + Markup("\n"), attrs)


_default = HtmlControls()


def default_controls() -> HtmlControls:
    return _default
