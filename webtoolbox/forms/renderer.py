"""Form row rendering.

A form row is one ``<li>`` holding a label, the input control, the inline
error message for the field and an optional description::

    <li class="with_error">
      <label for="post_title">Title</label>
      <input type="text" id="post_title" name="post[title]" tabindex="1" value="" />
      <div class="with_error">can't be blank</div>
      <small>Shown on the front page</small>
    </li>

Check boxes and radio buttons are rendered as "inline" rows instead, where the
label wraps the control and the row gets the extra ``option`` class::

    <li class="option">
      <label><input type="checkbox" id="user_admin" name="user[admin]" value="1" tabindex="2" /> Admin</label>
    </li>
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

from markupsafe import Markup

from ..core.markup import content_tag
from ..helpers.extensions import humanize
from .context import FormContext
from .controls import default_controls
from .errors import errors_for, format_errors


# Renders the bare control for a field from its (tabindex-enriched) attributes.
ControlRenderer = Callable[[FormContext, str, Dict[str, Any]], Markup]


class FieldKind(str, Enum):
    LABELED = "labeled"
    INLINE = "inline"


@dataclass
class FieldOptions:
    """Everything a caller can say about one field besides its name."""

    label: Optional[str] = None
    description: Optional[str] = None
    attributes: Dict[str, Any] = field(default_factory=dict)
    tabindex: Optional[int] = None

    @classmethod
    def from_attributes(cls, attributes: Optional[Mapping[str, Any]]) -> "FieldOptions":
        """Split ``label``, ``description`` and ``tabindex`` out of a flat mapping."""
        if attributes is None:
            return cls()
        if not isinstance(attributes, Mapping):
            raise TypeError(f"attributes must be a mapping, got {type(attributes).__name__}")
        attrs = dict(attributes)
        return cls(
            label=attrs.pop("label", None),
            description=attrs.pop("description", None),
            tabindex=attrs.pop("tabindex", None),
            attributes=attrs,
        )


def _description_fragment(description: Optional[str]) -> Markup:
    if not description:
        return Markup("")
    return content_tag("small", description)


def _with_tabindex(context: FormContext, options: FieldOptions) -> Dict[str, Any]:
    attrs = dict(options.attributes)
    attrs["tabindex"] = options.tabindex if options.tabindex is not None else context.next_tabindex()
    return attrs


def render_row(
    context: FormContext,
    field_id: str,
    kind: FieldKind,
    options: FieldOptions,
    control: ControlRenderer,
) -> Markup:
    """Render a complete form row for ``field_id`` from structured options."""
    if not field_id:
        raise ValueError("field_id is required")
    kind = FieldKind(kind)

    human_label = options.label if options.label is not None else humanize(field_id)
    description = _description_fragment(options.description)
    attrs = _with_tabindex(context, options)
    klass, error_description = format_errors(errors_for(context.object, field_id))

    if kind is FieldKind.LABELED:
        inner = (
            content_tag("label", human_label, {"for": context.field_dom_id(field_id)})
            + control(context, field_id, attrs)
            + error_description
            + description
        )
        return content_tag("li", inner, {"class": klass})

    klass = " ".join(part for part in ("option", klass) if part)
    label = content_tag("label", control(context, field_id, attrs) + Markup(" ") + human_label)
    return content_tag("li", label + error_description + description, {"class": klass})


def render_field(
    context: FormContext,
    field_id: str,
    kind: FieldKind,
    label_override: Optional[str] = None,
    description: Optional[str] = None,
    attributes: Optional[Mapping[str, Any]] = None,
    *,
    control: Optional[ControlRenderer] = None,
) -> Markup:
    """Render one form row and advance the tab order.

    ``label`` and ``description`` keys in ``attributes`` are taken out of the
    mapping and win over ``label_override`` and ``description``. A
    ``tabindex`` already in ``attributes`` is kept and does not use up an
    index from the context.
    """
    options = FieldOptions.from_attributes(attributes)
    if options.label is None:
        options.label = label_override
    if options.description is None:
        options.description = description

    if control is None:
        control = default_controls().text_field
    return render_row(context, field_id, kind, options, control)
