"""Placeholders for empty listings and missing values.

    placeholder()                   # <div class="placeholder">Er is niets om weer te geven.</div>
    placeholder("Niets")            # <div class="placeholder">Niets</div>
    placeholder("Niets", "span")    # <span class="placeholder">Niets</span>
    placeholder_for(post.title)     # the escaped title, or <span class="placeholder">Niet opgegeven</span>
"""
from typing import Any, Callable, Iterable, Mapping, Optional

from markupsafe import Markup, escape

from ..core.markup import content_tag, tag as empty_tag, to_attributes


DEFAULT_LABEL = "Er is niets om weer te geven."
DEFAULT_MISSING_LABEL = "Niet opgegeven"
DEFAULT_LIST_PLACEHOLDER = "Nothing found."
BLANK_SLATE_PATH = "/images/blank-slate-{name}.png"


def _blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return len(value) == 0
    except TypeError:
        return False


def placeholder(label: Optional[str] = None, tag: str = "div", class_: str = "placeholder", **attributes: Any) -> Markup:
    attrs = {"class": class_}
    attrs.update(attributes)
    return content_tag(tag, label if label is not None else DEFAULT_LABEL, attrs)


ph = placeholder


def placeholder_for(value: Any, label: str = DEFAULT_MISSING_LABEL, tag: str = "span", **attributes: Any) -> Markup:
    """The escaped value, or a placeholder when it is blank."""
    if _blank(value):
        return placeholder(label, tag=tag, **attributes)
    return escape(value)


phf = placeholder_for


def placeholder_unless(condition: Any, render: Callable[[], Any], *args: Any, **kwargs: Any) -> Markup:
    """``render()`` when ``condition`` holds, otherwise ``placeholder(*args, **kwargs)``."""
    if condition:
        return escape(render())
    return placeholder(*args, **kwargs)


phu = placeholder_unless


def placeholder_with_blank_slate_unless(condition: Any, name: str, render: Callable[[], Any]) -> Markup:
    """``render()`` when ``condition`` holds, otherwise an example image of what would be there."""
    if condition:
        return escape(render())
    return _image(name)


def _image(name: str) -> Markup:
    return empty_tag("img", {"src": BLANK_SLATE_PATH.format(name=name), "alt": f"Voorbeeld van {name}"})


pbs = placeholder_with_blank_slate_unless


def _list_item(item: Any) -> Markup:
    return content_tag("li", item) + Markup("\n")


def placeholder_or_list(
    collection: Iterable[Any],
    render: Optional[Callable[[Any], Any]] = None,
    list_tag: str = "ol",
    html_attributes: Optional[Mapping[str, Any]] = None,
    placeholder_label: str = DEFAULT_LIST_PLACEHOLDER,
    tag: str = "div",
    **placeholder_attributes: Any,
) -> Markup:
    """Render every item into a list, or a placeholder for an empty collection.

    Without ``render`` each item is wrapped in an ``<li>``.
    """
    items = list(collection) if collection is not None else []
    if not items:
        return ph(placeholder_label, tag=tag, **placeholder_attributes)

    if render is None:
        render = _list_item

    start = Markup("<{}{}>\n").format(Markup(list_tag), to_attributes(html_attributes))
    body = Markup("").join(escape(render(item)) for item in items)
    return start + body + Markup("</{}>\n").format(Markup(list_tag))
