"""Tag construction on top of MarkupSafe.

Everything returned from here is a :class:`markupsafe.Markup` instance, so
fragments can be concatenated freely without being escaped twice while plain
strings coming from users are always escaped.
"""
from typing import Any, Iterable, Mapping, Optional, Union

from markupsafe import Markup, escape


Content = Union[str, Markup, None]


def _attribute_name(name: str) -> str:
    # ``class_`` and ``for_`` are the usual Python-safe spellings
    return name[:-1] if name.endswith("_") else name


def to_attributes(attributes: Optional[Mapping[str, Any]]) -> Markup:
    """Render a mapping as HTML attributes in insertion order.

    Every pair is prefixed with a single space, so the result can be glued
    straight after a tag name::

        to_attributes({"id": "a", "class": "b"})  # ' id="a" class="b"'

    ``None`` and ``False`` values are left out; ``True`` renders the
    attribute name as its own value.
    """
    if not attributes:
        return Markup("")
    parts = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        name = _attribute_name(name)
        if value is True:
            value = name
        parts.append(Markup(' {}="{}"').format(name, value))
    return Markup("").join(parts)


def content_tag(name: str, content: Content = "", attributes: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Markup:
    attrs = dict(attributes or {})
    attrs.update(kwargs)
    inner = escape(content if content is not None else "")
    return Markup("<{0}{1}>{2}</{0}>").format(Markup(name), to_attributes(attrs), inner)


def tag(name: str, attributes: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Markup:
    """Self-closing tag, e.g. ``<input type="text" />``."""
    attrs = dict(attributes or {})
    attrs.update(kwargs)
    return Markup("<{0}{1} />").format(Markup(name), to_attributes(attrs))


def join(fragments: Iterable[Content], separator: str = "") -> Markup:
    return Markup(escape(separator)).join(escape(f) for f in fragments if f is not None)
