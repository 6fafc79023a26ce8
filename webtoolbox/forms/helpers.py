from typing import Any, Optional

from markupsafe import Markup

from ..core.markup import content_tag, join
from .builder import ListedFormBuilder


ERRORS_MESSAGE = "De volgende problemen moeten opgelost worden"


def listed_form(object_name: str, obj: Any = None, **kwargs: Any) -> ListedFormBuilder:
    """Start a listed form for ``obj``; extra keyword arguments go to the builder."""
    return ListedFormBuilder(object_name, obj, **kwargs)


def _pluralize(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def error_messages_for(
    *objects: Any,
    header_message: Optional[str] = None,
    message: Optional[str] = None,
    header_tag: str = "h3",
    id_: Optional[str] = "errors",
    class_: Optional[str] = "errors",
) -> Markup:
    """Summarize the errors of one or more bound objects.

    Only errors on base are listed; errors on fields are shown inline by the
    form rows. A header with the total number of errors is always included::

        <div id="errors" class="errors">
          <h3>Er heeft zich 1 fout voorgedaan.</h3>
        </div>

    Returns an empty string when none of the objects has errors.
    """
    objects = tuple(o for o in objects if o is not None)
    count = sum(o.errors.count for o in objects)
    if count == 0:
        return Markup("")

    if header_message is None:
        verb = "hebben" if count > 1 else "heeft"
        header_message = f"Er {verb} zich {_pluralize(count, 'fout', 'fouten')} voorgedaan."

    base_messages = [msg for o in objects for msg in o.errors.on_base()]
    if base_messages and message is None:
        message = ERRORS_MESSAGE

    contents = []
    if header_message:
        contents.append(content_tag(header_tag, header_message))
    if message:
        contents.append(content_tag("p", message))
    if base_messages:
        contents.append(content_tag("ul", join((content_tag("li", m) for m in base_messages))))
    return content_tag("div", join(contents), {"id": id_ or None, "class": class_ or None})
