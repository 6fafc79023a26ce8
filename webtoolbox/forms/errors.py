from dataclasses import dataclass
from typing import Any, Sequence, Tuple, Union

from markupsafe import Markup

from ..core.markup import content_tag
from ..helpers.extensions import to_sentence


ERROR_CLASS = "with_error"
ERROR_CONNECTOR = "en"


@dataclass(frozen=True)
class NoErrors:
    pass


@dataclass(frozen=True)
class SingleError:
    message: str


@dataclass(frozen=True)
class ManyErrors:
    messages: Tuple[str, ...]


ValidationErrorSet = Union[NoErrors, SingleError, ManyErrors]


def error_set(found: Union[None, str, Sequence[str]]) -> ValidationErrorSet:
    """Turn the raw result of ``errors.on(field)`` into a tagged error set.

    An empty sequence counts as no errors at all.
    """
    if found is None:
        return NoErrors()
    if isinstance(found, str):
        return SingleError(found)
    messages = tuple(str(m) for m in found)
    if not messages:
        return NoErrors()
    if len(messages) == 1:
        return SingleError(messages[0])
    return ManyErrors(messages)


def errors_for(obj: Any, field_id: str) -> ValidationErrorSet:
    """Errors of ``field_id`` on ``obj``; objects without ``errors`` have none."""
    errors = getattr(obj, "errors", None)
    if errors is None:
        return NoErrors()
    return error_set(errors.on(field_id))


def format_errors(errors: ValidationErrorSet) -> Tuple[Union[str, None], Markup]:
    """Return the row CSS class and the error container for an error set.

    ``(None, "")`` without errors, ``("with_error", <div class="with_error">..</div>)``
    otherwise.
    """
    if isinstance(errors, NoErrors):
        return None, Markup("")
    if isinstance(errors, SingleError):
        text = errors.message
    elif isinstance(errors, ManyErrors):
        text = to_sentence(errors.messages, connector=ERROR_CONNECTOR)
    else:
        raise TypeError(f"Unexpected error set: {errors!r}")
    return ERROR_CLASS, content_tag("div", text, {"class": ERROR_CLASS})
