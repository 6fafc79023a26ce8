"""Mutable, validatable records on top of Pydantic models.

Pydantic models refuse to exist in an invalid state, but a form needs exactly
that: an object holding whatever the user typed plus the reasons it was
rejected. :class:`Record` keeps the raw attributes, runs the model's
validation on demand and translates Pydantic's errors into locale messages.
"""
import logging
from typing import Any, Dict, FrozenSet, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from ..locale import default_error_messages
from .errors import BASE, Errors


logger = logging.getLogger(__name__)

_NOT_A_NUMBER = {
    "int_parsing",
    "int_type",
    "int_from_float",
    "float_parsing",
    "float_type",
    "decimal_parsing",
    "decimal_type",
    "finite_number",
}

# pydantic error type -> (message key, context key holding the limit)
_LIMITS = {
    "string_too_short": ("too_short", "min_length"),
    "string_too_long": ("too_long", "max_length"),
    "too_short": ("too_short", "min_length"),
    "too_long": ("too_long", "max_length"),
    "greater_than": ("greater_than", "gt"),
    "greater_than_equal": ("greater_than_or_equal_to", "ge"),
    "less_than": ("less_than", "lt"),
    "less_than_equal": ("less_than_or_equal_to", "le"),
    "multiple_of": ("invalid", None),
}


def _fill(template: str, value: Any) -> str:
    if "%d" not in template:
        return template
    if isinstance(value, (int, float)):
        return template % value
    return template.replace("%d", str(value))


def translate_error(error: Mapping[str, Any], locale: Optional[str] = None) -> str:
    """Map one entry of ``ValidationError.errors()`` to a locale message."""
    messages = default_error_messages(locale)
    kind = error.get("type")
    ctx = error.get("ctx") or {}

    if kind == "missing" or error.get("input") is None:
        return messages["blank"]
    if kind in _NOT_A_NUMBER:
        return messages["not_a_number"]
    if kind in ("literal_error", "enum"):
        return messages["inclusion"]
    if kind == "string_pattern_mismatch":
        return messages["invalid"]
    if kind in _LIMITS:
        key, ctx_key = _LIMITS[kind]
        return _fill(messages[key], ctx.get(ctx_key)) if ctx_key else messages[key]
    if kind == "value_error" and "error" in ctx:
        return str(ctx["error"])
    # custom errors raised by the validation shortcuts carry their final message
    return error.get("msg") or messages["invalid"]


class Record:
    """A bound object for forms: raw attributes, ``errors`` and ``valid()``.

    Attributes of the wrapped model are read and written as plain attributes
    or by key. Names listed in the model's ``protected_attributes`` class
    variable are skipped by :meth:`update_attributes`.
    """

    def __init__(self, model: Type[BaseModel], **attributes: Any) -> None:
        object.__setattr__(self, "_model", model)
        object.__setattr__(self, "_attributes", self._defaults(model))
        object.__setattr__(self, "errors", Errors())
        object.__setattr__(self, "instance", None)
        for name, value in attributes.items():
            self[name] = value

    @staticmethod
    def _defaults(model: Type[BaseModel]) -> Dict[str, Any]:
        defaults: Dict[str, Any] = {}
        for name, field in model.model_fields.items():
            defaults[name] = None if field.is_required() else field.get_default(call_default_factory=True)
        return defaults

    @property
    def model(self) -> Type[BaseModel]:
        return self._model

    @property
    def protected_attributes(self) -> FrozenSet[str]:
        return frozenset(getattr(self._model, "protected_attributes", ()))

    @property
    def attributes(self) -> Dict[str, Any]:
        return dict(self._attributes)

    def __getattr__(self, name: str) -> Any:
        attributes = self.__dict__.get("_attributes", {})
        if name in attributes:
            return attributes[name]
        raise AttributeError(f"{type(self).__name__} for {self._model.__name__} has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._model.model_fields:
            self._attributes[name] = value
        else:
            object.__setattr__(self, name, value)

    def __getitem__(self, name: str) -> Any:
        return self._attributes[name]

    def __setitem__(self, name: str, value: Any) -> None:
        if name not in self._model.model_fields:
            raise KeyError(f"{self._model.__name__} has no field {name!r}")
        self._attributes[name] = value

    def valid(self) -> bool:
        """Validate the current attributes, refreshing ``errors`` and ``instance``."""
        self.errors.clear()
        data = {k: v for k, v in self._attributes.items() if v is not None or not self._model.model_fields[k].is_required()}
        try:
            instance = self._model.model_validate(data)
        except ValidationError as exc:
            object.__setattr__(self, "instance", None)
            for error in exc.errors():
                loc = error.get("loc") or ()
                field = str(loc[0]) if loc else BASE
                self.errors.add(field, translate_error(error))
            logger.debug(f"{self._model.__name__} invalid: {self.errors!r}")
            return False
        object.__setattr__(self, "instance", instance)
        return True

    def update_attributes(self, attributes: Mapping[str, Any]) -> bool:
        """Mass-assign ``attributes``, skipping protected ones, then validate."""
        protected = self.protected_attributes
        for name, value in attributes.items():
            if name in protected:
                if value != self._attributes.get(name):
                    logger.warning(f"Can't mass-assign protected attribute {name!r} on {self._model.__name__}")
                continue
            self[name] = value
        return self.valid()

    def __repr__(self) -> str:
        return f"<Record {self._model.__name__} {self._attributes!r}>"
