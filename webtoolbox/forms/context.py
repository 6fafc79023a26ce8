"""Form rendering state: the bound object and the page-wide tab order.

Tab indexes have to keep counting across every form on a page, but must never
leak from one page render into the next. A :class:`TabOrder` is therefore
bound to the current page render through a context variable; request
middleware (or :func:`page_render` directly) opens a fresh one per render.
"""
import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


logger = logging.getLogger(__name__)


class TabOrder:
    """Strictly increasing tab index counter, starting at 1."""

    def __init__(self) -> None:
        self._last = 0

    @property
    def last(self) -> int:
        return self._last

    def next(self) -> int:
        self._last += 1
        return self._last


_current_tab_order: ContextVar[Optional[TabOrder]] = ContextVar("webtoolbox_tab_order", default=None)


def current_tab_order() -> Optional[TabOrder]:
    return _current_tab_order.get()


@contextmanager
def page_render() -> Iterator[TabOrder]:
    """Scope one page render; every form created inside shares its tab order.

    Nested calls reuse the outer tab order so a partial rendered inside a page
    keeps counting where the page left off.
    """
    existing = _current_tab_order.get()
    if existing is not None:
        yield existing
        return

    tab_order = TabOrder()
    token = _current_tab_order.set(tab_order)
    try:
        yield tab_order
    finally:
        _current_tab_order.reset(token)
        logger.debug(f"Page render finished after {tab_order.last} tab indexes")


@dataclass
class FormContext:
    """One in-progress form: the bound object, its name, and the tab order.

    Without an explicit ``tab_order`` the active page render's counter is
    used; outside of any page render the form gets a counter of its own.
    """

    object_name: str
    object: Any = None
    tab_order: TabOrder = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not self.object_name:
            raise ValueError("object_name is required")
        if self.tab_order is None:
            self.tab_order = current_tab_order() or TabOrder()

    def next_tabindex(self) -> int:
        return self.tab_order.next()

    def field_dom_id(self, field_id: str) -> str:
        return f"{self.object_name}_{field_id}"

    def field_name(self, field_id: str) -> str:
        return f"{self.object_name}[{field_id}]"

    def value_of(self, field_id: str) -> Any:
        if self.object is None:
            return None
        if isinstance(self.object, dict):
            return self.object.get(field_id)
        return getattr(self.object, field_id, None)
