from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..helpers.extensions import humanize


BASE = "base"


class Errors:
    """Validation messages of one record, per attribute, in the order added.

    ``on(field)`` mirrors what form rows expect: ``None`` without errors, the
    message itself for a single error and a list for several.
    """

    def __init__(self) -> None:
        self._messages: Dict[str, List[str]] = {}

    def add(self, field: str, message: str) -> None:
        self._messages.setdefault(str(field), []).append(message)

    def add_to_base(self, message: str) -> None:
        self.add(BASE, message)

    def on(self, field: str) -> Union[None, str, List[str]]:
        messages = self._messages.get(str(field))
        if not messages:
            return None
        if len(messages) == 1:
            return messages[0]
        return list(messages)

    def on_base(self) -> List[str]:
        return list(self._messages.get(BASE, []))

    @property
    def count(self) -> int:
        return sum(len(m) for m in self._messages.values())

    def clear(self) -> None:
        self._messages.clear()

    def is_empty(self) -> bool:
        return self.count == 0

    def full_messages(self) -> List[str]:
        return [message if field == BASE else f"{humanize(field)} {message}" for field, message in self]

    def __contains__(self, field: object) -> bool:
        return bool(self._messages.get(str(field)))

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        for field, messages in self._messages.items():
            for message in messages:
                yield field, message

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return f"Errors({self._messages!r})"

    def first(self, field: str) -> Optional[str]:
        messages = self._messages.get(str(field))
        return messages[0] if messages else None
