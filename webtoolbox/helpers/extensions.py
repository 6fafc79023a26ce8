"""Small string, collection and time helpers.

These are plain functions over the built-in types; nothing here patches
``str``, ``list`` or ``dict``.
"""
import re
from datetime import datetime
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from markupsafe import Markup

from ..core.markup import to_attributes


# -- strings -----------------------------------------------------------------

def to_url(text: str) -> str:
    """Turn a title into its-title-using-dashes.

        to_url("Bed & Breakfast") # => "bed-and-breakfast"
    """
    result = text.lower()
    result = re.sub(r"['\"]", "", result)
    result = result.replace("&", "and")
    result = result.replace("€", "EUR")
    result = re.sub(r"\W", " ", result, flags=re.ASCII)
    result = re.sub(r" +", "-", result)
    return result.strip("-")


def humanize(name: Any) -> str:
    """``"post_title"`` -> ``"Post title"``, ``"author_id"`` -> ``"Author"``."""
    text = str(name)
    if text.endswith("_id"):
        text = text[:-3]
    text = text.replace("_", " ").strip()
    return text[:1].upper() + text[1:].lower()


# -- sequences ---------------------------------------------------------------

def to_sentence(items: Iterable[Any], connector: str = "and", skip_last_comma: bool = True) -> str:
    """Join items into a sentence.

        to_sentence(["a", "b", "c"])                 # => "a, b and c"
        to_sentence(["a", "b"], connector="en")      # => "a en b"
        to_sentence(["a", "b", "c"], skip_last_comma=False)  # => "a, b, and c"
    """
    words = [str(item) for item in items]
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f"{words[0]} {connector} {words[1]}"
    last_comma = "" if skip_last_comma else ","
    return f"{', '.join(words[:-1])}{last_comma} {connector} {words[-1]}"


def to_html_list(items: Sequence[Any], type: Optional[str] = "ol", **attributes: Any) -> Optional[Markup]:
    """Wrap every item in ``<li>`` and the lot in an ``ol`` (or ``ul``).

    Returns ``None`` for an empty sequence.
    """
    if type is None:
        raise ValueError("List type is required")
    if not items:
        return None
    lines = [Markup("<{}{}>\n").format(Markup(type), to_attributes(attributes))]
    lines.extend(Markup("\t<li>{}</li>\n").format(item) for item in items)
    lines.append(Markup("</{}>\n").format(Markup(type)))
    return Markup("").join(lines)


def except_items(items: Iterable[Any], *excluded: Any) -> List[Any]:
    return [item for item in items if item not in excluded]


# -- mappings ----------------------------------------------------------------

def dict_to_html_list(mapping: Mapping[Any, Any], **attributes: Any) -> Optional[Markup]:
    """Render a mapping as a ``<dl>`` with a ``dt``/``dd`` pair per entry."""
    if not mapping:
        return None
    lines = [Markup("<dl{}>\n").format(to_attributes(attributes))]
    lines.extend(Markup("\t<dt>{}</dt>\n\t<dd>{}</dd>\n").format(k, v) for k, v in mapping.items())
    lines.append(Markup("</dl>\n"))
    return Markup("").join(lines)


def except_keys(mapping: Mapping[str, Any], *keys: str) -> dict:
    return {k: v for k, v in mapping.items() if str(k) not in keys}


def only_keys(mapping: Mapping[str, Any], *keys: str) -> dict:
    return {k: v for k, v in mapping.items() if str(k) in keys}


def to_select_options(mapping: Mapping[Any, Any]) -> List[Tuple[Any, Any]]:
    """``{1: "b", 0: "a"}`` -> ``[("a", 0), ("b", 1)]``, sorted by key."""
    return [(mapping[key], key) for key in sorted(mapping)]


# -- time and numbers --------------------------------------------------------

def _now_for(moment: datetime, now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now(moment.tzinfo)


def is_future(moment: datetime, now: Optional[datetime] = None) -> bool:
    return moment > _now_for(moment, now)


def is_past(moment: datetime, now: Optional[datetime] = None) -> bool:
    return moment <= _now_for(moment, now)


def days_ago(moment: datetime, now: Optional[datetime] = None) -> float:
    """Number of days ``moment`` lies in the past, 0 for future moments."""
    now = _now_for(moment, now)
    if moment > now:
        return 0
    return (now - moment).total_seconds() / 86400


def in_range(value: Any, bounds: Any) -> bool:
    return value in bounds


# -- patterns ----------------------------------------------------------------

def _email_pattern() -> "re.Pattern[str]":
    # RFC822 address grammar, after Cal Henderson's PHP version
    qtext = r"[^\x0d\x22\x5c\x80-\xff]"
    dtext = r"[^\x0d\x5b-\x5d\x80-\xff]"
    atom = r"[^\x00-\x20\x22\x28\x29\x2c\x2e\x3a-\x3c\x3e\x40\x5b-\x5d\x7f-\xff]+"
    quoted_pair = r"\x5c[\x00-\x7f]"
    domain_literal = rf"\x5b(?:{dtext}|{quoted_pair})*\x5d"
    quoted_string = rf"\x22(?:{qtext}|{quoted_pair})*\x22"
    sub_domain = rf"(?:{atom}|{domain_literal})"
    word = rf"(?:{atom}|{quoted_string})"
    domain = rf"{sub_domain}(?:\x2e{sub_domain})*"
    local_part = rf"{word}(?:\x2e{word})*"
    return re.compile(rf"\A{local_part}\x40{domain}\Z")


EMAIL = _email_pattern()
URL = re.compile(r"^(http|https)://[a-z0-9]+([\-.][a-z0-9]+)*\.[a-z]{2,5}(:[0-9]{1,5})?(/.*)?$", re.IGNORECASE)
USERNAME = re.compile(r"\A\w{3,16}\Z", re.IGNORECASE | re.ASCII)
