"""Record key forms.

A mapping key is judged by its textual form, the way keys of a JSON object
are always text. A key whose text is a canonical non-negative integer
(``"0"``, ``"7"``, ``"42"``; never ``"01"``, ``"-1"``, ``"+1"`` or ``"1.0"``)
also has a numeric form, tried when the textual one does not match.

Forms are produced lazily, so the numeric form of a key is only built when
the textual form has already failed. Python refuses int/str conversions
past ``sys.get_int_max_str_digits()``; a form that cannot be built is
left out rather than raised.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Any

_CANONICAL_INDEX = re.compile(r"0|[1-9][0-9]*")


def is_canonical_index(text: str) -> bool:
    """Whether *text* spells a non-negative integer with no sign or padding.

    Examples:
        >>> is_canonical_index("0")
        True
        >>> is_canonical_index("01")
        False
        >>> is_canonical_index("-1")
        False
    """
    return _CANONICAL_INDEX.fullmatch(text) is not None


def key_forms(key: Any) -> Iterator[Any]:
    """Yield the forms of *key* to test, in order.

    ``str`` keys are used as-is and ``int`` keys are rendered as text, then
    canonical integer text gains its numeric form. A non-negative ``int``
    key is its own numeric form. Keys of other types have only themselves.

    Examples:
        >>> list(key_forms("a"))
        ['a']
        >>> list(key_forms(0))
        ['0', 0]
        >>> list(key_forms("01"))
        ['01']
    """
    if isinstance(key, bool) or not isinstance(key, (str, int)):
        yield key
        return
    if isinstance(key, int):
        text = _int_text(key)
        if text is not None:
            yield text
        if key >= 0:
            yield key
        return
    yield key
    if is_canonical_index(key):
        number = _text_int(key)
        if number is not None:
            yield number


def _int_text(key: int) -> str | None:
    try:
        return str(key)
    except ValueError:
        return None


def _text_int(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None
