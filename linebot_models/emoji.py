"""LINE emoji embedded in text messages."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# Wire key, attribute and type of the fields left out when empty.
_OPTIONAL = (("length", "length", int), ("productId", "product_id", str), ("emojiId", "emoji_id", str))


def _read(data: Mapping[str, Any], key: str, kind: type) -> Any:
    value = data.get(key)
    if value is None:
        return kind()
    if isinstance(value, bool) or not isinstance(value, kind):
        raise TypeError(f"emoji field {key!r} must be of type {kind.__name__}")
    return value


@dataclass
class Emoji:
    """An emoji placed at a character index of a text."""

    index: int = 0
    product_id: str = ""
    emoji_id: str = ""
    length: int = 0

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"index": self.index}
        result.update({key: getattr(self, attr) for key, attr, _ in _OPTIONAL if getattr(self, attr)})
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Emoji:
        if not isinstance(data, Mapping):
            raise TypeError("emoji must be a JSON object")
        return cls(
            index=_read(data, "index", int),
            **{attr: _read(data, key, kind) for key, attr, kind in _OPTIONAL},
        )