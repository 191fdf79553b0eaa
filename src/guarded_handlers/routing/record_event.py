"""Attribute-style view over a decoded JSON event."""

from __future__ import annotations

from typing import Any, Mapping


class RecordEvent:
    """Expose the keys of a mapping as attributes.

    Guards read fields with attribute access, so ``{"body": "exit"}`` becomes
    an event whose ``body`` is ``"exit"``. Item access and ``get`` still reach
    the underlying mapping, which is what ``"[name]"`` keys in route files
    use.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        object.__setattr__(self, "_data", dict(data))

    def __getattr__(self, name: str) -> Any:
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("RecordEvent is read-only")

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def __repr__(self) -> str:
        return f"RecordEvent({self._data!r})"


__all__ = ["RecordEvent"]
