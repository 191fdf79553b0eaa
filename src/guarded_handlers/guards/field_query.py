"""Resolution of the event queries named by guards."""

from __future__ import annotations

import inspect
from typing import Any, Hashable

from guarded_handlers.core.exceptions import InvalidGuardError


class _Missing:
    """Marker for a query the event cannot answer."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def query_attribute(event: Any, name: str) -> Any:
    """Return the value of the zero-argument query ``name`` on ``event``.

    Methods and functions found under ``name`` are called with no arguments;
    plain attributes and properties are returned as they are. An attribute
    the event does not have yields :data:`MISSING`.
    """

    value = getattr(event, name, MISSING)
    if value is MISSING:
        return MISSING
    if inspect.ismethod(value) or inspect.isbuiltin(value) or inspect.isfunction(value):
        return value()
    return value


class FieldQuery:
    """A field-mapping key: a plain field name or an accessor with arguments.

    ``"body"`` reads ``event.body``. ``("__getitem__", "foo")`` evaluates
    ``event["foo"]``; any accessor name may be used, e.g. ``("get", "foo")``.
    A ``LookupError`` raised by a parameterized accessor is read as an absent
    value.
    """

    __slots__ = ("name", "args")

    def __init__(self, name: str, args: tuple = ()) -> None:
        self.name = name
        self.args = args

    @classmethod
    def from_key(cls, key: Hashable) -> "FieldQuery":
        if isinstance(key, str) and key:
            return cls(key)
        if isinstance(key, tuple) and key and isinstance(key[0], str) and key[0]:
            return cls(key[0], tuple(key[1:]))
        raise InvalidGuardError(key, f"Bad field-mapping key: {key!r}")

    @property
    def parameterized(self) -> bool:
        return bool(self.args)

    def resolve(self, event: Any) -> Any:
        if not self.parameterized:
            return query_attribute(event, self.name)

        accessor = getattr(event, self.name, MISSING)
        if accessor is MISSING:
            return MISSING
        try:
            return accessor(*self.args)
        except LookupError:
            return MISSING

    def __repr__(self) -> str:
        if self.parameterized:
            return f"FieldQuery({self.name!r}, {self.args!r})"
        return f"FieldQuery({self.name!r})"


__all__ = ["FieldQuery", "MISSING", "query_attribute"]
