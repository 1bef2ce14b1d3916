"""
Record self-validation adapter.

Any object with a `validate(*args)` method that returns `None` or an error is
an `EvaluableStruct`. `struct()` calls that method and hands back whatever it
returned; there is no field inspection or rule engine behind it.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class EvaluableStruct(Protocol):
    """A record that knows how to validate itself."""

    def validate(self, *args: Any) -> Optional[Exception]:
        ...


@runtime_checkable
class Validator(Protocol):
    def struct(self, record: EvaluableStruct) -> Optional[Exception]:
        ...


class DefaultValidator:
    """The stock `Validator`: delegate to the record's own `validate()`."""

    def struct(self, record: EvaluableStruct) -> Optional[Exception]:
        if not isinstance(record, EvaluableStruct):
            raise TypeError(f"{type(record).__name__} has no validate() method")
        return record.validate()


_default = DefaultValidator()


def struct(record: EvaluableStruct) -> Optional[Exception]:
    """Validate `record` with the shared `DefaultValidator`."""
    return _default.struct(record)
