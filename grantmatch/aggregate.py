"""
grantmatch aggregate matcher.

A permission spec grants a whole requirement record:

- ``WILDCARD`` or ``True`` grant everything.
- ``False``, ``None``, ``[]`` and ``{}`` grant nothing.
- A list of specs grants when any of them does (tried in order).
- A mapping, or another record used as a spec, grants when every field of
  the requirement matches the spec's value for that field.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .primitive import match_value
from .values import (
    WILDCARD,
    Label,
    as_record,
    is_record,
    is_sequence,
    lookup,
)


def match_spec(required: Any, spec: Any) -> bool:
    """Test a requirement record against a permission spec.

    Args:
        required: A dataclass instance or :class:`~grantmatch.values.Record`.
        spec: The permission spec (see module docstring).

    Returns:
        True if the spec grants the requirement.

    Raises:
        MalformedRecordError: When *required* is not a record.
    """
    record = as_record(required)
    return _match_fields(record.fields, spec)


def _match_fields(fields: Mapping, spec: Any) -> bool:
    if spec is True or (isinstance(spec, Label) and spec == WILDCARD):
        return True
    if spec is False or spec is None:
        return False

    if is_sequence(spec):
        # An empty list falls out of any() as a deny.
        return any(_match_fields(fields, alternative) for alternative in spec)

    if is_record(spec):
        spec = as_record(spec).fields

    if isinstance(spec, Mapping):
        if not spec or not fields:
            return False
        return all(
            match_value(value, lookup(spec, name))
            for name, value in fields.items()
        )

    return False
