"""
grantmatch primitive matcher.

Decides whether one required value is satisfied by one permission value.
Permissions may be plain values, wildcards, or combinator sequences:

- ``[ANY, p1, p2, ...]`` matches when the requirement matches any ``p``.
- ``[MANY, p1, p2, ...]`` matches when every element of the requirement
  (a scalar counts as a one-element list) matches at least one ``p``.

Combinator heads may also be written as text (``"any"``, ``"many"``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .config import get_settings
from .values import (
    ANY,
    MANY,
    Label,
    is_marker,
    is_sequence,
    is_wildcard,
    lookup,
    same_value,
)


def match_value(required: Any, permission: Any) -> bool:
    """Test a single required value against a single permission value.

    Rules are tried in order and the first that applies decides:

    * Either side is a wildcard (``WILDCARD`` or ``"_"``): allowed.
    * Both sides are structurally identical: allowed.
    * ``[ANY]`` or an empty list: denied.
    * A label requirement and a text permission with the same name: allowed.
    * ``ANY`` / ``MANY`` combinators as described in the module docstring.
    * Two plain sequences of equal length: every position must match.
    * Two mappings: every key of the requirement must match the
      permission's value under the same key.
    * Anything else: denied.

    Never raises.

    Args:
        required: The value the operation needs.
        permission: The value the policy grants.

    Returns:
        True if the permission satisfies the requirement.
    """
    if is_wildcard(required) or is_wildcard(permission):
        return True

    if same_value(required, permission):
        return True

    if is_sequence(permission):
        if not permission or (len(permission) == 1 and permission[0] == ANY):
            return False

    # Directional: a text requirement never matches a label permission.
    if isinstance(required, Label) and isinstance(permission, str):
        if required.name == permission:
            return True

    if is_sequence(permission):
        head, rest = permission[0], permission[1:]
        if is_marker(head, ANY):
            return any(match_value(required, p) for p in rest)
        if is_marker(head, MANY) and get_settings().enable_many:
            return _match_many(required, rest)
        if is_sequence(required) and len(required) == len(permission):
            return all(match_value(r, p) for r, p in zip(required, permission))
        return False

    if isinstance(required, Mapping) and isinstance(permission, Mapping):
        return all(
            match_value(value, lookup(permission, key))
            for key, value in required.items()
        )

    return False


def _match_many(required: Any, permissions: Any) -> bool:
    if not permissions:
        return False
    elements = required if is_sequence(required) else [required]
    return all(
        any(match_value(element, p) for p in permissions)
        for element in elements
    )
