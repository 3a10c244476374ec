"""
grantmatch tagged dispatch.

A tagged policy document maps requirement tags (record classes, or their
text names) to permission specs::

    {
        "admin": {Page: {"action": Label("edit")}},
        Page: {"action": [ANY, Label("show"), Label("list")]},
        User: True,
    }

The reserved ``admin`` key is either ``True`` (grant everything) or another
tagged document that is consulted first. A miss under ``admin`` falls
through to the ordinary entry; it never denies on its own.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .aggregate import match_spec
from .config import get_settings
from .log import get_logger
from .values import ADMIN, ADMIN_KEYS, Record, as_record, lookup, tag_text

logger = get_logger(__name__)

SOURCE_ADMIN = "admin"
SOURCE_ADMIN_TAG = "admin_tag"
SOURCE_TAG = "tag"
SOURCE_NONE = "none"


@dataclass(frozen=True)
class Decision:
    """Outcome of dispatching a requirement through a tagged policy document.

    ``source`` names the entry that granted access: ``"admin"`` for the
    global override, ``"admin_tag"`` for the admin-scoped entry, ``"tag"``
    for the ordinary entry, or ``"none"`` when access was denied.
    """
    allowed: bool
    tag: str
    source: str
    reason: str


def evaluate(required: Any, doc: Mapping) -> Decision:
    """Dispatch *required* through *doc* and report how it resolved.

    Resolution order:
    1. ``admin: True`` grants unconditionally.
    2. An ``admin`` mapping is checked for the requirement's tag.
    3. The document's own entry for the tag decides; the reserved
       ``admin`` keys are never read as a tag entry, even when the
       document has no admin override.
    A missing entry denies.

    Args:
        required: A dataclass instance or :class:`~grantmatch.values.Record`.
        doc: The tagged policy document.

    Returns:
        A :class:`Decision`.

    Raises:
        MalformedRecordError: When *required* is not a record.
    """
    record = as_record(required)
    decision = _resolve(record, doc)
    if get_settings().trace_decisions:
        logger.debug(
            "policy decision",
            tag=decision.tag,
            allowed=decision.allowed,
            source=decision.source,
        )
    return decision


def match_tagged_policy(required: Any, doc: Mapping) -> bool:
    """Test a requirement record against a tagged policy document.

    See :func:`evaluate` for the resolution order.
    """
    return evaluate(required, doc).allowed


def _resolve(record: Record, doc: Any) -> Decision:
    tag = tag_text(record.tag)

    if not isinstance(doc, Mapping):
        return Decision(False, tag, SOURCE_NONE, "policy document is not a mapping")

    admin = lookup(doc, ADMIN)
    if admin is True:
        return Decision(True, tag, SOURCE_ADMIN, "admin override")
    if isinstance(admin, Mapping):
        if match_spec(record, lookup(admin, record.tag)):
            return Decision(True, tag, SOURCE_ADMIN_TAG, f"admin entry for {tag} matched")

    # The admin keys are reserved: they are skipped here even when the
    # document has no admin entry, so a record tagged "admin" never reads
    # the override channel as its own spec.
    entry = lookup(doc, record.tag, exclude=ADMIN_KEYS)
    if entry is None:
        return Decision(False, tag, SOURCE_NONE, f"no entry for {tag}; default deny")
    if match_spec(record, entry):
        return Decision(True, tag, SOURCE_TAG, f"entry for {tag} matched")
    return Decision(False, tag, SOURCE_NONE, f"entry for {tag} did not match")
