"""
grantmatch value algebra.

Policies and requirements are both plain in-memory Python values. Native
types cover most of the algebra (``str`` text, ``int``/``float`` numbers,
``bool``, ``None`` for an absent value, ``list``/``tuple`` sequences and
mappings); this module adds the symbolic pieces that have no native
counterpart, the record view of a requirement, type-strict equality, and the
single key-equivalence lookup shared by every matcher.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable

from .errors import MalformedRecordError
from .log import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Symbolic values
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Label:
    """A symbolic literal such as an action name (``Label("show")``).

    Labels are hashable and may be used as mapping keys. A label is never
    equal to a ``str``, but key lookups and the label/text rule of
    :func:`grantmatch.primitive.match_value` treat ``Label("x")`` and ``"x"``
    as the same name.
    """
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class CharSequence:
    """A character-array literal. Never equal to a ``str`` with the same text."""
    chars: str

    def __str__(self) -> str:
        return self.chars


WILDCARD = Label("_")
ANY = Label("any")
MANY = Label("many")
ADMIN = Label("admin")

ADMIN_KEYS: tuple[Any, ...] = (ADMIN, ADMIN.name)


# ---------------------------------------------------------------------------
# Shape predicates
# ---------------------------------------------------------------------------

def is_sequence(value: Any) -> bool:
    """True for the sequence variant (``list`` or ``tuple``), never for text."""
    return isinstance(value, (list, tuple))


def is_wildcard(value: Any) -> bool:
    """True for ``WILDCARD`` and for the literal text ``"_"``."""
    if isinstance(value, Label):
        return value.name == WILDCARD.name
    return isinstance(value, str) and value == WILDCARD.name


def is_marker(value: Any, marker: Label) -> bool:
    """True when *value* is the combinator *marker* as a label or as text."""
    if isinstance(value, Label):
        return value == marker
    return isinstance(value, str) and value == marker.name


def same_value(a: Any, b: Any) -> bool:
    """Structural, type-strict equality.

    Leaves must share their exact Python type (``1`` is not ``1.0``, ``True``
    is not ``1``). Lists and tuples are interchangeable and compare
    positionally; mappings compare key sets and values.
    """
    if is_sequence(a) and is_sequence(b):
        if len(a) != len(b):
            return False
        return all(same_value(x, y) for x, y in zip(a, b))
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b or not same_value(value, b[key]):
                return False
        return True
    if type(a) is not type(b):
        return False
    return a == b


# ---------------------------------------------------------------------------
# Key equivalence
# ---------------------------------------------------------------------------

def tag_text(tag: Any) -> str:
    """The canonical text form of a tag or key.

    Classes render as ``module.QualName``, labels as their name.
    """
    if isinstance(tag, type):
        return f"{tag.__module__}.{tag.__qualname__}"
    if isinstance(tag, Label):
        return tag.name
    return str(tag)


def key_forms(key: Any) -> list[Any]:
    """Every key under which *key* may be stored, in lookup order."""
    if isinstance(key, type):
        return [key, tag_text(key), key.__name__]
    if isinstance(key, Label):
        return [key, key.name]
    if isinstance(key, str):
        return [key, Label(key)]
    return [key, str(key)]


def lookup(mapping: Mapping, key: Any, exclude: Iterable[Any] = ()) -> Any:
    """Look *key* up in *mapping*, falling back to its equivalent forms.

    Returns ``None`` (the absent value) when no form is present. Candidate
    keys listed in *exclude* are never consulted.
    """
    excluded = tuple(exclude)
    for candidate in key_forms(key):
        if any(same_value(candidate, skip) for skip in excluded):
            continue
        if candidate in mapping:
            return mapping[candidate]
    return None


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Record:
    """A requirement record: a tag identifying its type plus named fields.

    Dataclass instances are converted to records automatically (the class is
    the tag); build a ``Record`` directly when the requirement has no class
    of its own, e.g. ``Record("Page", {"action": Label("show")})``.
    """
    tag: Any
    fields: Mapping = dataclasses.field(default_factory=dict)


def is_record(value: Any) -> bool:
    """True for a ``Record`` or a dataclass instance outside the value algebra."""
    if isinstance(value, Record):
        return True
    if isinstance(value, (Label, CharSequence)):
        return False
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def as_record(value: Any) -> Record:
    """Normalize *value* into a :class:`Record`.

    Raises:
        MalformedRecordError: When no tag or field mapping can be extracted.
    """
    if isinstance(value, Record):
        if value.tag is None:
            logger.warning("malformed record", reason="missing tag")
            raise MalformedRecordError("Record has no tag", value)
        try:
            hash(value.tag)
        except TypeError:
            logger.warning("malformed record", reason="unhashable tag")
            raise MalformedRecordError(
                f"Record tag must be hashable, got {type(value.tag).__name__}", value
            ) from None
        if not isinstance(value.fields, Mapping):
            logger.warning("malformed record", reason="fields not a mapping", tag=tag_text(value.tag))
            raise MalformedRecordError(
                f"Record fields must be a mapping, got {type(value.fields).__name__}", value
            )
        return value
    if is_record(value):
        fields = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
        return Record(type(value), fields)
    logger.warning("malformed record", type=type(value).__name__)
    raise MalformedRecordError(
        f"Expected a dataclass instance or Record, got {type(value).__name__}", value
    )
