"""
grantmatch: permission matching for typed requirement records.

Decides whether a requirement record is granted by an in-memory policy
value: primitive value matching with wildcards and ``any``/``many``
combinators, per-field record matching, and tag-keyed policy documents with
an ``admin`` override channel.
"""

from . import aggregate
from . import config
from . import dispatch
from . import primitive
from . import values
from .aggregate import match_spec
from .config import get_settings
from .dispatch import Decision, evaluate, match_tagged_policy
from .errors import GrantMatchError, MalformedRecordError
from .log import configure_logging
from .primitive import match_value
from .values import ADMIN, ANY, MANY, WILDCARD, CharSequence, Label, Record

__version__ = "1.0.0"

__all__ = [
    "aggregate",
    "config",
    "dispatch",
    "primitive",
    "values",
    "ADMIN",
    "ANY",
    "MANY",
    "WILDCARD",
    "CharSequence",
    "Decision",
    "GrantMatchError",
    "Label",
    "MalformedRecordError",
    "Record",
    "configure_logging",
    "evaluate",
    "get_settings",
    "match_spec",
    "match_tagged_policy",
    "match_value",
]
