from fromasync.helpers import (
    MAX_SAFE_INTEGER,
    SourceTooLongError,
    from_async,
    fromasyncmethod,
)
from fromasync.types import (
    MISSING,
    Indexable,
    Missing,
    is_missing,
    not_missing,
)

__all__ = (
    "MAX_SAFE_INTEGER",
    "MISSING",
    "Indexable",
    "Missing",
    "SourceTooLongError",
    "from_async",
    "fromasyncmethod",
    "is_missing",
    "not_missing",
)
