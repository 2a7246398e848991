from fromasync.helpers.materialize import MAX_SAFE_INTEGER, SourceTooLongError, from_async
from fromasync.helpers.methods import fromasyncmethod

__all__ = (
    "MAX_SAFE_INTEGER",
    "SourceTooLongError",
    "from_async",
    "fromasyncmethod",
)
