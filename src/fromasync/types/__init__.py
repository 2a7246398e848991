from fromasync.types.indexable import Indexable
from fromasync.types.missing import MISSING, Missing, is_missing, not_missing

__all__ = (
    "MISSING",
    "Indexable",
    "Missing",
    "is_missing",
    "not_missing",
)
