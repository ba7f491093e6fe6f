from .access import filter_access
from .accumulator import (
    AccumulatorState,
    CommentAccumulator,
    collect_doc_entries,
    iter_doc_entries,
)
from .classifier import DeclarationClassifier, DeclarationRule, classify

__all__ = [
    "AccumulatorState",
    "CommentAccumulator",
    "DeclarationClassifier",
    "DeclarationRule",
    "classify",
    "collect_doc_entries",
    "filter_access",
    "iter_doc_entries",
]
