"""
Candidate pool assembly: merge every classifier into the flat list the
initial fill samples from.
"""

from __future__ import annotations

from .config import Classifier, PasswordSpec
from .logger import CTX, get_logger

log = get_logger(CTX.CANDIDATES)

# Matched by exact string equality only. A multi-codepoint cluster that
# happens to contain one of these is never removed.
SIMILAR_CHARACTERS = frozenset({"i", "l", "1", "o", "0", "O"})

WHITESPACE = " "


def effective_candidates(classifier: Classifier, exclude_similar: bool) -> list[str]:
    """
    Candidates a single classifier actually contributes, after the
    similar-character filter.
    """
    if not exclude_similar:
        return list(classifier.candidates)
    return [c for c in classifier.candidates if c not in SIMILAR_CHARACTERS]


def candidates(spec: PasswordSpec) -> list[str]:
    """
    Return the merged candidate pool for `spec`.

    Order: lowercase, uppercase, number, symbol, others in declaration
    order, then the optional space. Duplicates are kept, so a candidate
    listed twice is twice as likely to be drawn.
    """
    merged: list[str] = []
    merged.extend(spec.lowercase.candidates)
    merged.extend(spec.uppercase.candidates)
    merged.extend(spec.number.candidates)
    merged.extend(spec.symbol.candidates)
    for classifier in spec.others:
        merged.extend(classifier.candidates)

    if spec.include_whitespace:
        merged.append(WHITESPACE)

    if spec.exclude_similar:
        merged = [c for c in merged if c not in SIMILAR_CHARACTERS]

    log.debug("Assembled %d candidates", len(merged))
    return merged
