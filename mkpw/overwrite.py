"""
Minimum-count correction.

The initial fill draws every position from the merged pool, which keeps
the password uniform but does not promise that, say, a one-symbol
"other" pool shows up at all. This phase picks distinct positions, one
per required occurrence, and rewrites each from the owning classifier's
own pool.
"""

from __future__ import annotations

from .config import Classifier, PasswordSpec
from .logger import CTX, get_logger
from .pool import effective_candidates
from .random_source import RandomSource

log = get_logger(CTX.OVERWRITE)


def unique_positions(count: int, length: int, rng: RandomSource) -> list[int]:
    """
    Draw `count` distinct indexes from [0, length), in draw order.

    Rejection sampling into an insertion-ordered dict; count <= length
    keeps the expected number of retries small.
    """
    if count > length:
        raise ValueError(f"Cannot draw {count} distinct positions from {length}")

    positions: dict[int, None] = {}
    while len(positions) < count:
        positions[rng.randrange(0, length)] = None
    return list(positions)


def partition_positions(
    positions: list[int],
    classifiers: list[Classifier],
) -> list[list[int]]:
    """
    Hand out `positions` to `classifiers` in order: the first classifier
    takes the first `minimum_count` entries, the next one the following
    entries, and so on. No position is given out twice.
    """
    parts: list[list[int]] = []
    offset = 0
    for classifier in classifiers:
        parts.append(positions[offset : offset + classifier.minimum_count])
        offset += classifier.minimum_count
    return parts


def replace_characters(
    password: list[str],
    pool: list[str],
    indexes: list[int],
    rng: RandomSource,
) -> None:
    for index in indexes:
        if index >= len(password):
            # Positions are drawn from [0, len(password)); reaching this
            # means the spec changed between validation and generation.
            raise IndexError(
                f"Index out of range: index {index} is greater than or equal to "
                f"password length {len(password)}"
            )
        password[index] = rng.choice(pool)


def overwrite_to_meet_minimum_count(
    password: list[str],
    spec: PasswordSpec,
    rng: RandomSource,
) -> None:
    """
    Rewrite positions of `password` in place so that every classifier of
    `spec` owns at least its minimum count of them.

    Partition order is uppercase, lowercase, number, symbol, then others
    in declaration order. It decides which obligation claims which
    position, not where the positions are.
    """
    classifiers = [classifier for _name, _index, classifier in spec.classifiers()]

    # Validation already guarantees total <= length; the clamp keeps the
    # draw in range for callers that skipped it.
    overwrite_count = min(len(password), spec.total_minimum_count)
    positions = unique_positions(overwrite_count, len(password), rng)
    log.debug("Overwriting %d of %d positions", overwrite_count, len(password))

    for classifier, indexes in zip(classifiers, partition_positions(positions, classifiers)):
        if not indexes:
            continue
        pool = effective_candidates(classifier, spec.exclude_similar)
        replace_characters(password, pool, indexes, rng)
