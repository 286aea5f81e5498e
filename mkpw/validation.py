from __future__ import annotations

from .config import PasswordSpec
from .errors import EmptyPoolWithMinimum, MinimumExceedsLength
from .logger import CTX, get_logger
from .pool import effective_candidates

log = get_logger(CTX.VALIDATE)


def validate(spec: PasswordSpec) -> None:
    """
    Check that `spec` can be satisfied, without drawing anything.

    Raises:
    - EmptyPoolWithMinimum if a classifier has nothing to offer (after the
      similar-character filter) but a positive minimum count.
    - MinimumExceedsLength if the minimum counts add up to more than
      `spec.length`.

    Negative lengths or counts are not a spec at all and raise ValueError.
    """
    if spec.length < 0:
        raise ValueError(f"length must be non-negative, got {spec.length}")

    for name, index, classifier in spec.classifiers():
        if classifier.minimum_count < 0:
            raise ValueError(
                f"{name}: minimum count must be non-negative, got {classifier.minimum_count}"
            )
        if classifier.minimum_count == 0:
            continue
        # Check the pool after the similar-character filter: the overwrite
        # pass samples from that filtered pool.
        if not effective_candidates(classifier, spec.exclude_similar):
            log.info("%s has no candidates but requires %d", name, classifier.minimum_count)
            raise EmptyPoolWithMinimum(name, classifier.minimum_count, index=index)

    total_minimum = spec.total_minimum_count
    if spec.length < total_minimum:
        log.info("Minimum total %d exceeds length %d", total_minimum, spec.length)
        raise MinimumExceedsLength(total_minimum, spec.length)
