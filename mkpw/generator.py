"""
High-level generation pipeline:

- Validate the spec.
- Assemble the merged candidate pool.
- Fill every position uniformly from that pool.
- Overwrite positions to meet each classifier's minimum count.
- Join the clusters into the final string.
"""

from __future__ import annotations

from .config import PasswordSpec
from .errors import NoCandidates
from .logger import CTX, get_logger
from .overwrite import overwrite_to_meet_minimum_count
from .pool import candidates
from .random_source import RandomSource, SystemRandomSource
from .validation import validate

log = get_logger(CTX.GENERATE)


def generate(
    spec: PasswordSpec | None = None,
    rng: RandomSource | None = None,
) -> str:
    """
    Generate one password for `spec` using `rng`.

    Defaults to PasswordSpec() and a fresh SystemRandomSource. Raises a
    PasswordMakerError subclass before any randomness is consumed if the
    spec cannot be satisfied; never returns a partial password.
    """
    spec = spec or PasswordSpec()
    rng = rng or SystemRandomSource()

    validate(spec)

    pool = candidates(spec)
    if spec.length > 0 and not pool:
        raise NoCandidates()

    password = [rng.choice(pool) for _ in range(spec.length)]
    overwrite_to_meet_minimum_count(password, spec, rng)

    log.debug("Generated password of %d clusters from %d candidates", spec.length, len(pool))
    return "".join(password)


def generate_many(
    spec: PasswordSpec | None,
    count: int,
    rng: RandomSource | None = None,
) -> list[str]:
    """
    Generate `count` independent passwords sharing one random source.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    spec = spec or PasswordSpec()
    rng = rng or SystemRandomSource()
    return [generate(spec, rng) for _ in range(count)]
