"""
Random source resolution.

Matrix.random() never reaches for a hidden global generator. Callers pass
a seed or a numpy Generator, the same way the resampling code seeds
np.random.default_rng(seed) per call, so draws are reproducible in tests.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.exceptions import ValidationError


def resolve_rng(rng: np.random.Generator | int | None = None) -> np.random.Generator:
    """
    Return a numpy Generator for the given seed or generator.

    Args:
        rng: None for a fresh generator seeded from OS entropy, an int
            seed, or an existing Generator (returned as-is so the caller's
            stream advances)

    Returns:
        numpy.random.Generator

    Raises:
        ValidationError: If rng is none of the accepted kinds, or is a
            negative seed
    """
    if rng is None:
        return np.random.default_rng()
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        if rng < 0:
            raise ValidationError(f"rng: seed must be non-negative, got {rng}")
        return np.random.default_rng(rng)
    if isinstance(rng, np.random.Generator):
        return rng
    raise ValidationError(
        f"rng: expected None, int seed or numpy.random.Generator, got {type(rng).__name__}"
    )
