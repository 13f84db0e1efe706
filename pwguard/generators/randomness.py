"""
Secure Randomness
==================

Thin wrappers over the :mod:`secrets` CSPRNG. Every index is drawn with
``secrets.randbelow``, which rejection-samples and is therefore free of
modulo bias for any pool size.

The underlying source is process-wide and thread-safe; failures are
fatal and propagate unchanged.
"""

from __future__ import annotations

import secrets
from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")


def secure_randbelow(upper: int) -> int:
    """Uniform integer in ``[0, upper)``."""
    return secrets.randbelow(upper)


def secure_choice(pool: Sequence[T]) -> T:
    """Uniform element of a non-empty *pool*."""
    return pool[secure_randbelow(len(pool))]


def secure_shuffle(items: MutableSequence[T]) -> None:
    """Fisher-Yates shuffle of *items* in place."""
    for i in range(len(items) - 1, 0, -1):
        j = secure_randbelow(i + 1)
        items[i], items[j] = items[j], items[i]
