from __future__ import annotations
import typing
import logging
import numpy as np
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)

SeedLike = Union[None, int, np.random.Generator]

_SEED_MASK = 0xFFFF_FFFF_FFFF_FFFF


def _resolve_rng(seed: SeedLike) -> np.random.Generator:
    """
    an int seed gives a fresh reproducible generator, an existing generator is
    used (and advanced) as is, and None draws a fresh one from os entropy.
    nothing is shared between calls unless the caller shares a generator.
    """
    if isinstance(seed, np.random.Generator):
        logger.debug("sampling with injected generator")
        return seed
    logger.debug("sampling with %s", "entropy" if seed is None else f"seed {seed}")
    if seed is not None:
        # numpy only takes non-negative seeds; fold any int into 64 bits
        seed = seed & _SEED_MASK
    return np.random.default_rng(seed)


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def each(self, action: Action[T]) -> 'Enumerable[T]':
        """
        performs the specified action on each element, in order, for side-effects.
        returns the original enumerable to allow chaining.
        """
        def run(item, _):
            action(item)
            return None
        self._enumerable.reduce(run, None)
        return self._enumerable

    for_each = each

    def pipe(self, func: Callable[..., U], *args, **kwargs) -> U:
        """
        pipes the enumerable object into an external function. enables custom, chainable operations.
        example: .pipe(my_custom_report, title='my data')
        """
        return func(self._enumerable, *args, **kwargs)

    # --- sampling ---

    def random(self, seed: SeedLike = None) -> T:
        """uniformly pick one element"""
        data = self._enumerable._get_data()
        if not data: raise EmptySequenceError('random')
        rng = _resolve_rng(seed)
        return data[int(rng.integers(0, len(data)))]

    def shuffle(self, seed: SeedLike = None) -> 'Enumerable[T]':
        """new sequence holding the elements in a fisher-yates permutation"""
        from ..enumerable import Enumerable
        shuffled = self._enumerable.to.list()
        rng = _resolve_rng(seed)
        for i in range(len(shuffled) - 1, 0, -1):
            j = int(rng.integers(0, i + 1))
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return Enumerable(shuffled)

    def sample(self, count: int, replace: bool = False, seed: SeedLike = None) -> 'Enumerable[T]':
        """random sampling; without replacement the count is capped at the length"""
        from ..enumerable import Enumerable
        if count < 0: raise ValueError("sample count must be non-negative")
        data = self._enumerable._get_data()
        if not data or count == 0: return Enumerable([])
        rng = _resolve_rng(seed)
        size = count if replace else min(count, len(data))
        # pick indices, not elements, so elements keep their own python types
        indices = rng.choice(len(data), size=size, replace=replace)
        return Enumerable(data[int(i)] for i in indices)
