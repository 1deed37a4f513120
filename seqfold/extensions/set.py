from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class SetAccessor(Generic[T]):
    """
    de-duplication in first-seen order. membership is checked by equality
    against the already kept keys, so unhashable elements and keys are fine.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def uniq_by(self, key_selector: KeySelector[T, K]) -> 'Enumerable[T]':
        """keep the first element for each distinct key"""
        from ..enumerable import Enumerable
        def keep_first(item, acc):
            kept, seen_keys = acc
            key = key_selector(item)
            if key not in seen_keys:
                kept.append(item)
                seen_keys.append(key)
            return acc
        kept, _ = self._enumerable.reduce(keep_first, ([], []))
        return Enumerable(kept)

    def uniq(self) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        return self.uniq_by(identity)
