from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """group elements by a key, keeping their relative order inside each group"""
        def add(item, groups):
            groups.setdefault(key_selector(item), []).append(item)
            return groups
        return self._enumerable.reduce(add, {})

    def frequencies_by(self, key_selector: KeySelector[T, K]) -> Dict[K, int]:
        """count occurrences of each key"""
        def tally(item, counts):
            key = key_selector(item)
            counts[key] = counts.get(key, 0) + 1
            return counts
        return self._enumerable.reduce(tally, {})

    def frequencies(self) -> Dict[T, int]:
        """count occurrences of each element"""
        return self.frequencies_by(identity)

    def split_with(self, predicate: Predicate[T]) -> Tuple['Enumerable[T]', 'Enumerable[T]']:
        """partition into (matching, non-matching), testing every element"""
        from ..enumerable import Enumerable
        def place(item, acc):
            (acc[0] if predicate(item) else acc[1]).append(item)
            return acc
        left, right = self._enumerable.reduce(place, ([], []))
        return Enumerable(left), Enumerable(right)

    def split_while(self, predicate: Predicate[T]) -> Tuple['Enumerable[T]', 'Enumerable[T]']:
        """
        split at the first element failing the predicate. everything before it
        goes left, it and everything after goes right; once the split happens
        the predicate is no longer called.
        """
        from ..enumerable import Enumerable
        def place(item, acc):
            left, right, in_left = acc
            if in_left and predicate(item):
                left.append(item)
                return left, right, True
            right.append(item)
            return left, right, False
        left, right, _ = self._enumerable.reduce(place, ([], [], True))
        return Enumerable(left), Enumerable(right)
