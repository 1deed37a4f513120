from __future__ import annotations
import typing
from collections import deque
from ..types import *
from ..fold import reduce, reduce_while, cont, halt, appending

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable

class _CoreOperations(Generic[T]):
    # --- fold engine ---

    def reduce_while(self: 'Enumerable[T]', step: Step[T, A], accumulator: A) -> A:
        """fold with early termination; step returns (Reduction, accumulator)"""
        return reduce_while(self._get_data(), step, accumulator)

    def reduce(self: 'Enumerable[T]', reducer: Reducer[T, A], accumulator: A) -> A:
        """fold over every element; reducer returns the next accumulator"""
        return reduce(self._get_data(), reducer, accumulator)

    # --- projections ---

    def map(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable(self.reduce(appending(selector), []))

    def filter(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """keep elements for which the predicate is true"""
        from ..enumerable import Enumerable
        def keep(item, acc):
            if predicate(item): acc.append(item)
            return acc
        return Enumerable(self.reduce(keep, []))

    def reject(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """drop elements for which the predicate is true"""
        return self.filter(lambda item: not predicate(item))

    def flat_map(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        from ..enumerable import Enumerable
        def extend(item, acc):
            acc.extend(selector(item))
            return acc
        return Enumerable(self.reduce(extend, []))

    # --- slicing ---

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        if count <= 0:
            return Enumerable([])
        def collect(item, acc):
            acc.append(item)
            return halt(acc) if len(acc) >= count else cont(acc)
        return Enumerable(self.reduce_while(collect, []))

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements up to the first one failing the predicate"""
        from ..enumerable import Enumerable
        def collect(item, acc):
            if not predicate(item): return halt(acc)
            acc.append(item)
            return cont(acc)
        return Enumerable(self.reduce_while(collect, []))

    def concat(self: 'Enumerable[T]', other: Iterable[T]) -> 'Enumerable[T]':
        """this sequence followed by other, in a new list; neither side is touched"""
        from ..enumerable import Enumerable
        combined = self.reduce(appending(), [])
        return Enumerable(reduce(list(other), appending(), combined))

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        from ..enumerable import Enumerable
        def prepend(item, acc):
            acc.appendleft(item)
            return acc
        return Enumerable(self.reduce(prepend, deque()))

    # --- ordering ---

    def sort(self: 'Enumerable[T]', order: Order = Order.ASC) -> 'OrderedEnumerable[T]':
        """stable sort of the elements themselves"""
        return self.sort_by(identity, order)

    def sort_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                order: Order = Order.ASC) -> 'OrderedEnumerable[T]':
        """stable sort by a key"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self._get_data(), [(key_selector, order)])

    def sort_by_descending(self: 'Enumerable[T]', key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """sort elements by a key in descending order"""
        return self.sort_by(key_selector, Order.DESC)
