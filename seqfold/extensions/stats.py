from __future__ import annotations
import typing
import numbers
from ..types import *
from ..fold import reduce

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

Number = Union[int, float]

class StatsAccessor(Generic[T]):
    """
    numeric and ordering aggregations. each one is a fold seeded with the
    first element, so each needs a non-empty sequence and raises
    EmptySequenceError otherwise.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _split_first(self, operation: str) -> Tuple[T, List[T]]:
        """helper returning (first, rest), failing on an empty sequence."""
        data = self._enumerable._get_data()
        if not data: raise EmptySequenceError(operation)
        return data[0], data[1:]

    @staticmethod
    def _numeric(value: Any, operation: str) -> Number:
        if not isinstance(value, numbers.Number):
            raise TypeError(f"sequence contains non-numeric types for {operation}: {value!r}")
        return value

    # --- sum / product ---

    def sum_by(self, selector: Selector[T, Number]) -> Number:
        """sum of selector results"""
        first, rest = self._split_first('sum')
        return reduce(rest, lambda item, acc: acc + self._numeric(selector(item), 'sum'),
                      self._numeric(selector(first), 'sum'))

    def sum(self) -> Number:
        """calc sum"""
        return self.sum_by(identity)

    def product_by(self, selector: Selector[T, Number]) -> Number:
        """product of selector results"""
        first, rest = self._split_first('product')
        return reduce(rest, lambda item, acc: acc * self._numeric(selector(item), 'product'),
                      self._numeric(selector(first), 'product'))

    def product(self) -> Number:
        """calc product"""
        return self.product_by(identity)

    # --- min / max ---

    def min_by(self, selector: KeySelector[T, K]) -> T:
        """element with the smallest key; the earliest one wins ties"""
        return self._min_max_by(selector, 'minimum')[0]

    def min(self) -> T:
        """find minimum"""
        return self.min_by(identity)

    def max_by(self, selector: KeySelector[T, K]) -> T:
        """element with the largest key; the earliest one wins ties"""
        return self._min_max_by(selector, 'maximum')[1]

    def max(self) -> T:
        """find maximum"""
        return self.max_by(identity)

    def _min_max_by(self, selector: KeySelector[T, K], operation: str) -> Tuple[T, T]:
        """single pass tracking both extremes, evaluating the selector once per element"""
        first, rest = self._split_first(operation)
        first_key = selector(first)

        def step(item, acc):
            low, low_key, high, high_key = acc
            key = selector(item)
            if key < low_key: low, low_key = item, key
            if key > high_key: high, high_key = item, key
            return low, low_key, high, high_key

        low, _, high, _ = reduce(rest, step, (first, first_key, first, first_key))
        return low, high

    def min_max_by(self, selector: KeySelector[T, K]) -> Tuple[T, T]:
        """(element with the smallest key, element with the largest key)"""
        return self._min_max_by(selector, 'min_max')

    def min_max(self) -> Tuple[T, T]:
        """find minimum and maximum together"""
        return self.min_max_by(identity)
