from __future__ import annotations

from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor

# --- base enumerable implementation ---

class _BaseEnumerable(Generic[T]):
    def __init__(self, data: Iterable[T]):
        """init with the elements, copied into a list owned by this instance"""
        self._data: List[T] = list(data)

    def _get_data(self) -> List[T]:
        """get the underlying data. callers must not mutate it."""
        return self._data

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return self.to.count()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """an eager, fold-based enumerable over a finite sequence."""
    def __init__(self, data: Iterable[T]):
        super().__init__(data)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """represents a sorted sequence, allowing for subsequent orderings."""

    def __init__(self, source: List[T], sort_keys: List[Tuple[Callable, Order]]):
        super().__init__(self._apply_sort_keys(source, sort_keys))
        self._source = source
        self._sort_keys = sort_keys

    @staticmethod
    def _apply_sort_keys(data: List[T], sort_keys: List[Tuple[Callable, Order]]) -> List[T]:
        """apply all sorts at once using stable sort."""
        # python's sort is stable, so we sort from the last key to the first.
        # reverse=True keeps equal keys in their original relative order too.
        for key_selector, order in reversed(sort_keys):
            data = sorted(data, key=key_selector, reverse=order is Order.DESC)
        return data

    def then_by(self, key_selector: KeySelector[T, K], order: Order = Order.ASC) -> 'OrderedEnumerable[T]':
        """secondary sort, applied to ties of the existing keys"""
        return OrderedEnumerable(self._source, self._sort_keys + [(key_selector, order)])

    def then_by_descending(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        return self.then_by(key_selector, Order.DESC)
