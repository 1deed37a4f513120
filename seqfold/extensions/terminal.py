from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..fold import cont, halt

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_MISSING = object()

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    # --- conversions ---

    def list(self) -> List[T]:
        """convert to a new list"""
        return list(self._enumerable._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def set(self) -> typing.Set[T]:
        """convert to set"""
        return set(self._enumerable._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Selector[T, V] = identity) -> Dict[K, V]:
        """convert to dictionary; later keys overwrite earlier ones"""
        def put(item, acc):
            acc[key_selector(item)] = value_selector(item)
            return acc
        return self._enumerable.reduce(put, {})

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    # --- counting ---

    def count(self) -> int:
        """number of elements"""
        return len(self._enumerable._get_data())

    def count_by(self, predicate: Predicate[T]) -> int:
        """number of elements satisfying the predicate"""
        return self._enumerable.reduce(lambda item, total: total + 1 if predicate(item) else total, 0)

    # --- short-circuiting queries ---

    def any(self, predicate: Predicate[T]) -> bool:
        """true on the first element satisfying the predicate; false when empty"""
        return self._enumerable.reduce_while(
            lambda item, _: halt(True) if predicate(item) else cont(False), False)

    def all(self, predicate: Predicate[T]) -> bool:
        """false on the first element failing the predicate; true when empty"""
        return self._enumerable.reduce_while(
            lambda item, _: cont(True) if predicate(item) else halt(False), True)

    def is_member_by(self, key: K, key_selector: KeySelector[T, K]) -> bool:
        """true if any element's key equals the given key"""
        return self.any(lambda item: key_selector(item) == key)

    def is_member(self, value: T) -> bool:
        """true if any element equals the given value"""
        return self.is_member_by(value, identity)

    def at(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """element at index, or default when index is outside [0, count)"""
        data = self._enumerable._get_data()
        return data[index] if 0 <= index < len(data) else default

    def _find(self, predicate: Predicate[T]) -> Any:
        return self._enumerable.reduce_while(
            lambda item, _: halt(item) if predicate(item) else cont(_MISSING), _MISSING)

    def first(self, predicate: Predicate[T] = lambda _: True) -> T:
        """get first element satisfying the predicate"""
        found = self._find(predicate)
        if found is not _MISSING: return found
        if not self._enumerable._get_data(): raise EmptySequenceError('first')
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Predicate[T] = lambda _: True,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        found = self._find(predicate)
        return default if found is _MISSING else found
