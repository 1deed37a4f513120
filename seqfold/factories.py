import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable; the elements are copied, the source is untouched"""
    from .enumerable import Enumerable
    return Enumerable(data)

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(range(start, start + count))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable([item] * count)

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable([])

def generate(generator_func: Callable[[], T], count: int) -> 'Enumerable[T]':
    """generate sequence by calling a function count times"""
    from .enumerable import Enumerable
    return Enumerable(generator_func() for _ in range(count))

# --- aliases ---
seq = from_iterable
S = from_iterable
