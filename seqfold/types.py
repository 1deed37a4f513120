from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
A = TypeVar('A')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Action = Callable[[T], Any]


class Reduction(Enum):
    """signal returned by a fold step alongside the updated accumulator"""
    CONT = 'cont'
    HALT = 'halt'


class Order(Enum):
    """direction of a sort"""
    ASC = 'asc'
    DESC = 'desc'


# step and reducer both receive (element, accumulator)
Step = Callable[[T, A], Tuple[Reduction, A]]
Reducer = Callable[[T, A], A]


class EmptySequenceError(ValueError):
    """raised when an aggregation needs at least one element and got none"""

    def __init__(self, operation: str):
        super().__init__(f"cannot compute {operation} of empty sequence")
        self.operation = operation


def identity(item: T) -> T:
    return item
