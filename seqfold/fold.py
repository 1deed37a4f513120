"""
the fold engine. every traversal in the package goes through reduce_while;
nothing else walks a sequence or decides when to stop.
"""
import logging
from .types import *

logger = logging.getLogger(__name__)


def reduce_while(elements: List[T], step: Step[T, A], accumulator: A) -> A:
    """
    left fold that stops as soon as step returns Reduction.HALT.

    step is called as step(element, accumulator) and must return a
    (signal, accumulator) pair. the accumulator returned alongside HALT is the
    result; elements after the halting one are never visited. an empty
    sequence returns the initial accumulator without calling step.
    """
    for index, element in enumerate(elements):
        signal, accumulator = step(element, accumulator)
        if signal is Reduction.HALT:
            logger.debug("fold halted at index %d", index)
            return accumulator
        if signal is not Reduction.CONT:
            raise TypeError(f"fold step must return a Reduction signal, got {signal!r}")
    return accumulator


def reduce(elements: List[T], reducer: Reducer[T, A], accumulator: A) -> A:
    """left fold over every element; reduce_while with the signal fixed to CONT"""
    return reduce_while(elements, lambda element, acc: (Reduction.CONT, reducer(element, acc)), accumulator)


def cont(accumulator: A) -> Tuple[Reduction, A]:
    return Reduction.CONT, accumulator


def halt(accumulator: A) -> Tuple[Reduction, A]:
    return Reduction.HALT, accumulator


def appending(selector: Selector[T, U] = identity) -> Reducer[T, List[U]]:
    """reducer that appends selector(element) to a list accumulator in place"""
    def step(element: T, acc: List[U]) -> List[U]:
        acc.append(selector(element))
        return acc
    return step
