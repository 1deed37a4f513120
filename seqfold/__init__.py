r"""
  ___  ___  __ _  / _|___ | | __| |
 / __|/ _ \/ _` || |_/ _ \| |/ _` |
 \__ \  __/ (_| ||  _| (_) | | (_| |
 |___/\___|\__, ||_|  \___/|_|\__,_|
              |_|
"""
import logging

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable

# expose the fold engine
from .fold import reduce, reduce_while

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    seq,
    S
)

# expose supporting types
from .types import (
    Reduction,
    Order,
    EmptySequenceError
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "reduce",
    "reduce_while",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "seq",
    "S",
    "Reduction",
    "Order",
    "EmptySequenceError"
]
